import io
import sys

import pytest

from powermock_opens._impl.support.envvars import env_var_to_bool, get_env, str_to_bool
from powermock_opens._impl.support.logging import _check_stdout_encoding, abort, colorize, log, logv, logvv, warn
from powermock_opens._impl.support.options import set_opts
from powermock_opens._impl.support.system import is_continuous_integration
from powermock_opens._impl.util import SafeFileCreation


def test_str_to_bool():
    for value in ["true", "True", "1", "yes"]:
        assert str_to_bool(value) is True
    for value in ["false", "FALSE", "0", "no"]:
        assert str_to_bool(value) is False
    with pytest.raises(SystemExit):
        str_to_bool("maybe")


def test_env_var_to_bool(monkeypatch):
    monkeypatch.delenv("POWERMOCK_OPENS_TEST_FLAG", raising=False)
    assert env_var_to_bool("POWERMOCK_OPENS_TEST_FLAG") is False
    assert env_var_to_bool("POWERMOCK_OPENS_TEST_FLAG", "1") is True
    monkeypatch.setenv("POWERMOCK_OPENS_TEST_FLAG", "")
    assert get_env("POWERMOCK_OPENS_TEST_FLAG", "default") == "default"
    monkeypatch.setenv("POWERMOCK_OPENS_TEST_FLAG", "yes")
    assert env_var_to_bool("POWERMOCK_OPENS_TEST_FLAG") is True


def test_abort_with_message(capsys):
    with pytest.raises(SystemExit) as e:
        abort("something broke", context="module java.base")
    assert e.value.code == 1
    assert "module java.base:\nsomething broke" in capsys.readouterr().err


def test_abort_with_code():
    with pytest.raises(SystemExit) as e:
        abort(3)
    assert e.value.code == 3


def test_log_levels(capsys):
    log("plain")
    logv("verbose")
    logvv("very verbose")
    assert capsys.readouterr().out == "plain\n"

    set_opts(verbose=True)
    logv("verbose")
    logvv("very verbose")
    assert capsys.readouterr().out == "verbose\n"

    set_opts(very_verbose=True)
    logvv("very verbose")
    assert capsys.readouterr().out == "very verbose\n"

    set_opts(quiet=True)
    log("plain")
    warn("careful")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_warn(capsys):
    warn("careful", context="project ':'")
    assert capsys.readouterr().err == "WARNING: project ':':\ncareful\n"
    set_opts(warn=False)
    warn("careful")
    assert capsys.readouterr().err == ""


def test_colorize_without_tty(capsys):
    # captured streams are not terminals
    assert colorize("text") == "text"
    assert colorize(None) is None


def test_safe_file_creation_keeps_file_on_error(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("original")
    with pytest.raises(RuntimeError):
        with SafeFileCreation(str(target)) as sfc:
            with open(sfc.tmpPath, "w") as fp:
                fp.write("partial")
            raise RuntimeError("interrupted")
    assert target.read_text() == "original"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["file.txt"]


def _ascii_stream():
    return io.TextIOWrapper(io.BytesIO(), encoding="ascii", newline="\n")


def test_is_continuous_integration(monkeypatch):
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.delenv("CONTINUOUS_INTEGRATION", raising=False)
    assert is_continuous_integration() is False
    monkeypatch.setenv("CI", "false")
    assert is_continuous_integration() is False
    monkeypatch.setenv("CI", "woodpecker")
    assert is_continuous_integration() is True
    monkeypatch.delenv("CI")
    monkeypatch.setenv("CONTINUOUS_INTEGRATION", "1")
    assert is_continuous_integration() is True


def test_non_unicode_stdout_warns(monkeypatch, capsys):
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.delenv("CONTINUOUS_INTEGRATION", raising=False)
    monkeypatch.delenv("POWERMOCK_OPENS_CHECK_IOENCODING", raising=False)
    monkeypatch.setattr(sys, "stdout", _ascii_stream())
    _check_stdout_encoding()
    err = capsys.readouterr().err
    assert err.startswith("WARNING")
    assert "PYTHONIOENCODING=utf-8" in err


def test_non_unicode_stdout_aborts_on_ci(monkeypatch, capsys):
    monkeypatch.setenv("CI", "true")
    monkeypatch.delenv("POWERMOCK_OPENS_CHECK_IOENCODING", raising=False)
    monkeypatch.setattr(sys, "stdout", _ascii_stream())
    with pytest.raises(SystemExit):
        _check_stdout_encoding()
    assert "does not use a unicode encoding" in capsys.readouterr().err


def test_stdout_encoding_check_disabled(monkeypatch, capsys):
    monkeypatch.setenv("CI", "true")
    monkeypatch.setenv("POWERMOCK_OPENS_CHECK_IOENCODING", "0")
    monkeypatch.setattr(sys, "stdout", _ascii_stream())
    _check_stdout_encoding()
    assert capsys.readouterr().err == ""


def test_unencodable_message_is_escaped(capsys):
    stream = _ascii_stream()
    log("üöä", file=stream)
    stream.flush()
    assert stream.buffer.getvalue() == b"\\xfc\\xf6\\xe4\n"
    assert "[ENCODING ERROR]" in capsys.readouterr().err
