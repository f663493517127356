import os

import pytest

from powermock_opens import get_opts, main


def test_generate(tmp_path, java_home, make_jmod, capsys):
    make_jmod("java.base", ["classes/java/util/Foo.class"])
    root = tmp_path / "build"
    assert main(["--java-home", str(java_home), "--root", str(root), "generate"]) == 0
    arg_file = os.path.join(str(root), "gbuild", "powermock-open-modules.argfile")
    out = capsys.readouterr().out
    assert out.strip() == "@" + os.path.abspath(arg_file).replace("\\", "/")
    with open(arg_file) as fp:
        assert fp.read() == "--add-opens=java.base/java.util=ALL-UNNAMED\n"


def test_generate_is_default_command(tmp_path, java_home):
    root = tmp_path / "build"
    assert main(["--quiet", "--java-home", str(java_home), "--root", str(root)]) == 0
    assert os.path.isfile(os.path.join(str(root), "gbuild", "powermock-open-modules.argfile"))


def test_modules(capsys):
    assert main(["modules"]) == 0
    assert "java.base" in capsys.readouterr().out.splitlines()


def test_opens(tmp_path, java_home, make_jmod, capsys):
    make_jmod("java.base", ["classes/java/util/Foo.class", "classes/java/util/concurrent/Bar.class"])
    assert main(["--java-home", str(java_home), "--root", str(tmp_path), "opens"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "--add-opens=java.base/java.util=ALL-UNNAMED",
        "--add-opens=java.base/java.util.concurrent=ALL-UNNAMED",
    ]
    assert not os.path.exists(tmp_path / "gbuild")


def test_verbose_reports_skipped_modules(tmp_path, java_home, capsys):
    assert main(["-v", "--java-home", str(java_home), "opens"]) == 0
    assert get_opts().verbose
    assert "Skipping module java.base" in capsys.readouterr().out


def test_no_warning(tmp_path, capsys):
    assert main(["--no-warning", "--java-home", str(tmp_path / "missing"), "opens"]) == 0
    assert "WARNING" not in capsys.readouterr().err


def test_unknown_command(capsys):
    with pytest.raises(SystemExit) as e:
        main(["frobnicate"])
    assert e.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as e:
        main(["--version"])
    assert e.value.code == 0
    assert "powermock-opens version" in capsys.readouterr().out
