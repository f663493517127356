import os
import stat
import sys

import pytest

from powermock_opens import get_java_home
from powermock_opens._impl.jdk import java_home_property


def _fake_java(directory, output, exit_code=0):
    java = directory / "java"
    # only shell builtins, PATH may not contain the usual tools
    java.write_text(f"#!/bin/sh\nprintf '%s\\n' '{output}' >&2\nexit {exit_code}\n")
    java.chmod(java.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return java


def test_explicit_java_home_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("JAVA_HOME", str(tmp_path / "from-env"))
    assert get_java_home(str(tmp_path / "explicit")) == str(tmp_path / "explicit")


def test_java_home_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("JAVA_HOME", str(tmp_path / "from-env"))
    assert get_java_home() == str(tmp_path / "from-env")


def test_no_java_home(monkeypatch, tmp_path):
    monkeypatch.delenv("JAVA_HOME", raising=False)
    monkeypatch.setenv("PATH", str(tmp_path))
    assert get_java_home() is None


@pytest.mark.skipif(sys.platform.startswith("win32"), reason="uses a shell script as java executable")
def test_java_home_property_of_java_on_path(monkeypatch, tmp_path):
    _fake_java(tmp_path, "Property settings:\n    java.class.path = \n    java.home = /opt/jdk-21\n    java.version = 21\n\nopenjdk version \"21\"")
    monkeypatch.delenv("JAVA_HOME", raising=False)
    monkeypatch.setenv("PATH", str(tmp_path))
    assert get_java_home() == "/opt/jdk-21"


@pytest.mark.skipif(sys.platform.startswith("win32"), reason="uses a shell script as java executable")
def test_java_home_property_failures(tmp_path):
    failing = tmp_path / "failing"
    failing.mkdir()
    assert java_home_property(str(_fake_java(failing, "Error: broken", exit_code=1))) is None
    silent = tmp_path / "silent"
    silent.mkdir()
    assert java_home_property(str(_fake_java(silent, "openjdk version \"21\""))) is None
    assert java_home_property(os.path.join(str(tmp_path), "does-not-exist")) is None


@pytest.mark.skipif(sys.platform.startswith("win32"), reason="uses a shell script as java executable")
def test_java_home_property_timeout(tmp_path):
    java = tmp_path / "java"
    java.write_text("#!/bin/sh\nexec sleep 5\n")
    java.chmod(java.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    assert java_home_property(str(java), timeout=0.5) is None
