import zipfile

import pytest

from powermock_opens import set_opts

JMOD_MAGIC = b"JM\x01\x00"


@pytest.fixture(autouse=True)
def _default_opts():
    set_opts(reset=True)
    yield
    set_opts(reset=True)


@pytest.fixture
def java_home(tmp_path):
    home = tmp_path / "jdk"
    (home / "jmods").mkdir(parents=True)
    return home


@pytest.fixture
def make_jmod(java_home):
    """
    Creates ``<java_home>/jmods/<module>.jmod`` holding `entries`. Like the files produced by the
    jmod tool, the zip archive is preceded by the jmod magic number unless `magic` is False.
    """
    def _make(module, entries, magic=True):
        path = java_home / "jmods" / (module + ".jmod")
        if magic:
            path.write_bytes(JMOD_MAGIC)
            # appending to a file that is not a zip archive puts the archive after the existing bytes
            mode = "a"
        else:
            mode = "w"
        with zipfile.ZipFile(path, mode) as zf:
            for name in entries:
                zf.writestr(name, b"\xca\xfe\xba\xbe")
        return path

    return _make
