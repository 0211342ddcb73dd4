import errno
import json

import pytest

from domain.taxonomy import LoadError
from infrastructure.io import describe_io_error, ensure_exists, read_taxonomy_file, write_taxonomy_file


def test_read_then_write_reproduces_document(tmp_path, beverage_document) -> None:
    source = tmp_path / "beverages.json"
    source.write_text(json.dumps(beverage_document), encoding="utf-8")

    taxonomy = read_taxonomy_file(source)
    out = write_taxonomy_file(tmp_path / "out" / "copy.json", taxonomy)

    assert out.exists()
    assert json.loads(out.read_text(encoding="utf-8")) == beverage_document


def test_read_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_taxonomy_file(tmp_path / "absent.json")


def test_read_malformed_file(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoadError):
        read_taxonomy_file(path)


def test_ensure_exists(tmp_path) -> None:
    ensure_exists(tmp_path, "workspace")
    with pytest.raises(FileNotFoundError, match="Missing taxonomy"):
        ensure_exists(tmp_path / "x.json", "taxonomy")


def test_describe_missing_file(tmp_path) -> None:
    title, message, details = describe_io_error(FileNotFoundError("gone"), tmp_path / "a.json")
    assert title == "File Not Found"
    assert str(tmp_path / "a.json") in details


@pytest.mark.parametrize("writing, verb", [(False, "read"), (True, "write to")])
def test_describe_permission_error(tmp_path, writing: bool, verb: str) -> None:
    title, _, details = describe_io_error(PermissionError("denied"), tmp_path / "a.json", writing=writing)
    assert title == "Permission Denied"
    assert f"permission to {verb}" in details


def test_describe_disk_full() -> None:
    error = OSError(errno.ENOSPC, "No space left on device")
    assert describe_io_error(error, None, writing=True)[0] == "Disk Full"


@pytest.mark.parametrize("writing, title", [(False, "Error Loading File"), (True, "Error Saving File")])
def test_describe_other_errors(writing: bool, title: str) -> None:
    error = OSError(errno.EIO, "I/O error")
    got_title, _, details = describe_io_error(error, None, writing=writing)
    assert got_title == title
    assert "I/O error" in details
