import pytest

from h2m.files import read_file, write_file


def test_round_trip_bytes(tmp_path):
    target = tmp_path / "out.md"
    payload = b"# Titre\n\nbody\n"
    write_file(target, payload)
    assert read_file(target) == payload


def test_round_trip_text_is_utf8(tmp_path):
    target = tmp_path / "out.html"
    write_file(str(target), "caf\u00e9")
    assert read_file(str(target)) == "caf\u00e9".encode("utf-8")


def test_write_truncates_existing_content(tmp_path):
    target = tmp_path / "out.md"
    write_file(target, b"a much longer first version")
    write_file(target, b"short")
    assert read_file(target) == b"short"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.md")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_file(tmp_path / "nope" / "out.md", b"x")