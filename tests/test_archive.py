import zipfile
from io import BytesIO

import pytest

from conftest import build_zip
from html2scorm.archive import ArchiveBuilder, ArchiveEntry, read_archive
from html2scorm.errors import ArchiveReadError


def test_read_archive_keeps_order_and_directories():
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr("site/", b"")
        zf.writestr("site/index.html", "<html></html>")
        zf.writestr("site/a.css", "a{}")
    entries = read_archive(buffer.getvalue())
    assert list(entries) == ["site/", "site/index.html", "site/a.css"]
    assert entries["site/"].is_directory
    assert entries["site/a.css"].content == b"a{}"


def test_read_archive_rejects_garbage():
    with pytest.raises(ArchiveReadError):
        read_archive(b"this is not a zip file")


def test_read_archive_rejects_truncated_zip():
    data = build_zip({"index.html": "<html>" + "x" * 2000 + "</html>"})
    with pytest.raises(ArchiveReadError):
        read_archive(data[: len(data) // 2])


def test_builder_writes_entries_with_fixed_timestamps():
    builder = ArchiveBuilder()
    builder.put(ArchiveEntry(path="docs/", is_directory=True))
    builder.put(ArchiveEntry(path="docs/readme.txt", content="hi"))
    builder.put(ArchiveEntry(path="img.png", content=b"\x00\x01"))
    assert "img.png" in builder

    with zipfile.ZipFile(BytesIO(builder.serialize())) as zf:
        infos = {info.filename: info for info in zf.infolist()}
        assert zf.read("docs/readme.txt") == b"hi"
        assert zf.read("img.png") == b"\x00\x01"
    assert infos["docs/"].is_dir()
    assert infos["docs/readme.txt"].date_time == (1980, 1, 1, 0, 0, 0)


def test_builder_output_is_stable():
    def build():
        builder = ArchiveBuilder()
        builder.put(ArchiveEntry(path="index.html", content="<html></html>"))
        return builder.serialize()

    assert build() == build()
