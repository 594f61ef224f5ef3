import pytest

from html2scorm.errors import EncodingError, UnsupportedFileType
from html2scorm.models import ArchiveEntry, InputArtifact


@pytest.mark.parametrize("name, media_type, kind", [
    ("page.html", None, "html"),
    ("page.HTM", None, "html"),
    ("site.ZIP", None, "zip"),
    ("upload", "text/html", "html"),
    ("upload.bin", "application/zip", "zip"),
    ("upload", "application/x-zip-compressed", "zip"),
    ("page.html", "application/zip", "html"),
])
def test_from_upload_classifies(name, media_type, kind):
    artifact = InputArtifact.from_upload(name, b"data", media_type)
    assert artifact.kind == kind
    assert artifact.name == name
    assert artifact.data == b"data"


def test_from_upload_rejects_other_types():
    with pytest.raises(UnsupportedFileType):
        InputArtifact.from_upload("notes.txt", b"hello", "text/plain")


def test_extension_wins_over_media_type():
    artifact = InputArtifact.from_upload("course.zip", b"PK", "text/html")
    assert artifact.kind == "zip"


def test_entry_binary_detection():
    assert ArchiveEntry(path="img/Logo.PNG").is_binary
    assert ArchiveEntry(path="fonts/a.woff2").is_binary
    assert not ArchiveEntry(path="js/app.js").is_binary
    assert not ArchiveEntry(path="README").is_binary


def test_entry_read_text_rejects_invalid_utf8():
    entry = ArchiveEntry(path="style.css", content=b"\xff\xfe body {}")
    with pytest.raises(EncodingError):
        entry.read_text()


def test_entry_text_round_trip():
    entry = ArchiveEntry(path="a.txt", content="héllo")
    assert entry.read_bytes() == "héllo".encode("utf-8")
    assert entry.read_text() == "héllo"
