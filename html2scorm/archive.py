"""Thin layer over :mod:`zipfile` for reading uploads and writing packages."""

import logging
import zipfile
import zlib
from dataclasses import dataclass
from io import BytesIO

from . import config
from .errors import ArchiveReadError, EncodingError

logger = logging.getLogger(__name__)

# What zipfile raises for truncated, encrypted or oddly compressed members.
_READ_ERRORS = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
    OSError,
)


def extension_of(path: str) -> str:
    """Lowercase extension of the last path segment, '' if there is none."""
    last = path.rsplit("/", 1)[-1]
    if "." not in last:
        return ""
    return last.rsplit(".", 1)[-1].lower()


@dataclass
class ArchiveEntry:
    path: str
    is_directory: bool = False
    content: bytes | str = b""
    date_time: tuple = config.FIXED_ZIP_DATE_TIME

    @property
    def is_binary(self) -> bool:
        return extension_of(self.path) in config.BINARY_EXTENSIONS

    def read_bytes(self) -> bytes:
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return self.content

    def read_text(self) -> str:
        if isinstance(self.content, str):
            return self.content
        try:
            return self.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"{self.path} is not valid UTF-8 text: {exc}") from exc


def read_archive(data: bytes) -> dict:
    """Parse zip bytes into ``{path: ArchiveEntry}`` in the archive's own order.

    Member contents are read eagerly so a damaged member fails here, before
    any output is built.
    """
    entries = {}
    try:
        with zipfile.ZipFile(BytesIO(data)) as zf:
            for info in zf.infolist():
                if info.is_dir():
                    entries[info.filename] = ArchiveEntry(
                        path=info.filename, is_directory=True, date_time=info.date_time
                    )
                    continue
                entries[info.filename] = ArchiveEntry(
                    path=info.filename,
                    content=zf.read(info),
                    date_time=info.date_time,
                )
    except _READ_ERRORS as exc:
        raise ArchiveReadError(f"could not read ZIP archive: {exc}") from exc
    logger.debug("Read %d archive entries", len(entries))
    return entries


class ArchiveBuilder:
    """Collects entries in memory and writes them out as one zip."""

    def __init__(self, compression=zipfile.ZIP_DEFLATED):
        self.compression = compression
        self._entries = {}

    def put(self, entry: ArchiveEntry):
        self._entries[entry.path] = entry

    def __contains__(self, path):
        return path in self._entries

    def serialize(self) -> bytes:
        buffer = BytesIO()
        with zipfile.ZipFile(buffer, mode="w", compression=self.compression) as zf:
            for entry in self._entries.values():
                info = zipfile.ZipInfo(entry.path, date_time=entry.date_time)
                if entry.is_directory:
                    info.external_attr = 0o40755 << 16 | 0x10  # MS-DOS directory flag
                    zf.writestr(info, b"")
                    continue
                info.compress_type = self.compression
                info.external_attr = 0o644 << 16
                zf.writestr(info, entry.read_bytes())
        return buffer.getvalue()
