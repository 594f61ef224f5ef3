from dataclasses import dataclass, field

from . import config
from .archive import ArchiveBuilder, ArchiveEntry, extension_of
from .errors import UnsupportedFileType

__all__ = ["ArchiveEntry", "InputArtifact", "OutputPackage", "PackageManifest"]


@dataclass(frozen=True)
class InputArtifact:
    kind: str  # "html" or "zip"
    name: str
    data: bytes

    @classmethod
    def from_upload(cls, name, data, media_type=None):
        """Classify an uploaded file by its name, then by its media type."""
        ext = extension_of(name)
        if ext in config.HTML_EXTENSIONS:
            kind = "html"
        elif ext in config.ZIP_EXTENSIONS:
            kind = "zip"
        elif media_type in config.HTML_MEDIA_TYPES:
            kind = "html"
        elif media_type in config.ZIP_MEDIA_TYPES:
            kind = "zip"
        else:
            raise UnsupportedFileType(
                f"{name!r} ({media_type or 'unknown type'}) is neither HTML nor ZIP"
            )
        return cls(kind=kind, name=name, data=bytes(data))


@dataclass(frozen=True)
class PackageManifest:
    identifier: str
    title: str
    entry_href: str
    organization_id: str = config.ORGANIZATION_ID
    item_id: str = config.ITEM_ID
    resource_id: str = config.RESOURCE_ID
    # Other package files, listed after the entry in the resource.
    files: tuple = ()


@dataclass
class OutputPackage:
    entries: dict = field(default_factory=dict)
    entry_path: str = config.ENTRY_NAME
    manifest: PackageManifest | None = None

    @property
    def file_count(self) -> int:
        return sum(1 for entry in self.entries.values() if not entry.is_directory)

    def to_zip(self) -> bytes:
        builder = ArchiveBuilder()
        for entry in self.entries.values():
            builder.put(entry)
        return builder.serialize()
