"""Package a single HTML file, or a zipped static site, as a SCORM 1.2 course."""

from .errors import (
    ArchiveReadError,
    ConversionError,
    ConversionFailed,
    EncodingError,
    NoEntryPointFound,
    UnsupportedFileType,
)
from .injector import inject
from .manifest import generate
from .models import ArchiveEntry, InputArtifact, OutputPackage, PackageManifest
from .naming import derive_title, output_filename, random_id, safe_slug
from .repackager import repackage
from .session import ConversionResult, ConversionSession

__all__ = [
    "ArchiveEntry",
    "ArchiveReadError",
    "ConversionError",
    "ConversionFailed",
    "ConversionResult",
    "ConversionSession",
    "EncodingError",
    "InputArtifact",
    "NoEntryPointFound",
    "OutputPackage",
    "PackageManifest",
    "UnsupportedFileType",
    "derive_title",
    "generate",
    "inject",
    "output_filename",
    "random_id",
    "repackage",
    "safe_slug",
]
