"""Turns an uploaded HTML page or zipped site into a SCORM 1.2 package."""

import logging

from . import config
from .archive import ArchiveEntry, extension_of, read_archive
from .errors import ConversionFailed, NoEntryPointFound
from .injector import inject
from .manifest import generate
from .models import InputArtifact, OutputPackage, PackageManifest
from .naming import derive_title, random_id

logger = logging.getLogger(__name__)


def _is_ignored(path):
    return path.startswith(config.IGNORED_ENTRY_PREFIXES)


def select_entry(paths):
    """Pick the launch page from archive paths given in enumeration order.

    An ``index.html`` (any case) wins, shallowest first. Otherwise the
    shortest ``.html``/``.htm`` path. Ties keep the earlier path.
    """
    paths = [p for p in paths if not _is_ignored(p)]

    index_pages = [p for p in paths if p.rsplit("/", 1)[-1].lower() == config.ENTRY_NAME]
    if index_pages:
        return min(index_pages, key=lambda p: p.count("/"))

    html_pages = [p for p in paths if extension_of(p) in config.HTML_EXTENSIONS]
    if html_pages:
        return min(html_pages, key=len)

    raise NoEntryPointFound("archive contains no .html or .htm file")


def _load_entries(artifact: InputArtifact):
    """Return ``({path: ArchiveEntry}, entry_path)`` for an artifact."""
    if artifact.kind == "html":
        entry = ArchiveEntry(path=config.ENTRY_NAME, content=artifact.data)
        return {entry.path: entry}, entry.path

    entries = read_archive(artifact.data)
    files = [path for path, entry in entries.items() if not entry.is_directory]
    entry_path = select_entry(files)

    if config.MANIFEST_NAME in entries:
        logger.warning("Replacing existing %s in %s", config.MANIFEST_NAME, artifact.name)
        del entries[config.MANIFEST_NAME]

    for path, entry in entries.items():
        if entry.is_directory or entry.is_binary or path == entry_path:
            continue
        # AppleDouble files carry binary data whatever their extension.
        if _is_ignored(path):
            continue
        # Decode now so bad text fails the conversion instead of the LMS.
        entry.content = entry.read_text()
    return entries, entry_path


def repackage(artifact: InputArtifact, identifier=None) -> OutputPackage:
    """Build the output package for one upload.

    Raises a :class:`ConversionError` subclass on failure; no partial package
    is ever returned.
    """
    entries, entry_path = _load_entries(artifact)
    entry = entries[entry_path]
    entry.content = inject(entry.read_text())
    logger.info("Using %s as SCO entry for %s", entry_path, artifact.name)

    manifest = PackageManifest(
        identifier=identifier or random_id(config.IDENTIFIER_PREFIX),
        title=derive_title(artifact.name),
        entry_href=entry_path,
        files=tuple(p for p, e in entries.items() if not e.is_directory and p != entry_path),
    )
    entries[config.MANIFEST_NAME] = ArchiveEntry(path=config.MANIFEST_NAME, content=generate(manifest))
    return OutputPackage(entries=entries, entry_path=entry_path, manifest=manifest)


def build_package(artifact: InputArtifact, identifier=None):
    """Repackage and serialize. Returns ``(OutputPackage, zip bytes)``."""
    package = repackage(artifact, identifier=identifier)
    try:
        data = package.to_zip()
    except Exception as exc:
        logger.exception("Failed to serialize package for %s", artifact.name)
        raise ConversionFailed(f"could not write ZIP: {exc}") from exc
    logger.info("Built %s: %d files, %d bytes", artifact.name, package.file_count, len(data))
    return package, data
