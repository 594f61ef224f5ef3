import re
import time
import uuid

from . import config

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9]")
_UNDERSCORES_RE = re.compile(r"_+")


def strip_extension(name: str) -> str:
    return _EXTENSION_RE.sub("", name)


def base_name(name: str) -> str:
    """Last path segment, accepting either separator."""
    return name.replace("\\", "/").rsplit("/", 1)[-1]


def safe_slug(name: str) -> str:
    """Filesystem-safe, lowercase name for the downloaded package."""
    slug = _UNSAFE_RE.sub("_", strip_extension(name))
    slug = _UNDERSCORES_RE.sub("_", slug).strip("_").lower()
    return slug or config.DEFAULT_SLUG


def derive_title(name: str) -> str:
    title = strip_extension(base_name(name)).strip()
    return title or config.DEFAULT_TITLE


def output_filename(name: str) -> str:
    return f"{safe_slug(base_name(name))}{config.OUTPUT_SUFFIX}"


def random_id(prefix: str = config.IDENTIFIER_PREFIX) -> str:
    """Identifier unique enough for one manifest.

    Millisecond clock plus eight random hex digits. Nothing checks the value
    later, so a collision costs nothing.
    """
    stamp = format(int(time.time() * 1000), "x")
    return f"{prefix}_{stamp}_{uuid.uuid4().hex[:8]}"
