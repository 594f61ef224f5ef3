"""Settings for the converter. Plain constants, edited in place."""

import logging

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# --- Input classification ---
HTML_EXTENSIONS = ("html", "htm")
ZIP_EXTENSIONS = ("zip",)
HTML_MEDIA_TYPES = ("text/html",)
ZIP_MEDIA_TYPES = ("application/zip", "application/x-zip-compressed")

# Copied through as raw bytes. Everything else is treated as UTF-8 text.
BINARY_EXTENSIONS = frozenset([
    "png", "jpg", "jpeg", "gif", "webp", "svg", "ico",
    "mp3", "wav", "ogg", "mp4", "webm", "mov",
    "woff", "woff2", "ttf", "otf", "eot",
    "pdf", "zip",
])

# Never considered as the launch page (macOS resource forks).
IGNORED_ENTRY_PREFIXES = ("__MACOSX/",)

# --- Package layout ---
ENTRY_NAME = "index.html"
MANIFEST_NAME = "imsmanifest.xml"
OUTPUT_SUFFIX = "_scorm_1.2.zip"
DEFAULT_TITLE = "SCORM Activity"
DEFAULT_SLUG = "scorm_activity"

# zipfile rejects timestamps before 1980
FIXED_ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

# --- Manifest ---
IDENTIFIER_PREFIX = "com.html2scorm.package"
ORGANIZATION_ID = "ORG-1"
ITEM_ID = "ITEM-1"
RESOURCE_ID = "RES-1"

# --- Injected runtime ---
API_MAX_PARENT_HOPS = 30
API_RETRY_INTERVAL_MS = 250
API_RETRY_MAX_ATTEMPTS = 20
RUNTIME_MARKER = 'data-scorm-runtime="1.2"'
