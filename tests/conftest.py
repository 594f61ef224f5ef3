import zipfile
from io import BytesIO

import pytest


def build_zip(files):
    """Zip ``{path: bytes | str}`` in the given order."""
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for path, content in files.items():
            zf.writestr(path, content)
    return buffer.getvalue()


def read_zip(data):
    with zipfile.ZipFile(BytesIO(data)) as zf:
        return {name: zf.read(name) for name in zf.namelist()}


@pytest.fixture
def png_bytes():
    # PNG signature plus bytes that are not valid UTF-8
    return b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe\x80"


@pytest.fixture
def site_zip(png_bytes):
    return build_zip({
        "assets/logo.png": png_bytes,
        "lesson/index.html": "<html><body><h1>Lesson</h1></body></html>",
        "lesson/style.css": "body { color: #333; }\n/* café */\n",
    })
