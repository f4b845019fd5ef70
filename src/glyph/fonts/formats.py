"""
Font Format Helpers
===================

Allow-list of font container formats and the data URL codec used for
uploads and previews.
"""

import base64
import binascii
import re
from pathlib import Path

from glyph.core.exceptions import InvalidEncodingError

SUPPORTED_FORMATS: tuple[str, ...] = (
    ".ttf",
    ".otf",
    ".woff",
    ".woff2",
    ".ttc",
    ".eot",
    ".svg",
    ".dfont",
    ".fon",
    ".pfa",
    ".pfb",
)

MIME_TYPES: dict[str, str] = {
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttc": "font/collection",
    ".eot": "application/vnd.ms-fontobject",
    ".svg": "image/svg+xml",
    ".dfont": "application/x-dfont",
    ".fon": "application/x-font-fon",
    ".pfa": "application/x-font-type1",
    ".pfb": "application/x-font-type1",
}

DEFAULT_MIME_TYPE = "application/octet-stream"

# data:<mime>;base64,<payload>, single line
_DATA_URL_RE = re.compile(r"data:([^;\n]+);base64,([^\n]+)")


def split_font_name(file_name: str) -> tuple[str, str]:
    """Split a file name into (stem, lowercase extension)."""
    path = Path(file_name)
    return path.stem, path.suffix.lower()


def is_supported_font(file_name: str) -> bool:
    """Check whether a file name carries an allow-listed font extension."""
    return split_font_name(file_name)[1] in SUPPORTED_FORMATS


def format_of(file_name: str) -> str:
    """Get the font format (extension without the dot)."""
    return split_font_name(file_name)[1].lstrip(".")


def mime_type_for(extension: str) -> str:
    """Get the MIME type used for a font extension."""
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def parse_data_url(payload: str) -> tuple[str, bytes]:
    """
    Decode a base64 data URL.

    Args:
        payload: String of the form ``data:<mime>;base64,<data>``

    Returns:
        Tuple of (mime type, decoded bytes)

    Raises:
        InvalidEncodingError: If the payload does not match or is not valid base64
    """
    if not isinstance(payload, str):
        raise InvalidEncodingError("payload is not a string")

    match = _DATA_URL_RE.fullmatch(payload)
    if not match:
        raise InvalidEncodingError()

    mime_type, body = match.groups()
    try:
        data = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(str(e)) from e

    return mime_type, data


def build_data_url(mime_type: str, data: bytes) -> str:
    """Encode bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
