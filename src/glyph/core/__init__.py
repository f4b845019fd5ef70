"""Core components for the glyph font asset service."""

from .config import GlyphConfig
from .exceptions import (
    ConfigurationError,
    DirectoryReadError,
    FontIOError,
    GlyphError,
    InvalidEncodingError,
    StorageError,
    UnsupportedFormatError,
    ValidationError,
)
from .models import FontFile, FontInfo, GlyphPayload, MemoryEntry, UploadResult

__all__ = [
    "ConfigurationError",
    "DirectoryReadError",
    "FontFile",
    "FontIOError",
    "FontInfo",
    "GlyphConfig",
    "GlyphError",
    "GlyphPayload",
    "InvalidEncodingError",
    "MemoryEntry",
    "StorageError",
    "UnsupportedFormatError",
    "UploadResult",
    "ValidationError",
]
