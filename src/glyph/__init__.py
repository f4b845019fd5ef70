"""Glyph Font Asset Service
========================

Font-file management for a chat-bot console: lists font files on disk,
accepts uploads and deletions, and loads fonts on demand into an in-memory
cache for preview as data URLs.
"""

__version__ = "1.0.0"
__author__ = "Glyph Team"

from .console import GlyphConsole
from .core.config import GlyphConfig
from .core.exceptions import GlyphError, StorageError, ValidationError
from .core.models import FontFile, FontInfo, GlyphPayload, MemoryEntry, UploadResult
from .fonts import FontAssetManager, FontCache

__all__ = [
    "FontAssetManager",
    "FontCache",
    "FontFile",
    "FontInfo",
    "GlyphConfig",
    "GlyphConsole",
    "GlyphError",
    "GlyphPayload",
    "MemoryEntry",
    "StorageError",
    "UploadResult",
    "ValidationError",
]
