"""Font Management Module
======================

Font storage scanning, uploads and the in-memory preview cache.
"""

from .cache import FontCache
from .formats import SUPPORTED_FORMATS, build_data_url, is_supported_font, parse_data_url
from .manager import FontAssetManager

__all__ = [
    "SUPPORTED_FORMATS",
    "FontAssetManager",
    "FontCache",
    "build_data_url",
    "is_supported_font",
    "parse_data_url",
]
