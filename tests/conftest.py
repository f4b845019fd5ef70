"""
Pytest configuration and fixtures for glyph tests.
"""

from pathlib import Path

import pytest

from glyph.core.config import GlyphConfig
from glyph.fonts.cache import FontCache
from glyph.fonts.manager import FontAssetManager


@pytest.fixture
def font_root(tmp_path):
    """Create empty font storage directory."""
    root = tmp_path / "fonts"
    root.mkdir()
    return root


@pytest.fixture
def write_font(font_root):
    """Write a font file into storage."""

    def _write(file_name: str, data: bytes = b"\x00\x01\x00\x00font") -> Path:
        path = font_root / file_name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def font_cache(font_root):
    """Create font cache over the storage directory."""
    return FontCache(font_root)


@pytest.fixture
def manager(font_cache):
    """Create font asset manager."""
    return FontAssetManager(font_cache)


@pytest.fixture
def glyph_config(font_root):
    """Create configuration pointing at the storage directory."""
    return GlyphConfig(_env_file=None, font_root=font_root)
