"""
Basic Usage Examples
====================

This module demonstrates basic usage patterns for the glyph font asset service.
"""

import base64
from pathlib import Path

from glyph import FontAssetManager, GlyphConfig, GlyphConsole
from glyph.core.exceptions import GlyphError


def example_list_and_preview():
    """
    List fonts in storage and load one for preview.
    """
    print("=== List and Preview ===")

    config = GlyphConfig.from_env_and_yaml()
    manager = FontAssetManager.from_config(config)

    fonts = manager.list_fonts()
    for font in fonts:
        print(f"{font.file_name}: {font.size_bytes // 1024}KB")

    if fonts:
        data_url = manager.load_font_on_demand(fonts[0].name)
        if data_url:
            print(f"Preview data URL starts with {data_url[:40]}...")


def example_console_upload(font_file: str = "examples/NotoSans-Regular.ttf"):
    """
    Upload a font through the console command surface.
    """
    print("=== Console Upload ===")

    console = GlyphConsole(FontAssetManager.from_config(GlyphConfig.from_env_and_yaml()))
    console.subscribe(lambda payload: print(f"Listing now has {len(payload.fonts)} fonts"))

    path = Path(font_file)
    payload = f"data:font/ttf;base64,{base64.b64encode(path.read_bytes()).decode()}"

    try:
        result = console.dispatch("glyph/upload", path.name, payload)
        print(f"Uploaded {result['file_name']} (cached: {result['cached']})")
    except GlyphError as e:
        print(f"Upload failed: {e}")

    print(console.dispatch("glyph/get-memory-info"))


if __name__ == "__main__":
    example_list_and_preview()
