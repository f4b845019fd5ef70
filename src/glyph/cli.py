"""
Glyph CLI
=========

Command line front end for listing, uploading, deleting and previewing
fonts in the font storage directory.
"""

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError as PydanticValidationError

from .core.config import GlyphConfig
from .core.exceptions import GlyphError
from .fonts.formats import build_data_url, mime_type_for, split_font_name
from .fonts.manager import FontAssetManager

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to glyph configuration YAML file",
)
@click.option(
    "--font-root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Font storage directory (overrides configuration)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, config, font_root, verbose):
    """Glyph font asset manager."""
    try:
        glyph_config = GlyphConfig.from_env_and_yaml(yaml_path=config)
        if font_root is not None:
            glyph_config = glyph_config.model_copy(update={"font_root": font_root})
    except (GlyphError, PydanticValidationError) as e:
        _fail(f"Invalid configuration: {e}")

    logging.basicConfig(
        level=logging.DEBUG if verbose else glyph_config.log_level, format=LOG_FORMAT
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config"] = glyph_config
    ctx.obj["manager"] = FontAssetManager.from_config(glyph_config)


@cli.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Print the listing as JSON")
@click.pass_obj
def list_fonts(obj, as_json):
    """List font files in storage."""
    manager: FontAssetManager = obj["manager"]
    payload = manager.get()

    if as_json:
        data = payload.model_dump(exclude={"fonts": {"__all__": {"data_url"}}})
        click.echo(json.dumps(data, indent=2))
        return

    if not payload.fonts:
        click.echo("No fonts found.")
        return

    for font in payload.fonts:
        status = "cached" if font.data_url else "-"
        click.echo(f"{font.file_name}\t{font.format}\t{font.size_bytes // 1024}KB\t{status}")


@cli.command(name="upload")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", "file_name", help="Store under this file name")
@click.pass_obj
def upload(obj, font_file, file_name):
    """Upload a font file into storage."""
    manager: FontAssetManager = obj["manager"]
    file_name = file_name or font_file.name
    payload = build_data_url(mime_type_for(split_font_name(file_name)[1]), font_file.read_bytes())

    try:
        result = manager.upload_font(file_name, payload)
    except GlyphError as e:
        logger.debug("Upload failed", exc_info=True)
        _fail(str(e))

    cached = "cached" if result.cached else "not cached"
    click.echo(f"Uploaded {result.file_name} ({result.size_bytes} bytes, {cached})")


@cli.command(name="delete")
@click.argument("font_name")
@click.pass_obj
def delete(obj, font_name):
    """Delete every file of a font, whatever its format."""
    manager: FontAssetManager = obj["manager"]
    try:
        deleted = manager.delete_font(font_name)
    except GlyphError as e:
        logger.debug("Delete failed", exc_info=True)
        _fail(str(e))

    if not deleted:
        click.echo(f"No font files named {font_name}")
        return
    for file_name in deleted:
        click.echo(f"Deleted {file_name}")


@cli.command(name="load")
@click.argument("font_name")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the data URL to this file",
)
@click.pass_obj
def load(obj, font_name, output):
    """Load a font into memory and print its data URL."""
    manager: FontAssetManager = obj["manager"]
    data_url = manager.load_font_on_demand(font_name)
    if data_url is None:
        _fail(f"Font not found: {font_name}")

    if output:
        output.write_text(data_url)
        click.echo(f"Wrote data URL for {font_name} to {output}")
    else:
        click.echo(data_url)


@cli.command(name="memory")
@click.option("--preload", is_flag=True, help="Load every font in storage before reporting")
@click.pass_obj
def memory(obj, preload):
    """Show fonts held in memory by this process.

    Each invocation starts with an empty cache; fonts are only resident if
    preload_fonts is configured or --preload is given.
    """
    manager: FontAssetManager = obj["manager"]
    if preload and not obj["config"].preload_fonts:
        manager.cache.load_all_fonts()
    entries = manager.get_memory_info()
    if not entries:
        click.echo("No fonts in memory.")
        return

    total = 0
    for entry in entries:
        total += entry.size_bytes
        click.echo(f"{entry.name}\t{entry.size_bytes / 1024:.2f} KB")
    click.echo(f"Total: {total / 1024:.2f} KB in {len(entries)} fonts")


if __name__ == "__main__":
    cli()
