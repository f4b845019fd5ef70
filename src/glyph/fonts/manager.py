"""
Font Asset Management
=====================

Mediates between the font storage directory and the in-memory font cache:
lists font files, accepts uploads, deletes fonts and loads them on demand
for preview.
"""

import logging
import threading
from pathlib import Path

from glyph.core.exceptions import (
    DirectoryReadError,
    FontIOError,
    GlyphError,
    InvalidFontNameError,
    UnsupportedFormatError,
    UploadTooLargeError,
)
from glyph.core.models import FontFile, GlyphPayload, MemoryEntry, UploadResult

from .cache import FontCache
from .formats import SUPPORTED_FORMATS, parse_data_url, split_font_name

logger = logging.getLogger(__name__)


class FontAssetManager:
    """
    Font asset lifecycle manager.

    Every operation works from the current directory and cache state; no
    font index is kept in-process. Mutating operations are serialized per
    manager, but other processes writing to the same directory are not
    coordinated with (last write wins).
    """

    def __init__(self, cache: FontCache, max_upload_bytes: int | None = None):
        """
        Initialize font asset manager.

        Args:
            cache: Font cache whose storage root holds the font files
            max_upload_bytes: Optional limit on decoded upload size
        """
        self.cache = cache
        self.max_upload_bytes = max_upload_bytes
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config) -> "FontAssetManager":
        """Create a manager and its cache from a GlyphConfig."""
        return cls(FontCache.from_config(config), max_upload_bytes=config.max_upload_bytes)

    @property
    def font_root(self) -> Path:
        return self.cache.storage_root

    def _scan(self) -> list[Path]:
        """List regular font files in the storage root, sorted by file name."""
        try:
            entries = sorted(self.font_root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DirectoryReadError(str(self.font_root), str(e)) from e

        return [
            path
            for path in entries
            if path.suffix.lower() in SUPPORTED_FORMATS and path.is_file()
        ]

    def _find_font_files(self, name: str) -> list[Path]:
        """Find every font file whose stem equals name."""
        return [path for path in self._scan() if split_font_name(path.name)[0] == name]

    def list_fonts(self) -> list[FontFile]:
        """List all font files in storage; returns an empty list if the directory is unreadable."""
        try:
            paths = self._scan()
        except DirectoryReadError as e:
            logger.error(str(e))
            return []

        fonts = []
        for path in paths:
            try:
                size_bytes = path.stat().st_size
            except OSError as e:
                logger.warning(f"Skipping font {path.name}: {e}")
                continue

            name, ext = split_font_name(path.name)
            info = self.cache.peek(name)
            fonts.append(
                FontFile(
                    name=name,
                    file_name=path.name,
                    format=ext.lstrip("."),
                    size_bytes=size_bytes,
                    path=str(path),
                    data_url=info.data_url if info else None,
                )
            )

        return fonts

    def get(self) -> GlyphPayload:
        """Get the current listing snapshot."""
        return GlyphPayload(fonts=self.list_fonts())

    def delete_font(self, name: str) -> list[str]:
        """
        Delete every font file with the given stem, whatever its format.

        The cache entry is left in place.

        Args:
            name: Font stem

        Returns:
            File names that were deleted

        Raises:
            DirectoryReadError: If the storage directory cannot be read
            FontIOError: On the first file that cannot be deleted
        """
        deleted = []
        with self._lock:
            for path in self._find_font_files(name):
                try:
                    path.unlink()
                except OSError as e:
                    logger.error(f"Failed to delete font {name}: {e}")
                    raise FontIOError("delete", str(path), str(e)) from e

                deleted.append(path.name)
                logger.info(f"Deleted font file: {path.name}")

        if not deleted:
            logger.warning(f"No font files found to delete: {name}")
        return deleted

    def upload_font(self, file_name: str, payload: str) -> UploadResult:
        """
        Write an uploaded font and load it into the cache.

        Args:
            file_name: Target file name, e.g. ``noto.otf``
            payload: ``data:<mime>;base64,<data>`` encoded file content

        Returns:
            Upload acknowledgement; ``cached`` is False if the cache load failed

        Raises:
            UnsupportedFormatError: If the extension is not allow-listed
            InvalidFontNameError: If file_name is not a bare file name
            InvalidEncodingError: If the payload is not a base64 data URL
            UploadTooLargeError: If the decoded content exceeds the limit
            FontIOError: If the file cannot be written
        """
        name, ext = split_font_name(file_name)
        if ext not in SUPPORTED_FORMATS:
            raise UnsupportedFormatError(ext)

        if Path(file_name).name != file_name or not name:
            raise InvalidFontNameError(file_name)

        _, data = parse_data_url(payload)
        size_bytes = len(data)
        if self.max_upload_bytes is not None and size_bytes > self.max_upload_bytes:
            raise UploadTooLargeError(size_bytes, self.max_upload_bytes)

        file_path = self.font_root / file_name
        with self._lock:
            # Overwrites in place; a crash mid-write can leave a partial file
            try:
                file_path.write_bytes(data)
            except OSError as e:
                logger.error(f"Failed to upload font {file_name}: {e}")
                raise FontIOError("write", str(file_path), str(e)) from e

            logger.info(f"Uploaded font file: {file_name} ({size_bytes / 1024:.2f} KB)")

            data_url = None
            try:
                info = self.cache.load_single_font(file_path)
                data_url = info.data_url
                logger.info(f"Font loaded into memory: {name}")
            except (GlyphError, OSError) as e:
                logger.warning(f"Uploaded font {file_name} could not be cached: {e}")

        return UploadResult(
            name=name,
            file_name=file_name,
            path=str(file_path),
            size_bytes=size_bytes,
            cached=data_url is not None,
            data_url=data_url,
        )

    def load_font_on_demand(self, name: str) -> str | None:
        """
        Get a font's preview data URL, loading it from storage if needed.

        When several formats share the stem, the first file in file-name
        order is loaded.

        Args:
            name: Font stem

        Returns:
            Data URL, or None if no such font exists or it failed to load
        """
        info = self.cache.get_font_info(name)
        if info is not None:
            logger.debug(f"Font already in memory: {name}")
            return info.data_url

        with self._lock:
            try:
                candidates = self._find_font_files(name)
            except DirectoryReadError as e:
                logger.error(str(e))
                return None

            if not candidates:
                logger.warning(f"Font file not found: {name}")
                return None

            try:
                self.cache.load_single_font(candidates[0])
            except (GlyphError, OSError) as e:
                logger.error(f"Failed to load font on demand {name}: {e}")
                return None

        logger.info(f"Loaded font on demand: {name}")
        loaded = self.cache.get_font_info(name)
        return loaded.data_url if loaded else None

    def unload_font(self, name: str) -> bool:
        """Release one font from memory."""
        return self.cache.unload_font(name)

    def unload_all_fonts(self) -> int:
        """Release every font from memory."""
        return self.cache.unload_all_fonts()

    def get_memory_info(self) -> list[MemoryEntry]:
        """Get per-font memory use; returns an empty list on failure."""
        try:
            return self.cache.get_memory_info()
        except Exception:
            logger.exception("Failed to read font memory info")
            return []
