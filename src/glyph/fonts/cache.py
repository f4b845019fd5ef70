"""In-Memory Font Cache
====================

Holds loaded fonts as preview data URLs keyed by file stem:
- Thread-safe operations
- Optional memory budget with LRU eviction
- Hit/miss/eviction statistics
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from glyph.core.exceptions import FontLoadError
from glyph.core.models import FontInfo, MemoryEntry

from .formats import SUPPORTED_FORMATS, build_data_url, mime_type_for, split_font_name

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Represents a cached font with access metadata."""

    info: FontInfo
    last_accessed: float
    access_count: int

    def update_access(self):
        """Update access statistics."""
        self.last_accessed = time.time()
        self.access_count += 1


@dataclass
class CacheStats:
    """Statistics for font cache performance."""

    hits: int = 0
    misses: int = 0
    loads: int = 0
    evictions: int = 0
    total_bytes: int = 0
    max_bytes: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return (self.hits / total * 100.0) if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "loads": self.loads,
            "evictions": self.evictions,
            "hit_rate_percent": self.hit_rate,
            "total_bytes": self.total_bytes,
            "max_bytes": self.max_bytes,
        }


class FontCache:
    """Thread-safe in-memory cache of font data URLs with optional memory budget."""

    def __init__(
        self,
        font_root: Path,
        max_memory_mb: float = 0.0,
        enable_stats: bool = True,
    ):
        self._font_root = Path(font_root).resolve()
        self.max_memory_bytes = int(max_memory_mb * 1024 * 1024)
        self.enable_stats = enable_stats

        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats() if enable_stats else None
        self._current_bytes = 0

        budget = f"{max_memory_mb}MB" if self.max_memory_bytes else "unlimited"
        logger.info(f"FontCache initialized: root={self._font_root}, budget={budget}")

    @classmethod
    def from_config(cls, config) -> "FontCache":
        """Create a cache for a GlyphConfig, creating the font directory if configured."""
        if config.create_font_root:
            config.font_root.mkdir(parents=True, exist_ok=True)
        cache = cls(config.font_root, max_memory_mb=config.max_cache_memory_mb)
        if config.preload_fonts:
            cache.load_all_fonts()
        return cache

    @property
    def storage_root(self) -> Path:
        """Directory the cached fonts are loaded from."""
        return self._font_root

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._cache

    def _remove(self, name: str) -> CacheEntry | None:
        entry = self._cache.pop(name, None)
        if entry is not None:
            self._current_bytes -= entry.info.size_bytes
        return entry

    def _evict_lru(self, required_bytes: int = 0) -> None:
        """Evict least recently used fonts to make space."""
        if not self.max_memory_bytes:
            return

        while self._cache and self._current_bytes + required_bytes > self.max_memory_bytes:
            name, entry = self._cache.popitem(last=False)
            self._current_bytes -= entry.info.size_bytes

            if self._stats:
                self._stats.evictions += 1

            logger.info(
                f"Evicted font {name}: freed {entry.info.size_bytes / 1024:.2f} KB "
                f"(accessed {entry.access_count} times)"
            )

    def load_single_font(self, path: str | Path) -> FontInfo:
        """Load one font file into memory, replacing any entry with the same stem.

        Args:
            path: Path to the font file

        Returns:
            The cached font info

        Raises:
            FontLoadError: If the file is unsupported, unreadable or over budget
        """
        font_path = Path(path).resolve()
        name, ext = split_font_name(font_path.name)

        if ext not in SUPPORTED_FORMATS:
            raise FontLoadError(str(font_path), f"unsupported format {ext or '<none>'}")

        try:
            data = font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(font_path), str(e)) from e

        size_bytes = len(data)
        if self.max_memory_bytes and size_bytes > self.max_memory_bytes:
            raise FontLoadError(
                str(font_path),
                f"{size_bytes} bytes exceeds cache budget of {self.max_memory_bytes} bytes",
            )

        info = FontInfo(
            name=name,
            path=str(font_path),
            format=ext.lstrip("."),
            size_bytes=size_bytes,
            data_url=build_data_url(mime_type_for(ext), data),
            loaded_at=time.time(),
        )

        with self._lock:
            self._remove(name)
            self._evict_lru(required_bytes=size_bytes)

            self._cache[name] = CacheEntry(info=info, last_accessed=time.time(), access_count=0)
            self._current_bytes += size_bytes

            if self._stats:
                self._stats.loads += 1
                self._stats.total_bytes = self._current_bytes
                self._stats.max_bytes = max(self._stats.max_bytes, self._current_bytes)

        logger.debug(f"Cached font {name} ({size_bytes / 1024:.2f} KB)")
        return info

    def load_all_fonts(self) -> int:
        """Load every supported font in the storage root.

        Returns:
            Number of fonts loaded
        """
        try:
            files = sorted(p for p in self._font_root.iterdir() if p.is_file())
        except OSError as e:
            logger.warning(f"Failed to scan font directory {self._font_root}: {e}")
            return 0

        loaded = 0
        for file_path in files:
            if file_path.suffix.lower() not in SUPPORTED_FORMATS:
                continue
            try:
                self.load_single_font(file_path)
                loaded += 1
            except FontLoadError as e:
                logger.warning(str(e))

        logger.info(f"Preloaded {loaded} fonts from {self._font_root}")
        return loaded

    def peek(self, name: str) -> FontInfo | None:
        """Get a cached font without touching recency or statistics."""
        with self._lock:
            entry = self._cache.get(name)
            return entry.info if entry else None

    def get_font_info(self, name: str) -> FontInfo | None:
        """Get a cached font by stem, or None if it is not in memory."""
        with self._lock:
            entry = self._cache.get(name)
            if entry is None:
                if self._stats:
                    self._stats.misses += 1
                return None

            entry.update_access()
            self._cache.move_to_end(name)
            if self._stats:
                self._stats.hits += 1
            return entry.info

    def unload_font(self, name: str) -> bool:
        """Evict one font. Returns False if it was not cached."""
        with self._lock:
            entry = self._remove(name)
            if self._stats:
                self._stats.total_bytes = self._current_bytes

        if entry is None:
            logger.debug(f"Font not in memory: {name}")
            return False

        logger.info(f"Unloaded font {name} ({entry.info.size_bytes / 1024:.2f} KB)")
        return True

    def unload_all_fonts(self) -> int:
        """Evict every cached font. Returns the number of fonts evicted."""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            self._current_bytes = 0
            if self._stats:
                self._stats.total_bytes = 0

        logger.info(f"Unloaded all fonts ({count} released)")
        return count

    def get_memory_info(self) -> list[MemoryEntry]:
        """Get per-font memory use, least recently used first."""
        with self._lock:
            return [
                MemoryEntry(name=name, size_bytes=entry.info.size_bytes)
                for name, entry in self._cache.items()
            ]

    @property
    def memory_usage_bytes(self) -> int:
        with self._lock:
            return self._current_bytes

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            stats = self._stats.to_dict() if self._stats else {}
            stats.update(
                {
                    "cached_fonts": len(self._cache),
                    "memory_bytes": self._current_bytes,
                    "max_memory_bytes": self.max_memory_bytes,
                }
            )
            return stats
