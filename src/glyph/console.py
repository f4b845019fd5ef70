"""
Console Command Surface
=======================

Maps console events to font asset operations and republishes the font
listing to subscribers after mutating commands.
"""

import logging
from collections.abc import Callable
from typing import Any

from .core.exceptions import UnknownCommandError
from .core.models import GlyphPayload
from .fonts.manager import FontAssetManager

logger = logging.getLogger(__name__)

PayloadListener = Callable[[GlyphPayload], None]


class GlyphConsole:
    """Console data service for the font manager."""

    def __init__(self, manager: FontAssetManager):
        self.manager = manager
        self._listeners: list[PayloadListener] = []
        self._handlers: dict[str, Callable[..., Any]] = {
            "glyph/delete": self.delete,
            "glyph/upload": self.upload,
            "glyph/load-font": self.load_font,
            "glyph/unload-font": self.unload_font,
            "glyph/unload-all": self.unload_all,
            "glyph/get-memory-info": self.get_memory_info,
        }

    @property
    def events(self) -> list[str]:
        return list(self._handlers)

    def get(self) -> GlyphPayload:
        """Get the current font listing."""
        return self.manager.get()

    def subscribe(self, listener: PayloadListener) -> Callable[[], None]:
        """Register a listener for listing updates; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> GlyphPayload:
        """Rebuild the listing and push it to every listener."""
        payload = self.get()
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Console listener failed")
        return payload

    def dispatch(self, event: str, *args: Any) -> Any:
        """Invoke the handler registered for a console event."""
        handler = self._handlers.get(event)
        if handler is None:
            raise UnknownCommandError(event)
        logger.debug(f"Dispatching {event}")
        return handler(*args)

    def delete(self, font_name: str) -> list[str]:
        deleted = self.manager.delete_font(font_name)
        self.refresh()
        return deleted

    def upload(self, file_name: str, payload: str) -> dict[str, Any]:
        # The upload result is the acknowledgement that the cache load settled
        result = self.manager.upload_font(file_name, payload)
        self.refresh()
        return result.model_dump()

    def load_font(self, font_name: str) -> str | None:
        return self.manager.load_font_on_demand(font_name)

    def unload_font(self, font_name: str) -> bool:
        return self.manager.unload_font(font_name)

    def unload_all(self) -> int:
        return self.manager.unload_all_fonts()

    def get_memory_info(self) -> list[dict[str, Any]]:
        return [entry.model_dump() for entry in self.manager.get_memory_info()]
