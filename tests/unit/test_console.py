"""Tests for the console command surface."""

from unittest.mock import Mock

import pytest

from glyph.console import GlyphConsole
from glyph.core.exceptions import InvalidEncodingError, UnknownCommandError


@pytest.fixture
def console(manager):
    return GlyphConsole(manager)


@pytest.fixture
def received(console):
    """Collect payloads pushed to a listener."""
    payloads = []
    console.subscribe(payloads.append)
    return payloads


class TestGlyphConsole:
    """Test GlyphConsole dispatch and republishing."""

    def test_events(self, console):
        assert console.events == [
            "glyph/delete",
            "glyph/upload",
            "glyph/load-font",
            "glyph/unload-font",
            "glyph/unload-all",
            "glyph/get-memory-info",
        ]

    def test_get(self, console, write_font):
        write_font("arial.ttf")

        assert [f.name for f in console.get().fonts] == ["arial"]

    def test_upload_republishes(self, console, received):
        """Test that an upload pushes a listing that already includes the font."""
        result = console.dispatch("glyph/upload", "noto.otf", "data:font/otf;base64,QUJD")

        assert result["cached"] is True
        assert len(received) == 1
        assert [f.file_name for f in received[0].fonts] == ["noto.otf"]
        assert received[0].fonts[0].data_url == "data:font/otf;base64,QUJD"

    def test_failed_upload_does_not_republish(self, console, received):
        """Test that failing mutations propagate without a refresh."""
        with pytest.raises(InvalidEncodingError):
            console.dispatch("glyph/upload", "noto.otf", "not-a-data-url")

        assert received == []

    def test_delete_republishes(self, console, received, write_font):
        write_font("arial.ttf")
        write_font("arial.woff")

        deleted = console.dispatch("glyph/delete", "arial")

        assert sorted(deleted) == ["arial.ttf", "arial.woff"]
        assert received[-1].fonts == []

    def test_load_font(self, console, received, write_font):
        write_font("arial.ttf", b"ABC")

        assert console.dispatch("glyph/load-font", "arial") == "data:font/ttf;base64,QUJD"
        assert console.dispatch("glyph/load-font", "missing") is None
        assert received == []

    def test_unload_and_memory_info(self, console, write_font):
        write_font("a.ttf", b"1234")
        write_font("b.ttf", b"12")
        console.dispatch("glyph/load-font", "a")
        console.dispatch("glyph/load-font", "b")

        assert console.dispatch("glyph/get-memory-info") == [
            {"name": "a", "size_bytes": 4},
            {"name": "b", "size_bytes": 2},
        ]

        assert console.dispatch("glyph/unload-font", "a") is True
        assert console.dispatch("glyph/get-memory-info") == [{"name": "b", "size_bytes": 2}]

        assert console.dispatch("glyph/unload-all") == 1
        assert console.dispatch("glyph/get-memory-info") == []

    def test_unknown_event(self, console):
        with pytest.raises(UnknownCommandError):
            console.dispatch("glyph/rename", "a", "b")

    def test_unsubscribe(self, console):
        listener = Mock()
        unsubscribe = console.subscribe(listener)

        console.refresh()
        unsubscribe()
        console.refresh()

        listener.assert_called_once()

    def test_failing_listener_is_isolated(self, console, caplog):
        """Test that one failing listener does not block others."""
        broken = Mock(side_effect=RuntimeError("boom"))
        healthy = Mock()
        console.subscribe(broken)
        console.subscribe(healthy)

        console.refresh()

        healthy.assert_called_once()
        assert "Console listener failed" in caplog.text
