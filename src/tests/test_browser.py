"""Tests for the best-effort browser launch."""
import webbrowser
from types import SimpleNamespace
from unittest.mock import patch

from play.program.utils.browser import open_browser, open_browser_when_ready


def test_open_browser():
    with patch("play.program.utils.browser.webbrowser.open", return_value=True) as mock_open:
        assert open_browser("http://localhost:9876") is True

    mock_open.assert_called_once_with("http://localhost:9876")


def test_open_browser_failure_is_not_fatal():
    with patch(
        "play.program.utils.browser.webbrowser.open",
        side_effect=webbrowser.Error("no runnable browser"),
    ):
        assert open_browser("http://localhost:9876") is False


def test_opens_once_server_started():
    server = SimpleNamespace(started=True, should_exit=False)

    with patch("play.program.utils.browser.webbrowser.open", return_value=True) as mock_open:
        thread = open_browser_when_ready(server, "http://localhost:9876")
        thread.join(timeout=2)

    assert not thread.is_alive()
    mock_open.assert_called_once_with("http://localhost:9876")


def test_does_not_open_when_server_exits_before_start():
    server = SimpleNamespace(started=False, should_exit=True)

    with patch("play.program.utils.browser.webbrowser.open") as mock_open:
        thread = open_browser_when_ready(server, "http://localhost:9876")
        thread.join(timeout=2)

    assert not thread.is_alive()
    mock_open.assert_not_called()
