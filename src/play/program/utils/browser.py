import threading
import time
import webbrowser

import uvicorn

from play.program.utils.logging import logger


def open_browser(url: str) -> bool:
    """Open the default browser at `url`, never raising."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning(f"Could not open a browser: {e}")
        return False

    if not opened:
        logger.warning(f"No browser available, open {url} manually")
    return opened


def open_browser_when_ready(
    server: uvicorn.Server,
    url: str,
    poll_interval: float = 0.05,
) -> threading.Thread:
    """Open the browser from a daemon thread once `server` is accepting connections."""

    def _wait_and_open():
        while not server.started:
            if server.should_exit:
                return
            time.sleep(poll_interval)
        open_browser(url)

    thread = threading.Thread(target=_wait_and_open, name="browser-launcher", daemon=True)
    thread.start()
    return thread
