from collections.abc import Awaitable, Callable
import signal
import sys
import time
from types import FrameType

import uvicorn
from dotenv import load_dotenv

load_dotenv()  # import required here so .env can provide PLAY_* settings

from fastapi import FastAPI, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from kink import di
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from play import __version__
from play.program.exceptions import ConfigurationException
from play.program.media import ServedResource
from play.program.player_page import PlayerPage
from play.program.settings.models import RunConfiguration
from play.program.utils.browser import open_browser_when_ready
from play.program.utils.cli import handle_args
from play.program.utils.logging import logger, route_std_logging, setup_logger
from play.routers import app_router


class LoguruMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start_time = time.time()
        response = None

        try:
            response = await call_next(request)

            return response
        except Exception as e:
            logger.exception(f"Exception during request processing: {e}")
            raise
        finally:
            process_time = time.time() - start_time

            logger.log(
                "API",
                f"{request.method} {request.url.path} - {response.status_code if response else '500'} - {process_time:.2f}s",
            )


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404:
        return PlainTextResponse("Not found", status_code=404)

    return await http_exception_handler(request, exc)


def create_app(resource: ServedResource, page: PlayerPage) -> FastAPI:
    """Build the FastAPI app serving `resource` and its player page."""

    di[ServedResource] = resource
    di[PlayerPage] = page

    app = FastAPI(
        title="play",
        summary="Stream a local media file to a browser-based player.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_middleware(LoguruMiddleware)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.include_router(app_router)

    return app


def print_banner(resource: ServedResource, config: RunConfiguration) -> None:
    print(f"\x1b[33m▶ play\x1b[0m {resource.name} @ {config.speed:g}x")
    print(f"  {config.url}")
    print("  \x1b[2mCtrl+C to stop\x1b[0m", flush=True)


def install_signal_handlers(server: uvicorn.Server) -> None:
    """
    Stop `server` and exit cleanly on SIGINT/SIGTERM.

    uvicorn captures these signals while serving and re-raises them once it
    has shut down, at which point these handlers end the process with 0.
    """

    def signal_handler(signum: int, frame: FrameType | None):
        logger.log("PLAYER", "Exiting Gracefully.")
        server.should_exit = True
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


def main(argv: list[str] | None = None) -> int:
    try:
        config = handle_args(argv)
    except ConfigurationException as e:
        print(str(e), file=sys.stderr)
        return 1

    setup_logger(config.log_level)
    route_std_logging("uvicorn", "uvicorn.error")

    resource = ServedResource(config.path)

    try:
        page = PlayerPage.render(resource, config.speed)
    except OSError as e:
        logger.critical(f"Could not load the player page: {e}")
        return 1

    logger.log("PLAYER", f"Serving {resource!r}")

    app = create_app(resource, page)
    server = uvicorn.Server(
        config=uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_config=None,
            access_log=False,
        )
    )

    install_signal_handlers(server)
    print_banner(resource, config)

    if config.open_browser:
        open_browser_when_ready(server, config.url)

    server.run()

    logger.log("PLAYER", "Server has been stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
