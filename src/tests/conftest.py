# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from play.main import create_app
from play.program.media import ServedResource
from play.program.player_page import PlayerPage
from play.program.utils.logging import setup_logger

# Setup logger for tests to ensure custom log levels are available
setup_logger("DEBUG")

MEDIA_BYTES = bytes(range(256)) * 40


@pytest.fixture()
def media_file(tmp_path: Path) -> Path:
    """A 10 KiB mp3-named file whose bytes are easy to slice and compare."""
    path = tmp_path / "Some Track.mp3"
    path.write_bytes(MEDIA_BYTES)
    return path


@pytest.fixture()
def resource(media_file: Path) -> ServedResource:
    return ServedResource(media_file)


@pytest.fixture()
def make_client() -> Callable[..., TestClient]:
    """Build a test client serving the given resource."""

    def _make_client(resource: ServedResource, speed: float = 1.5) -> TestClient:
        app = create_app(resource, PlayerPage.render(resource, speed))
        return TestClient(app)

    return _make_client


@pytest.fixture()
def client(resource: ServedResource, make_client) -> Iterator[TestClient]:
    with make_client(resource) as test_client:
        yield test_client
