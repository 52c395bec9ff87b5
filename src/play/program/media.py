"""Served media resource"""

import os
from collections.abc import Iterator
from functools import cached_property
from pathlib import Path
from types import MappingProxyType

from play.program.streaming import ByteRange

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType(
    {
        ".mp3": "audio/mpeg",
        ".m4a": "audio/mp4",
        ".wav": "audio/wav",
        ".ogg": "audio/ogg",
        ".flac": "audio/flac",
        ".aac": "audio/aac",
        ".wma": "audio/x-ms-wma",
        ".opus": "audio/opus",
        ".webm": "audio/webm",
        ".mp4": "video/mp4",
        ".mkv": "video/x-matroska",
        ".mov": "video/quicktime",
    }
)

CHUNK_SIZE = 64 * 1024


def mime_type_for(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


class ServedResource:
    """
    The single media file exposed for the lifetime of the process.

    The size is read from disk on every access, everything else is fixed
    when the resource is created.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).resolve()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @cached_property
    def mime_type(self) -> str:
        return mime_type_for(self._path)

    @property
    def size(self) -> int:
        return os.path.getsize(self._path)

    def iter_bytes(
        self,
        byte_range: ByteRange | None = None,
        chunk_size: int = CHUNK_SIZE,
    ) -> Iterator[bytes]:
        """Yield the file contents, or only `byte_range` of them, in chunks."""

        with open(self._path, "rb") as file:
            if byte_range is None:
                while chunk := file.read(chunk_size):
                    yield chunk
                return

            file.seek(byte_range.start)
            remaining = byte_range.length
            while remaining > 0:
                chunk = file.read(min(chunk_size, remaining))
                if not chunk:
                    break
                remaining -= len(chunk)
                yield chunk

    def __repr__(self) -> str:
        return f"ServedResource(path={str(self._path)!r}, mime_type={self.mime_type!r})"
