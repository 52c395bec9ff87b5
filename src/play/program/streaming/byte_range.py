import re
from dataclasses import dataclass

from play.program.exceptions import RangeNotSatisfiableException
from play.program.utils.logging import logger

RANGE_PATTERN = re.compile(r"^\s*bytes=(\d+)-(\d*)")


@dataclass(frozen=True)
class ByteRange:
    """An inclusive span of bytes within the served file."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def content_range(self, file_size: int) -> str:
        return f"bytes {self.start}-{self.end}/{file_size}"


def parse_range_header(range_header: str | None, file_size: int) -> ByteRange | None:
    """
    Resolve a `Range` header against the size of the served file.

    Only the `bytes=<start>-[<end>]` form is understood, and only the first
    range of a multi-range header is honoured.

    Returns:
        The range to serve, or None when the whole file should be served
        (no header, a header that doesn't match, or an end before the start).

    Raises:
        RangeNotSatisfiableException: If the range starts at or beyond the end of the file.
    """

    if not range_header:
        return None

    match = RANGE_PATTERN.match(range_header)
    if not match:
        logger.log("STREAM", f"Ignoring unsupported range header: {range_header!r}")
        return None

    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else file_size - 1

    if start >= file_size:
        raise RangeNotSatisfiableException(start=start, file_size=file_size)

    if end < start:
        logger.log("STREAM", f"Ignoring inverted range header: {range_header!r}")
        return None

    return ByteRange(start=start, end=min(end, file_size - 1))
