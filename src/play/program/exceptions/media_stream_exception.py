class MediaStreamException(Exception):
    """Base class for streaming-related exceptions."""

    pass


class RangeNotSatisfiableException(MediaStreamException):
    """Raised when a requested byte range starts beyond the end of the file."""

    def __init__(self, start: int, file_size: int) -> None:
        super().__init__(
            f"Range starting at byte {start} is not satisfiable for a file of {file_size} bytes"
        )

        self.start = start
        self.file_size = file_size
