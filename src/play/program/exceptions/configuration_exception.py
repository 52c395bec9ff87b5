class ConfigurationException(Exception):
    """Raised when the run configuration can't be built at startup."""

    pass


class ResourceNotFoundException(ConfigurationException):
    """Raised when the media file to serve does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")

        self.path = path
