from .configuration_exception import (
    ConfigurationException,
    ResourceNotFoundException,
)
from .media_stream_exception import (
    MediaStreamException,
    RangeNotSatisfiableException,
)

__all__ = [
    "ConfigurationException",
    "ResourceNotFoundException",
    "MediaStreamException",
    "RangeNotSatisfiableException",
]
