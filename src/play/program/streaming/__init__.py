from .byte_range import ByteRange, parse_range_header

__all__ = ["ByteRange", "parse_range_header"]
