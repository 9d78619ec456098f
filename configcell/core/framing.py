"""Length-prefixed framing for raw payload buffers.

Raw payloads carry the same 4-byte little-endian header that the entity codec
puts in front of its variable-length vectors, so downstream parsers read raw
and codec-produced buffers the same way.
"""

from __future__ import annotations

import struct

LENGTH_HEADER_SIZE = 4


def prepend_length(raw: bytes) -> bytes:
    """Prefix *raw* with its byte length as a little-endian ``u32``."""
    return struct.pack("<I", len(raw)) + bytes(raw)


def read_length(buffer: bytes) -> int:
    """Return the length recorded in the header of a framed buffer."""
    if len(buffer) < LENGTH_HEADER_SIZE:
        raise ValueError(
            f"Framed buffer needs at least {LENGTH_HEADER_SIZE} bytes, got {len(buffer)}"
        )
    (length,) = struct.unpack_from("<I", buffer)
    return length
