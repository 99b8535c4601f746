"""
Binary reader for extinfo responses

Sauerbraten packs ints in 1, 2 or 5 bytes:
- a single signed byte for values in -127..127 (0x80 and 0x81 excluded)
- 0x80 followed by a little-endian int16
- 0x81 followed by a little-endian int32

Strings are zero terminated.
"""

import logging
import struct
from typing import Tuple

from ..errors import BoundsError
from .constants import INT16_MARKER, INT32_MARKER

logger = logging.getLogger(__name__)

_INT16 = struct.Struct('<h')
_INT32 = struct.Struct('<i')

STRING_ENCODING = 'latin-1'


def require_bytes(buffer: bytes, cursor: int, size: int, what: str) -> None:
    if cursor < 0 or cursor + size > len(buffer):
        raise BoundsError(
            f"Not enough data for {what} at offset {cursor} "
            f"(need {size}, have {max(len(buffer) - cursor, 0)})",
            position=cursor,
            length=len(buffer),
        )


def decode_int(buffer: bytes, cursor: int = 0) -> Tuple[int, int]:
    """Decode a variable-length int

    Returns:
        (value, new cursor)
    """
    require_bytes(buffer, cursor, 1, "int")
    lead = buffer[cursor]
    if lead == INT16_MARKER:
        require_bytes(buffer, cursor + 1, 2, "int16")
        value, = _INT16.unpack_from(buffer, cursor + 1)
        return value, cursor + 3
    if lead == INT32_MARKER:
        require_bytes(buffer, cursor + 1, 4, "int32")
        value, = _INT32.unpack_from(buffer, cursor + 1)
        return value, cursor + 5
    # signed char
    if lead >= 0x80:
        lead -= 0x100
    return lead, cursor + 1


def decode_string(buffer: bytes, cursor: int = 0) -> Tuple[str, int]:
    """Decode a zero-terminated string

    Returns:
        (text, cursor just past the terminator)
    """
    require_bytes(buffer, cursor, 1, "string")
    end = bytes(buffer).find(b'\x00', cursor)
    if end == -1:
        raise BoundsError(
            f"Unterminated string at offset {cursor}",
            position=cursor,
            length=len(buffer),
        )
    text = bytes(buffer[cursor:end]).decode(STRING_ENCODING)
    return text, end + 1


def encode_int(value: int) -> bytes:
    """Encode an int the way the server's putint does"""
    if -0x7F < value < 0x80:
        return bytes([value & 0xFF])
    if -0x8000 <= value < 0x8000:
        return bytes([INT16_MARKER]) + _INT16.pack(value)
    if -0x80000000 <= value < 0x80000000:
        return bytes([INT32_MARKER]) + _INT32.pack(value)
    raise ValueError(f"Value {value} does not fit in 32 bits")


def encode_string(text: str) -> bytes:
    """Encode a string with its zero terminator"""
    return text.encode(STRING_ENCODING) + b'\x00'


class ExtinfoReader:
    """Cursor over a single response buffer

    One reader per decode; the position never leaves the instance.
    """

    def __init__(self, data: bytes, pos: int = 0):
        self.data = bytes(data)
        self.pos = pos

    def remaining(self) -> int:
        """Bytes remaining to read"""
        return len(self.data) - self.pos

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def read_int(self) -> int:
        value, self.pos = decode_int(self.data, self.pos)
        return value

    def read_string(self) -> str:
        value, self.pos = decode_string(self.data, self.pos)
        return value

    def read_bytes(self, size: int) -> bytes:
        """Read a fixed number of raw bytes"""
        require_bytes(self.data, self.pos, size, f"{size} bytes")
        value = self.data[self.pos:self.pos + size]
        self.pos += size
        return value

    def skip_ints(self, count: int) -> None:
        for _ in range(count):
            self.read_int()

    def __repr__(self) -> str:
        return f"ExtinfoReader(pos={self.pos}, length={len(self.data)})"
