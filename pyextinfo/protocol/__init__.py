"""
Protocol Module - extinfo wire format

- Variable-length int and string codec
- Request building
- Reply decoding (pyextinfo.protocol.decoders)
"""

from .binary_reader import (
    ExtinfoReader,
    decode_int,
    decode_string,
    encode_int,
    encode_string,
)
from .constants import ExtendedQuery, QueryKind
from .requests import ExtinfoRequest, build_request

__all__ = [
    'ExtinfoReader',
    'decode_int',
    'decode_string',
    'encode_int',
    'encode_string',
    'ExtendedQuery',
    'QueryKind',
    'ExtinfoRequest',
    'build_request',
]
