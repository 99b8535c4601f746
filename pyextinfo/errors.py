"""
Exceptions raised by pyextinfo

Every query ends in either a fully populated record or exactly one of these.
"""

from typing import Optional


class ExtinfoError(Exception):
    """Base class for all extinfo errors"""
    pass


class TransportError(ExtinfoError):
    """Raised when the UDP exchange with the server fails (timeout, unreachable)"""

    def __init__(self, message: str, address: Optional[tuple] = None):
        super().__init__(message)
        self.address = address


class TransportTimeout(TransportError):
    """Raised when the server does not reply in time"""
    pass


class DecodeError(ExtinfoError):
    """Raised when a response cannot be decoded"""
    pass


class BoundsError(DecodeError):
    """Raised when decoding runs past the end of the response buffer"""

    def __init__(self, message: str, position: int = 0, length: int = 0):
        super().__init__(message)
        self.position = position
        self.length = length


class ProtocolViolation(DecodeError):
    """Raised when a field holds a value the protocol does not allow"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidClient(ExtinfoError):
    """Raised when the server reports that the queried client number does not exist"""

    def __init__(self, client_num: int):
        super().__init__(f"Invalid client number: {client_num}")
        self.client_num = client_num
