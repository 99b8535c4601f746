"""
UDP Transport - sends extinfo requests and receives replies
"""

import logging
import socket
from typing import Optional, Tuple

from ..errors import TransportError, TransportTimeout

logger = logging.getLogger(__name__)


class UDPTransport:
    """One UDP socket bound to a single server's info port.

    Usage:
        with UDPTransport("localhost", 28786) as transport:
            reply = transport.exchange(request_bytes)
    """

    DEFAULT_TIMEOUT = 5.0
    DEFAULT_BUFFER_SIZE = 4096

    def __init__(self, host: str, port: int, timeout: float = DEFAULT_TIMEOUT,
                 buffer_size: int = DEFAULT_BUFFER_SIZE):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.buffer_size = buffer_size

        self._socket: Optional[socket.socket] = None
        self._address: Optional[Tuple[str, int]] = None

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    def open(self) -> None:
        """Resolve the server address and create the socket"""
        if self._socket:
            return
        try:
            family, _, _, _, address = socket.getaddrinfo(
                self.host, self.port, 0, socket.SOCK_DGRAM)[0]
            self._socket = socket.socket(family, socket.SOCK_DGRAM)
            self._socket.settimeout(self.timeout)
        except OSError as e:
            raise TransportError(f"Cannot open UDP socket to {self.host}:{self.port}: {e}",
                                 (self.host, self.port)) from e
        self._address = address[:2]
        logger.debug(f"Opened UDP socket to {self._address[0]}:{self._address[1]}")

    def close(self) -> None:
        if self._socket:
            self._socket.close()
            self._socket = None
            logger.debug(f"Closed UDP socket to {self.host}:{self.port}")

    def send(self, data: bytes) -> None:
        """Send one datagram to the server"""
        self.open()
        try:
            self._socket.sendto(data, self._address)
        except OSError as e:
            raise TransportError(f"Failed to send to {self.host}:{self.port}: {e}",
                                 self._address) from e
        logger.debug(f"Sent {len(data)} bytes: {data.hex()}")

    def receive(self, timeout: Optional[float] = None) -> bytes:
        """Receive one datagram from the server

        Datagrams from other addresses are ignored.

        Args:
            timeout: overrides the transport timeout for this call

        Raises:
            TransportError: on timeout or socket failure
        """
        self.open()
        self._socket.settimeout(self.timeout if timeout is None else timeout)
        while True:
            try:
                data, sender = self._socket.recvfrom(self.buffer_size)
            except socket.timeout as e:
                raise TransportTimeout(f"Timed out waiting for {self.host}:{self.port}",
                                     self._address) from e
            except OSError as e:
                raise TransportError(f"Failed to receive from {self.host}:{self.port}: {e}",
                                     self._address) from e

            if sender[:2] != self._address:
                logger.debug(f"Ignoring datagram from {sender[0]}:{sender[1]}")
                continue

            logger.debug(f"Received {len(data)} bytes: {data.hex()}")
            return data

    def exchange(self, data: bytes) -> bytes:
        """Send a request and return the first reply"""
        self.send(data)
        return self.receive()

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
