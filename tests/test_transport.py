"""
Tests for the UDP transport against a loopback socket
"""

import socket
import threading

import pytest

from pyextinfo.client import ExtinfoClient
from pyextinfo.connection import UDPTransport
from pyextinfo.errors import TransportTimeout

from reply_builders import basic_reply


@pytest.fixture
def server_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5.0)
    yield sock
    sock.close()


def serve_once(sock, reply):
    """Answer the next datagram with a reply and record what was received"""
    received = []

    def run():
        data, address = sock.recvfrom(4096)
        received.append(data)
        sock.sendto(reply, address)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread, received


class TestUDPTransport:

    def test_exchange(self, server_socket):
        port = server_socket.getsockname()[1]
        thread, received = serve_once(server_socket, b"\x01pong")
        with UDPTransport("127.0.0.1", port, timeout=2.0) as transport:
            assert transport.exchange(b"\x01") == b"\x01pong"
        thread.join(2.0)
        assert received == [b"\x01"]

    def test_timeout(self, server_socket):
        port = server_socket.getsockname()[1]
        with UDPTransport("127.0.0.1", port, timeout=0.2) as transport:
            with pytest.raises(TransportTimeout):
                transport.exchange(b"\x01")

    def test_close(self, server_socket):
        port = server_socket.getsockname()[1]
        transport = UDPTransport("127.0.0.1", port)
        transport.open()
        assert transport.is_open
        transport.close()
        assert not transport.is_open

    def test_client_over_udp(self, server_socket):
        port = server_socket.getsockname()[1]
        thread, _ = serve_once(server_socket, basic_reply(map_name="ot"))
        info = ExtinfoClient("127.0.0.1", port, timeout=2.0).get_basic_info()
        thread.join(2.0)
        assert info.map == "ot"
