"""
Connection Module - UDP transport for extinfo queries
"""

from .udp_transport import UDPTransport

__all__ = [
    'UDPTransport',
]
