"""
Client Configuration
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..protocol.constants import DEFAULT_INFO_PORT
from .validation import (
    validate_buffer_size, validate_host, validate_log_level, validate_port,
    validate_timeout,
)


@dataclass
class ClientConfig:
    """Client configuration settings"""

    # Server to query (info port = game port + 1)
    host: str = "localhost"
    port: int = DEFAULT_INFO_PORT

    # Transport
    timeout: float = 5.0
    buffer_size: int = 4096

    # Logging
    log_level: str = "INFO"
    log_packets: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'host': self.host,
            'port': self.port,
            'timeout': self.timeout,
            'buffer_size': self.buffer_size,
            'log_level': self.log_level,
            'log_packets': self.log_packets,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Create from dictionary"""
        return cls(**data)

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def validate(self) -> 'ClientConfig':
        """Check every field, normalizing host and timeout in place"""
        self.host = validate_host(self.host)
        self.port = validate_port(self.port)
        self.timeout = validate_timeout(self.timeout)
        self.buffer_size = validate_buffer_size(self.buffer_size)
        self.log_level = validate_log_level(self.log_level)
        return self
