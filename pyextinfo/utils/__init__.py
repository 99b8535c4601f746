"""
pyextinfo Utilities
"""

from .logging_config import MODULE_PREFIXES, ModulePrefixFormatter, configure_logging

__all__ = [
    'MODULE_PREFIXES',
    'ModulePrefixFormatter',
    'configure_logging',
]
