"""
Logging configuration for pyextinfo with clear module prefixes
"""

import logging
from typing import Union

# Logger name -> prefix shown in front of every message
MODULE_PREFIXES = {
    'pyextinfo.client': '[CLIENT]',
    'pyextinfo.protocol': '[PROTO]',
    'pyextinfo.connection': '[NET]',
    'pyextinfo.cli': '[CLI]',
}


class ModulePrefixFormatter(logging.Formatter):
    """Formatter that puts the module prefix before the level"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach a prefixed stream handler to each pyextinfo logger

    Calling it again only changes the level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    for name, prefix in MODULE_PREFIXES.items():
        logger = logging.getLogger(name)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(ModulePrefixFormatter(prefix))
            logger.addHandler(handler)
            logger.propagate = False
        logger.setLevel(level)
