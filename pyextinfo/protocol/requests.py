"""
Outgoing extinfo requests

A request is a handful of ints: the query kind, and for extended queries the
sub-kind and an argument (client number for player stats). The server echoes
the request verbatim at the start of its reply.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .binary_reader import encode_int
from .constants import ALL_CLIENTS, ExtendedQuery, QueryKind

logger = logging.getLogger(__name__)


def build_request(kind: int, sub_kind: int = 0, argument: int = 0) -> bytes:
    """Build the bytes of a query packet

    Args:
        kind: QueryKind.BASIC or QueryKind.EXTENDED
        sub_kind: ExtendedQuery value, ignored for basic info
        argument: client number for player stats (-1 for all), 0 otherwise

    Returns:
        Request packet bytes
    """
    if kind == QueryKind.BASIC:
        return encode_int(kind)
    return encode_int(kind) + encode_int(sub_kind) + encode_int(argument)


@dataclass(frozen=True)
class ExtinfoRequest:
    """An immutable query description"""

    kind: QueryKind
    sub_kind: int = 0
    argument: int = 0

    @classmethod
    def basic(cls) -> 'ExtinfoRequest':
        return cls(QueryKind.BASIC)

    @classmethod
    def uptime(cls) -> 'ExtinfoRequest':
        return cls(QueryKind.EXTENDED, ExtendedQuery.UPTIME)

    @classmethod
    def player_stats(cls, client_num: int = ALL_CLIENTS) -> 'ExtinfoRequest':
        return cls(QueryKind.EXTENDED, ExtendedQuery.PLAYER_STATS, client_num)

    @classmethod
    def team_score(cls) -> 'ExtinfoRequest':
        return cls(QueryKind.EXTENDED, ExtendedQuery.TEAM_SCORE)

    @property
    def is_extended(self) -> bool:
        return self.kind == QueryKind.EXTENDED

    @property
    def ints(self) -> Tuple[int, ...]:
        """Ints sent on the wire, in order (and echoed back by the server)"""
        if self.kind == QueryKind.BASIC:
            return (int(self.kind),)
        return (int(self.kind), int(self.sub_kind), int(self.argument))

    def to_bytes(self) -> bytes:
        return build_request(self.kind, self.sub_kind, self.argument)

    def __len__(self) -> int:
        return len(self.to_bytes())
