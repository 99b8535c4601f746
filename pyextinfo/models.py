"""Extinfo data structures."""

import ipaddress
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

from .protocol.constants import IP_OCTETS_SENT


@dataclass(frozen=True)
class PartialIPv4:
    """The leading three octets of a player's IPv4 address.

    The server never sends the last octet, so this deliberately does not
    pretend to be a full address.
    """

    octets: Tuple[int, int, int]

    def __post_init__(self):
        if len(self.octets) != IP_OCTETS_SENT:
            raise ValueError(f"Expected {IP_OCTETS_SENT} octets, got {len(self.octets)}")
        for octet in self.octets:
            if not 0 <= octet <= 255:
                raise ValueError(f"Octet out of range: {octet}")

    @classmethod
    def from_bytes(cls, data: bytes) -> 'PartialIPv4':
        return cls(tuple(data))

    @property
    def network(self) -> ipaddress.IPv4Network:
        """The /24 network the player is in."""
        a, b, c = self.octets
        return ipaddress.IPv4Network(f"{a}.{b}.{c}.0/24")

    def __contains__(self, address) -> bool:
        return ipaddress.IPv4Address(address) in self.network

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets) + ".x"


class _Translated:
    """Mixin for records wrapping a raw record.

    Fields that are not translated are read straight from the raw record.
    """

    def __getattr__(self, name: str) -> Any:
        if name == "raw":
            raise AttributeError(name)
        return getattr(self.raw, name)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self.raw)
        for key, value in asdict(self).items():
            if key != "raw":
                data[key] = value
        return data


@dataclass
class BasicInfoRaw:
    """Server summary with numeric codes left untranslated."""

    number_of_clients: int
    protocol_version: int
    game_mode: int
    secs_left: int
    max_number_of_clients: int
    master_mode: int
    paused: bool
    game_speed: int
    map: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class BasicInfo(_Translated):
    """Server summary with game mode and master mode as display names."""

    raw: BasicInfoRaw
    game_mode: str
    master_mode: str

    def __str__(self) -> str:
        return (f"{self.raw.description or '(no description)'}: {self.game_mode} on "
                f"{self.raw.map} ({self.raw.number_of_clients}/"
                f"{self.raw.max_number_of_clients}, {self.master_mode})")


@dataclass
class PlayerInfoRaw:
    """Per-player statistics with numeric codes left untranslated."""

    client_num: int
    ping: int
    name: str
    team: str
    frags: int
    flags: int
    deaths: int
    teamkills: int
    damage: int
    health: int
    armour: int
    weapon: int
    privilege: int
    state: int
    ip: PartialIPv4

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["ip"] = str(self.ip)
        return data


@dataclass
class PlayerInfo(_Translated):
    """Per-player statistics with weapon, privilege and state as display names."""

    raw: PlayerInfoRaw
    weapon: str
    privilege: str
    state: str

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["ip"] = str(self.raw.ip)
        return data

    def __str__(self) -> str:
        return (f"{self.raw.name} (cn {self.raw.client_num}, {self.raw.team or 'no team'}): "
                f"{self.raw.frags} frags, {self.raw.deaths} deaths, {self.state}")


@dataclass
class TeamScore:
    """Score of one team; bases are only listed in capture modes."""

    name: str
    score: int
    bases: List[int] = field(default_factory=list)


@dataclass
class TeamScoresRaw:
    is_team_mode: bool
    game_mode: int
    secs_left: int
    scores: List[TeamScore] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TeamScores(_Translated):
    raw: TeamScoresRaw
    game_mode: str
