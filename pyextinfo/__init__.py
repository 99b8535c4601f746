"""
pyextinfo - A Python client for the Sauerbraten extinfo server query protocol

Usage:
    from pyextinfo import ExtinfoClient

    client = ExtinfoClient("sauer.example.com", 28786)
    info = client.get_basic_info()
    print(f"{info.description}: {info.game_mode} on {info.map}")

    print(f"up for {client.get_uptime()} seconds")

    player = client.get_player_info(0)
    print(f"{player.name}: {player.frags} frags with the {player.weapon}")

Or quick query:
    from pyextinfo import get_basic_info

    info = get_basic_info("sauer.example.com")

Or decode replies you received yourself:
    from pyextinfo import ExtinfoRequest, decode_basic_info

    request = ExtinfoRequest.basic()
    sock.sendto(request.to_bytes(), address)
    info = decode_basic_info(sock.recv(4096), request)
"""

__version__ = "1.0.0"

from .client import (
    ExtinfoClient,
    get_basic_info,
    get_player_info,
    get_team_scores,
    get_uptime,
)
from .errors import (
    BoundsError,
    DecodeError,
    ExtinfoError,
    InvalidClient,
    ProtocolViolation,
    TransportError,
    TransportTimeout,
)
from .models import (
    BasicInfo,
    BasicInfoRaw,
    PartialIPv4,
    PlayerInfo,
    PlayerInfoRaw,
    TeamScore,
    TeamScores,
    TeamScoresRaw,
)
from .protocol.decoders import (
    decode_basic_info,
    decode_basic_info_raw,
    decode_player_info,
    decode_player_info_raw,
    decode_team_scores,
    decode_team_scores_raw,
    decode_uptime,
    is_player_ids_reply,
)
from .protocol.requests import ExtinfoRequest, build_request

__all__ = [
    "ExtinfoClient",
    "get_basic_info",
    "get_player_info",
    "get_team_scores",
    "get_uptime",
    "ExtinfoError",
    "TransportError",
    "TransportTimeout",
    "DecodeError",
    "BoundsError",
    "ProtocolViolation",
    "InvalidClient",
    "BasicInfo",
    "BasicInfoRaw",
    "PartialIPv4",
    "PlayerInfo",
    "PlayerInfoRaw",
    "TeamScore",
    "TeamScores",
    "TeamScoresRaw",
    "decode_basic_info",
    "decode_basic_info_raw",
    "decode_player_info",
    "decode_player_info_raw",
    "decode_team_scores",
    "decode_team_scores_raw",
    "decode_uptime",
    "is_player_ids_reply",
    "ExtinfoRequest",
    "build_request",
]
