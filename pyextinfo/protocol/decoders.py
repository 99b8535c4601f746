"""
Response decoders for extinfo replies

Each decoder makes a single pass over one reply with its own ExtinfoReader and
returns a fully populated record, or raises BoundsError, ProtocolViolation or
InvalidClient. Translated records are always built on top of the raw decode.

Reply layouts (ints are variable-length, strings zero terminated):

    basic info:    <echo> numclients nattrs(5|7) protocol mode secsleft
                   maxclients mastermode [paused gamespeed] map desc
    uptime:        <echo> ACK VERSION uptime
    player stats:  <echo> ACK VERSION status RESP_STATS cn ping name team
                   frags flags deaths teamkills damage health armour weapon
                   privilege state ip[3 bytes]
    team scores:   <echo> ACK VERSION status mode secsleft
                   {team score nbases bases...}*

Replies to "all players" player-stats queries arrive as one id-list datagram
followed by one stats datagram per player. Only single stats datagrams are
decoded here; the full sequence is available undecoded from
ExtinfoClient.get_all_player_info_raw().
"""

import logging
from typing import List, Optional

from ..errors import InvalidClient, ProtocolViolation
from ..models import (
    BasicInfo, BasicInfoRaw, PartialIPv4, PlayerInfo, PlayerInfoRaw,
    TeamScore, TeamScores, TeamScoresRaw,
)
from ..names import (
    game_mode_name, master_mode_name, privilege_name, state_name, weapon_name,
)
from .binary_reader import ExtinfoReader, require_bytes
from .constants import (
    BASIC_ATTRIBUTES, BASIC_ATTRIBUTES_EXTENDED, DEFAULT_GAME_SPEED, EXT_ACK,
    EXT_ERROR, EXT_NO_ERROR, EXT_PLAYERSTATS_RESP_IDS, EXT_PLAYERSTATS_RESP_STATS,
    ExtendedQuery, IP_OCTETS_SENT, NO_BASES,
)
from .requests import ExtinfoRequest

logger = logging.getLogger(__name__)


def _expect_request(request: Optional[ExtinfoRequest], default: ExtinfoRequest,
                    sub_kind: Optional[int] = None) -> ExtinfoRequest:
    if request is None:
        return default
    if request.kind != default.kind or (sub_kind is not None and request.sub_kind != sub_kind):
        raise ValueError(f"{request} cannot be decoded as {default}")
    return request


def _read_preamble(reader: ExtinfoReader, request: ExtinfoRequest) -> None:
    """Consume the echoed request and, for extended replies, ACK and VERSION."""
    echoed_kind = reader.read_int()
    if echoed_kind != request.kind:
        raise ProtocolViolation(
            f"Reply echoes query kind {echoed_kind}, expected {int(request.kind)}")
    reader.skip_ints(len(request.ints) - 1)

    if request.is_extended:
        ack = reader.read_int()
        if ack != EXT_ACK:
            raise ProtocolViolation(f"Expected EXT_ACK ({EXT_ACK}), got {ack}")
        version = reader.read_int()
        logger.debug(f"Extended reply, extinfo version {version}")


# === Basic info ===

def decode_basic_info_raw(response: bytes,
                          request: Optional[ExtinfoRequest] = None) -> BasicInfoRaw:
    """Decode a basic info reply, leaving mode codes untranslated"""
    request = _expect_request(request, ExtinfoRequest.basic())
    reader = ExtinfoReader(response)
    _read_preamble(reader, request)

    number_of_clients = reader.read_int()
    attributes = reader.read_int()
    if attributes not in (BASIC_ATTRIBUTES, BASIC_ATTRIBUTES_EXTENDED):
        raise ProtocolViolation(
            f"Basic info attribute count must be {BASIC_ATTRIBUTES} or "
            f"{BASIC_ATTRIBUTES_EXTENDED}, got {attributes}")

    protocol_version = reader.read_int()
    game_mode = reader.read_int()
    secs_left = reader.read_int()
    max_number_of_clients = reader.read_int()
    master_mode = reader.read_int()

    paused = False
    game_speed = DEFAULT_GAME_SPEED
    if attributes == BASIC_ATTRIBUTES_EXTENDED:
        paused = reader.read_int() == 1
        game_speed = reader.read_int()

    map_name = reader.read_string()
    description = reader.read_string()

    logger.debug(f"Basic info: {number_of_clients} clients, {attributes} attributes, map {map_name!r}")
    return BasicInfoRaw(
        number_of_clients=number_of_clients,
        protocol_version=protocol_version,
        game_mode=game_mode,
        secs_left=secs_left,
        max_number_of_clients=max_number_of_clients,
        master_mode=master_mode,
        paused=paused,
        game_speed=game_speed,
        map=map_name,
        description=description,
    )


def translate_basic_info(raw: BasicInfoRaw) -> BasicInfo:
    return BasicInfo(
        raw=raw,
        game_mode=game_mode_name(raw.game_mode),
        master_mode=master_mode_name(raw.master_mode),
    )


def decode_basic_info(response: bytes,
                      request: Optional[ExtinfoRequest] = None) -> BasicInfo:
    """Decode a basic info reply, e.g. game mode 12 -> "insta ctf"."""
    return translate_basic_info(decode_basic_info_raw(response, request))


# === Uptime ===

def decode_uptime(response: bytes, request: Optional[ExtinfoRequest] = None) -> int:
    """Decode an uptime reply into seconds since the server started"""
    request = _expect_request(request, ExtinfoRequest.uptime(), ExtendedQuery.UPTIME)
    reader = ExtinfoReader(response)
    _read_preamble(reader, request)
    return reader.read_int()


# === Player stats ===

def player_status_offset(request: ExtinfoRequest) -> int:
    """Byte offset of the status field: echo + one byte ACK + one byte VERSION"""
    return len(request) + 2


def _check_player_status(response: bytes, request: ExtinfoRequest) -> None:
    offset = player_status_offset(request)
    require_bytes(response, offset, 1, "player status")
    if response[offset] != EXT_NO_ERROR:
        logger.debug(f"Server rejected client number {request.argument}")
        raise InvalidClient(request.argument)


def is_player_ids_reply(response: bytes, request: Optional[ExtinfoRequest] = None) -> bool:
    """True if a player stats datagram is the client number list, not a stats record"""
    request = _expect_request(request, ExtinfoRequest.player_stats(),
                              ExtendedQuery.PLAYER_STATS)
    _check_player_status(response, request)
    reader = ExtinfoReader(response)
    _read_preamble(reader, request)
    reader.read_int()  # status
    return reader.read_int() == EXT_PLAYERSTATS_RESP_IDS


def decode_player_info_raw(response: bytes,
                           request: Optional[ExtinfoRequest] = None) -> PlayerInfoRaw:
    """Decode one player stats datagram, leaving codes untranslated

    Raises:
        InvalidClient: the server does not know the queried client number
    """
    request = _expect_request(request, ExtinfoRequest.player_stats(0),
                              ExtendedQuery.PLAYER_STATS)
    _check_player_status(response, request)

    reader = ExtinfoReader(response)
    _read_preamble(reader, request)
    reader.read_int()  # status, checked above
    marker = reader.read_int()
    if marker == EXT_PLAYERSTATS_RESP_IDS:
        raise ProtocolViolation("Got the client number list instead of a stats record")
    if marker != EXT_PLAYERSTATS_RESP_STATS:
        raise ProtocolViolation(f"Unknown player stats marker {marker}")

    client_num = reader.read_int()
    ping = reader.read_int()
    name = reader.read_string()
    team = reader.read_string()
    frags = reader.read_int()
    flags = reader.read_int()
    deaths = reader.read_int()
    teamkills = reader.read_int()
    damage = reader.read_int()
    health = reader.read_int()
    armour = reader.read_int()
    weapon = reader.read_int()
    privilege = reader.read_int()
    state = reader.read_int()
    ip = PartialIPv4.from_bytes(reader.read_bytes(IP_OCTETS_SENT))

    logger.debug(f"Player info for cn {client_num}: {name!r}")
    return PlayerInfoRaw(
        client_num=client_num,
        ping=ping,
        name=name,
        team=team,
        frags=frags,
        flags=flags,
        deaths=deaths,
        teamkills=teamkills,
        damage=damage,
        health=health,
        armour=armour,
        weapon=weapon,
        privilege=privilege,
        state=state,
        ip=ip,
    )


def translate_player_info(raw: PlayerInfoRaw) -> PlayerInfo:
    return PlayerInfo(
        raw=raw,
        weapon=weapon_name(raw.weapon),
        privilege=privilege_name(raw.privilege),
        state=state_name(raw.state),
    )


def decode_player_info(response: bytes,
                       request: Optional[ExtinfoRequest] = None) -> PlayerInfo:
    return translate_player_info(decode_player_info_raw(response, request))


# === Team scores ===

def decode_team_scores_raw(response: bytes,
                           request: Optional[ExtinfoRequest] = None) -> TeamScoresRaw:
    """Decode a team score reply

    Outside team modes the server only sends the mode and time left.
    """
    request = _expect_request(request, ExtinfoRequest.team_score(), ExtendedQuery.TEAM_SCORE)
    reader = ExtinfoReader(response)
    _read_preamble(reader, request)

    status = reader.read_int()
    if status not in (EXT_NO_ERROR, EXT_ERROR):
        raise ProtocolViolation(f"Unknown team score status {status}")
    is_team_mode = status == EXT_NO_ERROR
    game_mode = reader.read_int()
    secs_left = reader.read_int()

    scores: List[TeamScore] = []
    if is_team_mode:
        while not reader.at_end():
            name = reader.read_string()
            score = reader.read_int()
            base_count = reader.read_int()
            if base_count < NO_BASES:
                raise ProtocolViolation(f"Team {name!r} has invalid base count {base_count}")
            bases = [reader.read_int() for _ in range(max(base_count, 0))]
            scores.append(TeamScore(name=name, score=score, bases=bases))

    return TeamScoresRaw(
        is_team_mode=is_team_mode,
        game_mode=game_mode,
        secs_left=secs_left,
        scores=scores,
    )


def translate_team_scores(raw: TeamScoresRaw) -> TeamScores:
    return TeamScores(raw=raw, game_mode=game_mode_name(raw.game_mode))


def decode_team_scores(response: bytes,
                       request: Optional[ExtinfoRequest] = None) -> TeamScores:
    return translate_team_scores(decode_team_scores_raw(response, request))
