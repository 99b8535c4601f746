"""
pyextinfo - Extinfo Client
Queries a Sauerbraten server's info port and decodes the replies.
"""

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, List, Optional

from .config import ClientConfig
from .connection import UDPTransport
from .errors import TransportTimeout
from .models import BasicInfo, BasicInfoRaw, PlayerInfo, PlayerInfoRaw, TeamScores, TeamScoresRaw
from .protocol.constants import ALL_CLIENTS, DEFAULT_INFO_PORT
from .protocol.decoders import (
    decode_basic_info_raw, decode_player_info_raw, decode_team_scores_raw,
    decode_uptime, is_player_ids_reply, translate_basic_info,
    translate_player_info, translate_team_scores,
)
from .protocol.requests import ExtinfoRequest

logger = logging.getLogger(__name__)


class ExtinfoClient:
    """
    Client for a single Sauerbraten server.

    Usage:
        client = ExtinfoClient("sauer.example.com", 28786)
        info = client.get_basic_info()
        print(f"{info.map}: {info.game_mode}, {info.number_of_clients} players")

        player = client.get_player_info(0)
        print(f"{player.name} is holding the {player.weapon}")
    """

    DEFAULT_PORT = DEFAULT_INFO_PORT
    QUICK_TIMEOUT = 0.5  # Wait for trailing datagrams of a multi-datagram reply

    def __init__(self, host: str = "localhost", port: int = DEFAULT_PORT,
                 timeout: Optional[float] = None, config: Optional[ClientConfig] = None,
                 transport: Optional[UDPTransport] = None):
        """
        Create a new extinfo client.

        Args:
            host: Server hostname or IP (ignored when config is given)
            port: Info port, the game port plus one (ignored when config is given)
            timeout: Reply timeout in seconds, overrides config.timeout
            config: Full client configuration
            transport: Pre-built transport to use instead of opening one per query
        """
        # Own copy; the caller's config is left untouched
        self.config = replace(config) if config else ClientConfig(host=host, port=port)
        if timeout is not None:
            self.config.timeout = timeout
        self.config.validate()

        self._transport = transport

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def port(self) -> int:
        return self.config.port

    @contextmanager
    def _open(self) -> Iterator[UDPTransport]:
        if self._transport is not None:
            yield self._transport
            return
        with UDPTransport(self.config.host, self.config.port,
                          self.config.timeout, self.config.buffer_size) as transport:
            yield transport

    def _query(self, request: ExtinfoRequest) -> bytes:
        if self.config.log_packets:
            logger.info(f"Querying {self.host}:{self.port} with {request}")
        with self._open() as transport:
            return transport.exchange(request.to_bytes())

    # === Basic info ===

    def get_basic_info_raw(self) -> BasicInfoRaw:
        """Query basic info; game mode and master mode stay numeric."""
        request = ExtinfoRequest.basic()
        return decode_basic_info_raw(self._query(request), request)

    def get_basic_info(self) -> BasicInfo:
        """Query basic info with game mode and master mode translated, e.g. 12 -> "insta ctf"."""
        return translate_basic_info(self.get_basic_info_raw())

    # === Uptime ===

    def get_uptime(self) -> int:
        """Seconds since the server started"""
        request = ExtinfoRequest.uptime()
        return decode_uptime(self._query(request), request)

    # === Player stats ===

    def get_player_info_raw(self, client_num: int) -> PlayerInfoRaw:
        """
        Query the stats of one player.

        The server answers with a client number list followed by the stats
        record; the list is skipped.

        Raises:
            InvalidClient: no player with this client number
        """
        if client_num < 0:
            raise ValueError("Use get_all_player_info_raw() to query every player")

        request = ExtinfoRequest.player_stats(client_num)
        with self._open() as transport:
            transport.send(request.to_bytes())
            reply = transport.receive()
            if is_player_ids_reply(reply, request):
                logger.debug("Skipping client number list")
                reply = transport.receive()
        return decode_player_info_raw(reply, request)

    def get_player_info(self, client_num: int) -> PlayerInfo:
        return translate_player_info(self.get_player_info_raw(client_num))

    def get_all_player_info_raw(self) -> List[bytes]:
        """
        Query every player and return the reply datagrams undecoded.

        The reply to an all-players query is a client number list followed by
        one datagram per player and has no end marker, so collection stops
        once the server stays quiet for QUICK_TIMEOUT seconds. Each stats
        datagram can be passed to decode_player_info_raw() together with
        ExtinfoRequest.player_stats(-1).
        """
        request = ExtinfoRequest.player_stats(ALL_CLIENTS)
        with self._open() as transport:
            transport.send(request.to_bytes())
            datagrams = [transport.receive()]
            while True:
                try:
                    datagrams.append(transport.receive(timeout=self.QUICK_TIMEOUT))
                except TransportTimeout:
                    break
        logger.debug(f"All players query returned {len(datagrams)} datagrams")
        return datagrams

    # === Team scores ===

    def get_team_scores_raw(self) -> TeamScoresRaw:
        request = ExtinfoRequest.team_score()
        return decode_team_scores_raw(self._query(request), request)

    def get_team_scores(self) -> TeamScores:
        return translate_team_scores(self.get_team_scores_raw())


# =============================================================================
# Convenience Functions
# =============================================================================

def get_basic_info(host: str, port: int = DEFAULT_INFO_PORT,
                   timeout: Optional[float] = None) -> BasicInfo:
    """
    Quick helper to query a server's basic info.

    Usage:
        info = get_basic_info("sauer.example.com")
        print(f"{info.description}: {info.map} ({info.game_mode})")
    """
    return ExtinfoClient(host, port, timeout).get_basic_info()


def get_uptime(host: str, port: int = DEFAULT_INFO_PORT,
               timeout: Optional[float] = None) -> int:
    return ExtinfoClient(host, port, timeout).get_uptime()


def get_player_info(host: str, client_num: int, port: int = DEFAULT_INFO_PORT,
                    timeout: Optional[float] = None) -> PlayerInfo:
    return ExtinfoClient(host, port, timeout).get_player_info(client_num)


def get_team_scores(host: str, port: int = DEFAULT_INFO_PORT,
                    timeout: Optional[float] = None) -> TeamScores:
    return ExtinfoClient(host, port, timeout).get_team_scores()
