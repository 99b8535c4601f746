"""
Protocol constants for the extinfo query protocol
"""

from enum import IntEnum


class QueryKind(IntEnum):
    """Leading int of every request"""
    EXTENDED = 0
    BASIC = 1


class ExtendedQuery(IntEnum):
    """Sub-kind of an extended request"""
    UPTIME = 0
    PLAYER_STATS = 1
    TEAM_SCORE = 2


# Variable-length int markers
INT16_MARKER = 0x80  # -128 as signed char
INT32_MARKER = 0x81  # -127 as signed char

# Extended reply header
EXT_ACK = -1
EXT_VERSION = 105

# Player stats / team score status
EXT_NO_ERROR = 0
EXT_ERROR = 1

# Player stats reply markers
EXT_PLAYERSTATS_RESP_IDS = -10
EXT_PLAYERSTATS_RESP_STATS = -11

# Team score base count when the mode has no bases
NO_BASES = -1

# Basic info attribute counts
BASIC_ATTRIBUTES = 5
BASIC_ATTRIBUTES_EXTENDED = 7  # adds paused flag and game speed

DEFAULT_GAME_SPEED = 100

# Client number meaning "every player"
ALL_CLIENTS = -1

# Octets of the player IP sent by the server
IP_OCTETS_SENT = 3

# The info port is the game port plus one
DEFAULT_GAME_PORT = 28785
DEFAULT_INFO_PORT = DEFAULT_GAME_PORT + 1
