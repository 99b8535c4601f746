"""
Display names for the numeric codes sent by the server
"""

from typing import Dict

GAME_MODES: Dict[int, str] = {
    0: "ffa",
    1: "coop edit",
    2: "teamplay",
    3: "instagib",
    4: "insta team",
    5: "efficiency",
    6: "effic team",
    7: "tactics",
    8: "tac team",
    9: "capture",
    10: "regen capture",
    11: "ctf",
    12: "insta ctf",
    13: "protect",
    14: "insta protect",
    15: "hold",
    16: "insta hold",
    17: "effic ctf",
    18: "effic protect",
    19: "effic hold",
    20: "collect",
    21: "insta collect",
    22: "effic collect",
}

MASTER_MODES: Dict[int, str] = {
    -1: "auth",
    0: "open",
    1: "veto",
    2: "locked",
    3: "private",
    4: "password",
}

WEAPONS: Dict[int, str] = {
    0: "chain saw",
    1: "shotgun",
    2: "chaingun",
    3: "rocket launcher",
    4: "rifle",
    5: "grenade launcher",
    6: "pistol",
    7: "fire ball",
    8: "ice ball",
    9: "slime ball",
    10: "bite",
    11: "barrel",
}

PRIVILEGES: Dict[int, str] = {
    0: "none",
    1: "master",
    2: "auth",
    3: "admin",
}

STATES: Dict[int, str] = {
    0: "alive",
    1: "dead",
    2: "spawning",
    3: "lagged",
    4: "editing",
    5: "spectator",
}


def unknown_name(code: int) -> str:
    return f"unknown({code})"


def _lookup(table: Dict[int, str], code: int) -> str:
    return table.get(code, unknown_name(code))


def game_mode_name(code: int) -> str:
    """Translate a game mode code, e.g. 12 -> "insta ctf"."""
    return _lookup(GAME_MODES, code)


def master_mode_name(code: int) -> str:
    return _lookup(MASTER_MODES, code)


def weapon_name(code: int) -> str:
    return _lookup(WEAPONS, code)


def privilege_name(code: int) -> str:
    return _lookup(PRIVILEGES, code)


def state_name(code: int) -> str:
    return _lookup(STATES, code)
