#!/usr/bin/env python3
"""
pyextinfo-query - print what a Sauerbraten server reports on its info port
"""

import argparse
import logging
import sys

from .client import ExtinfoClient
from .config import ClientConfig, ConfigValidationError
from .errors import ExtinfoError
from .protocol.constants import DEFAULT_INFO_PORT
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Query a Sauerbraten server over extinfo')
    request_group = parser.add_mutually_exclusive_group()
    request_group.add_argument('-u', '--uptime', action='store_true', help='Server uptime in seconds')
    request_group.add_argument('-c', '--player', type=int, metavar='CN', help='Stats of one player by client number')
    request_group.add_argument('--teams', action='store_true', help='Team scores')
    parser.add_argument('-p', '--port', type=int, default=DEFAULT_INFO_PORT,
                        help='Info port, the game port plus one (default: %(default)s)')
    parser.add_argument('-t', '--timeout', type=float, default=5.0, help='Reply timeout in seconds')
    parser.add_argument('--raw', action='store_true', help='Print numeric codes instead of names')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log packets')
    parser.add_argument('host')
    return parser


def run(args: argparse.Namespace) -> dict:
    config = ClientConfig(host=args.host, port=args.port, timeout=args.timeout,
                          log_level='DEBUG' if args.verbose else 'WARNING',
                          log_packets=args.verbose)
    configure_logging(config.log_level)
    client = ExtinfoClient(config=config)

    if args.uptime:
        return {'uptime': client.get_uptime()}
    if args.player is not None:
        result = client.get_player_info_raw(args.player) if args.raw else client.get_player_info(args.player)
    elif args.teams:
        result = client.get_team_scores_raw() if args.raw else client.get_team_scores()
    else:
        result = client.get_basic_info_raw() if args.raw else client.get_basic_info()
    return result.to_dict()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.player is not None and args.player < 0:
        parser.error("client number must be 0 or greater")

    try:
        result = run(args)
    except (ExtinfoError, ConfigValidationError) as e:
        logger.error(f"{args.host}:{args.port}: {e}")
        return 1

    for key, value in result.items():
        print(f"{key}: {value}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
