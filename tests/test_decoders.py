"""
Tests for reply decoding
"""

import ipaddress

import pytest

import pyextinfo
from pyextinfo.errors import BoundsError, InvalidClient, ProtocolViolation
from pyextinfo.models import PartialIPv4
from pyextinfo.protocol.binary_reader import encode_string
from pyextinfo.protocol.decoders import (
    decode_basic_info, decode_basic_info_raw, decode_player_info,
    decode_player_info_raw, decode_team_scores, decode_team_scores_raw,
    decode_uptime, is_player_ids_reply, player_status_offset,
)
from pyextinfo.protocol.requests import ExtinfoRequest

from reply_builders import (
    basic_reply, extended_header, ints, invalid_player_reply, player_ids_reply, player_reply,
    team_scores_reply, uptime_reply,
)


class TestBasicInfo:
    """Test basic info decoding"""

    def test_five_attributes_uses_defaults(self):
        info = decode_basic_info_raw(basic_reply(attributes=5))
        assert info.number_of_clients == 3
        assert info.protocol_version == 260
        assert info.game_mode == 12
        assert info.secs_left == 300
        assert info.max_number_of_clients == 16
        assert info.master_mode == 0
        assert info.paused is False
        assert info.game_speed == 100
        assert info.map == "complex"
        assert info.description == "Test Server"

    def test_seven_attributes(self):
        info = decode_basic_info_raw(basic_reply(attributes=7, paused=1, game_speed=50))
        assert info.paused is True
        assert info.game_speed == 50
        assert info.map == "complex"
        assert info.description == "Test Server"

    def test_seven_attributes_not_paused(self):
        info = decode_basic_info_raw(basic_reply(attributes=7, paused=0, game_speed=200))
        assert info.paused is False
        assert info.game_speed == 200

    def test_large_values(self):
        info = decode_basic_info_raw(basic_reply(secs_left=100000, max_clients=128))
        assert info.secs_left == 100000
        assert info.max_number_of_clients == 128

    @pytest.mark.parametrize("attributes", [0, 4, 6, 8, -1])
    def test_bad_attribute_count(self, attributes):
        with pytest.raises(ProtocolViolation):
            decode_basic_info_raw(basic_reply(attributes=attributes))

    def test_truncated_in_map_name(self):
        reply = basic_reply(map_name="complex", description="x")
        cut = reply.index(b"complex") + 3
        with pytest.raises(BoundsError):
            decode_basic_info_raw(reply[:cut])

    def test_missing_description(self):
        reply = basic_reply(description="Test Server")
        with pytest.raises(BoundsError):
            decode_basic_info_raw(reply[:reply.index(b"Test")])

    def test_wrong_echoed_kind(self):
        with pytest.raises(ProtocolViolation):
            decode_basic_info_raw(b"\x00" + basic_reply()[1:])

    def test_translated(self):
        info = decode_basic_info(basic_reply(mode=12, master_mode=-1))
        assert info.game_mode == "insta ctf"
        assert info.master_mode == "auth"
        assert info.map == "complex"
        assert info.number_of_clients == 3

    def test_translated_unknown_mode(self):
        info = decode_basic_info(basic_reply(mode=77))
        assert info.game_mode == "unknown(77)"

    @pytest.mark.parametrize("reply", [
        basic_reply(),
        basic_reply(attributes=7, paused=1, game_speed=75, mode=3, master_mode=2),
    ])
    def test_translated_matches_raw(self, reply):
        assert decode_basic_info(reply).raw == decode_basic_info_raw(reply)

    def test_to_dict(self):
        data = decode_basic_info(basic_reply()).to_dict()
        assert data["game_mode"] == "insta ctf"
        assert data["map"] == "complex"
        assert data["game_speed"] == 100

    def test_request_of_other_kind_rejected(self):
        with pytest.raises(ValueError):
            decode_basic_info_raw(basic_reply(), ExtinfoRequest.uptime())


class TestUptime:
    """Test uptime decoding"""

    def test_uptime(self):
        assert decode_uptime(uptime_reply(3600)) == 3600

    def test_small_uptime(self):
        assert decode_uptime(uptime_reply(12)) == 12

    def test_truncated(self):
        with pytest.raises(BoundsError):
            decode_uptime(uptime_reply(3600)[:-1])

    def test_bad_ack(self):
        request = ExtinfoRequest.uptime()
        with pytest.raises(ProtocolViolation):
            decode_uptime(request.to_bytes() + ints(0, 105, 3600), request)


class TestPlayerInfo:
    """Test player stats decoding"""

    def test_decode_raw(self):
        request = ExtinfoRequest.player_stats(2)
        player = decode_player_info_raw(player_reply(cn=2), request)
        assert player.client_num == 2
        assert player.ping == 42
        assert player.name == "player"
        assert player.team == "good"
        assert player.frags == 10
        assert player.flags == 1
        assert player.deaths == 5
        assert player.teamkills == 0
        assert player.damage == 1200
        assert player.health == 100
        assert player.armour == 50
        assert player.weapon == 4
        assert player.privilege == 0
        assert player.state == 0
        assert player.ip == PartialIPv4((192, 168, 1))

    def test_negative_frags(self):
        request = ExtinfoRequest.player_stats(2)
        player = decode_player_info_raw(player_reply(cn=2, frags=-3), request)
        assert player.frags == -3

    def test_invalid_client(self):
        request = ExtinfoRequest.player_stats(7)
        with pytest.raises(InvalidClient) as exc_info:
            decode_player_info_raw(invalid_player_reply(7), request)
        assert exc_info.value.client_num == 7

    def test_status_checked_before_fields(self):
        reply = bytes([0x00, 0x01, 0x07, 0xff, 0x69, 0x01])
        assert player_status_offset(ExtinfoRequest.player_stats(7)) == 5
        with pytest.raises(InvalidClient):
            decode_player_info(reply, ExtinfoRequest.player_stats(7))

    def test_status_missing(self):
        with pytest.raises(BoundsError):
            decode_player_info_raw(bytes([0x00, 0x01, 0x07, 0xff]), ExtinfoRequest.player_stats(7))

    def test_three_byte_client_number(self):
        request = ExtinfoRequest.player_stats(200)
        assert player_status_offset(request) == 7
        player = decode_player_info_raw(player_reply(cn=200), request)
        assert player.client_num == 200
        assert player.name == "player"

    def test_invalid_three_byte_client_number(self):
        request = ExtinfoRequest.player_stats(200)
        with pytest.raises(InvalidClient) as exc_info:
            decode_player_info_raw(invalid_player_reply(200), request)
        assert exc_info.value.client_num == 200

    def test_ids_reply_is_not_stats(self):
        request = ExtinfoRequest.player_stats(2)
        reply = player_ids_reply(2, request=request)
        assert is_player_ids_reply(reply, request)
        assert not is_player_ids_reply(player_reply(cn=2), request)
        with pytest.raises(ProtocolViolation):
            decode_player_info_raw(reply, request)

    def test_truncated_ip(self):
        request = ExtinfoRequest.player_stats(2)
        with pytest.raises(BoundsError):
            decode_player_info_raw(player_reply(cn=2)[:-1], request)

    def test_only_three_octets_consumed(self):
        request = ExtinfoRequest.player_stats(2)
        player = decode_player_info_raw(player_reply(cn=2, ip=(10, 0, 5)) + b"\xff", request)
        assert player.ip.octets == (10, 0, 5)
        assert str(player.ip) == "10.0.5.x"
        assert player.ip.network == ipaddress.IPv4Network("10.0.5.0/24")

    def test_skip_ids_reply_before_decoding(self):
        request = pyextinfo.ExtinfoRequest.player_stats(3)
        replies = iter([player_ids_reply(3, request=request), player_reply(cn=3)])
        reply = next(replies)
        if pyextinfo.is_player_ids_reply(reply, request):
            reply = next(replies)
        assert pyextinfo.decode_player_info(reply, request).client_num == 3

    def test_stats_from_all_players_query(self):
        request = ExtinfoRequest.player_stats()
        player = decode_player_info_raw(player_reply(cn=4, request=request), request)
        assert player.client_num == 4

    def test_translated(self):
        request = ExtinfoRequest.player_stats(2)
        player = decode_player_info(player_reply(cn=2, weapon=3, privilege=1, state=5), request)
        assert player.weapon == "rocket launcher"
        assert player.privilege == "master"
        assert player.state == "spectator"
        assert player.name == "player"
        assert player.raw.weapon == 3

    def test_translated_unknown_weapon(self):
        request = ExtinfoRequest.player_stats(2)
        player = decode_player_info(player_reply(cn=2, weapon=40), request)
        assert player.weapon == "unknown(40)"

    def test_to_dict(self):
        request = ExtinfoRequest.player_stats(2)
        data = decode_player_info(player_reply(cn=2), request).to_dict()
        assert data["ip"] == "192.168.1.x"
        assert data["weapon"] == "rifle"


class TestTeamScores:
    """Test team score decoding"""

    def test_teams_without_bases(self):
        scores = decode_team_scores_raw(team_scores_reply([("good", 3, None), ("evil", 1, None)]))
        assert scores.is_team_mode
        assert scores.game_mode == 11
        assert scores.secs_left == 120
        assert [(s.name, s.score, s.bases) for s in scores.scores] == [
            ("good", 3, []), ("evil", 1, []),
        ]

    def test_teams_with_bases(self):
        scores = decode_team_scores_raw(team_scores_reply([("good", 500, [0, 2]), ("evil", 200, [])], mode=9))
        assert scores.scores[0].bases == [0, 2]
        assert scores.scores[1].bases == []

    def test_not_team_mode(self):
        scores = decode_team_scores_raw(team_scores_reply(team_mode=False, mode=0))
        assert not scores.is_team_mode
        assert scores.scores == []

    def test_truncated_team(self):
        reply = team_scores_reply([("good", 3, [1, 2])])
        with pytest.raises(BoundsError):
            decode_team_scores_raw(reply[:-1])

    def test_invalid_base_count(self):
        reply = (extended_header(ExtinfoRequest.team_score()) + ints(0, 11, 120)
                 + encode_string("good") + ints(3, -5))
        with pytest.raises(ProtocolViolation):
            decode_team_scores_raw(reply)

    def test_translated(self):
        scores = decode_team_scores(team_scores_reply([("good", 3, None)], mode=12))
        assert scores.game_mode == "insta ctf"
        assert scores.secs_left == 120
        assert scores.scores[0].name == "good"
