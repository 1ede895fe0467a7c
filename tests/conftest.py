"""Shared fixtures for Leetify client tests."""

from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from leetify import LeetifyClient

TEST_BASE_URL = "https://api.test.leetify.local"
STEAM64 = "76561198283431555"
LEETIFY_UUID = "5ea07280-2399-4c7e-88ab-f2f7db0c449f"


@pytest.fixture
def sample_profile_data() -> Dict[str, Any]:
    """Sample profile response."""
    return {
        "privacy_mode": "public",
        "winrate": 0.54,
        "total_matches": 1234,
        "first_match_date": "2021-03-14T12:00:00Z",
        "name": "TestPlayer",
        "bans": [
            {
                "platform": "faceit",
                "platform_nickname": "cheater",
                "banned_since": "2023-01-01T00:00:00Z",
            }
        ],
        "steam64_id": STEAM64,
        "id": LEETIFY_UUID,
        "ranks": {
            "leetify": 2.31,
            "premier": 18500,
            "faceit": 8,
            "faceit_elo": 1750,
            "wingman": None,
            "renown": None,
            "competitive": [{"map_name": "de_mirage", "rank": 15}],
        },
        "rating": {
            "aim": 78.2,
            "positioning": 61.0,
            "utility": 55.4,
            "clutch": 0.12,
            "opening": 0.03,
            "ct_leetify": 0.02,
            "t_leetify": 0.01,
        },
        "stats": {
            "accuracy_enemy_spotted": 34.1,
            "accuracy_head": 22.5,
            "counter_strafing_good_shots_ratio": 81.0,
            "ct_opening_aggression_success_rate": 48.0,
            "ct_opening_duel_success_percentage": 52.0,
            "flashbang_hit_foe_avg_duration": 2.4,
            "flashbang_hit_foe_per_flashbang": 0.6,
            "flashbang_hit_friend_per_flashbang": 0.2,
            "flashbang_leading_to_kill": 0.05,
            "flashbang_thrown": 4.1,
            "he_foes_damage_avg": 12.3,
            "he_friends_damage_avg": 0.8,
            "preaim": 8.9,
            "reaction_time_ms": 612.0,
            "spray_accuracy": 41.0,
            "t_opening_aggression_success_rate": 45.0,
            "t_opening_duel_success_percentage": 50.0,
            "traded_deaths_success_percentage": 38.0,
            "trade_kill_opportunities_per_round": 0.3,
            "trade_kills_success_percentage": 44.0,
            "utility_on_death_avg": 210.0,
        },
        "recent_matches": [
            {
                "id": "c0ffee00-0000-4000-8000-000000000001",
                "finished_at": "2024-05-01T20:15:00Z",
                "data_source": "matchmaking",
                "outcome": "win",
                "rank": 18500,
                "rank_type": 11,
                "map_name": "de_mirage",
                "leetify_rating": 0.04,
                "score": [13, 9],
                "preaim": 7.5,
                "reaction_time_ms": 590,
                "accuracy_enemy_spotted": 36.0,
                "accuracy_head": 24.0,
                "spray_accuracy": 43.0,
            }
        ],
        "recent_teammates": [
            {"steam64_id": "76561198000000001", "recent_matches_count": 7}
        ],
        "unknown_future_field": {"ignored": True},
    }


def make_player_stats(steam64_id: str, name: str, team: int) -> Dict[str, Any]:
    """Build per-player match statistics."""
    stats: Dict[str, Any] = {
        "steam64_id": steam64_id,
        "name": name,
        "initial_team_number": team,
        "leetify_rating": 0.05,
        "ct_leetify_rating": None,
        "t_leetify_rating": 0.07,
    }
    int_fields = [
        "mvps", "shots_fired_enemy_spotted", "shots_fired",
        "shots_hit_enemy_spotted", "shots_hit_friend", "shots_hit_friend_head",
        "shots_hit_foe", "shots_hit_foe_head", "he_thrown", "molotov_thrown",
        "smoke_thrown", "counter_strafing_shots_all", "counter_strafing_shots_bad",
        "counter_strafing_shots_good", "flashbang_hit_foe",
        "flashbang_leading_to_kill", "flashbang_hit_friend", "flashbang_thrown",
        "flash_assist", "score", "total_kills", "total_deaths", "rounds_survived",
        "total_assists", "total_damage", "multi1k", "multi2k", "multi3k",
        "multi4k", "multi5k", "rounds_count", "rounds_won", "rounds_lost",
        "total_hs_kills", "trade_kill_opportunities", "trade_kill_attempts",
        "trade_kills_succeed", "traded_death_opportunities",
        "traded_death_attempts", "traded_deaths_succeed",
    ]
    float_fields = [
        "preaim", "reaction_time", "accuracy", "accuracy_enemy_spotted",
        "accuracy_head", "utility_on_death_avg", "he_foes_damage_avg",
        "he_friends_damage_avg", "counter_strafing_shots_good_ratio",
        "flashbang_hit_foe_avg_duration", "spray_accuracy", "kd_ratio",
        "rounds_survived_percentage", "dpr", "trade_kill_attempts_percentage",
        "trade_kills_success_percentage", "trade_kill_opportunities_per_round",
        "traded_death_attempts_percentage", "traded_deaths_success_percentage",
        "traded_deaths_opportunities_per_round",
    ]
    for field in int_fields:
        stats[field] = 3
    for field in float_fields:
        stats[field] = 1.5
    return stats


@pytest.fixture
def sample_match_data() -> Dict[str, Any]:
    """Sample match details response."""
    return {
        "id": "c0ffee00-0000-4000-8000-000000000001",
        "finished_at": "2024-05-01T20:15:00Z",
        "data_source": "faceit",
        "data_source_match_id": "1-abcdef",
        "map_name": "de_inferno",
        "has_banned_player": False,
        "team_scores": [
            {"team_number": 2, "score": 13},
            {"team_number": 3, "score": 11},
        ],
        "stats": [
            make_player_stats(STEAM64, "TestPlayer", 2),
            make_player_stats("76561198000000001", "Teammate", 2),
        ],
    }


@pytest.fixture
def sample_match_history(sample_match_data) -> List[Dict[str, Any]]:
    """Sample match history response, newest first."""
    older = dict(sample_match_data)
    older["id"] = "c0ffee00-0000-4000-8000-000000000002"
    older["map_name"] = "de_nuke"
    older["data_source"] = "matchmaking"
    return [sample_match_data, older]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest_asyncio.fixture
async def make_client():
    """Factory building clients whose requests are answered by a handler."""
    clients: List[LeetifyClient] = []

    def factory(handler, api_key: str | None = "test_api_key"):
        transport = RecordingTransport(handler)
        builder = LeetifyClient.builder().base_url(TEST_BASE_URL).transport(transport)
        if api_key:
            builder.api_key(api_key)
        client = builder.build()
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        await client.aclose()


def json_handler(payload: Any, status_code: int = 200):
    """Handler returning the same JSON payload for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler
