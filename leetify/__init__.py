"""
Async client for the Leetify Public CS API.

This package provides typed access to player profiles, match history and
match details, with builder configuration and classified errors.
"""

from .client import ClientBuilder, LeetifyClient
from .config import ClientConfig, Settings, get_settings
from .logging import setup_logging
from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DataSource
from .errors import (
    LeetifyError,
    InvalidIdentifierError,
    MissingParameterError,
    InvalidConfigError,
    InvalidApiKeyError,
    HttpError,
    ApiError,
    DecodeError,
)
from .identifiers import LeetifyId, Steam64Id, PlayerId, player_id
from .models import (
    Profile,
    Ranks,
    CompetitiveRank,
    Rating,
    ProfileStats,
    RecentMatch,
    RecentTeammate,
    PlatformBan,
    MatchSummary,
    MatchDetails,
    TeamScore,
    PlayerStats,
)
from .player import Player

Client = LeetifyClient

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientBuilder",
    "LeetifyClient",
    "ClientConfig",
    "Settings",
    "get_settings",
    "setup_logging",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DataSource",
    "LeetifyError",
    "InvalidIdentifierError",
    "MissingParameterError",
    "InvalidConfigError",
    "InvalidApiKeyError",
    "HttpError",
    "ApiError",
    "DecodeError",
    "LeetifyId",
    "Steam64Id",
    "PlayerId",
    "player_id",
    "Profile",
    "Ranks",
    "CompetitiveRank",
    "Rating",
    "ProfileStats",
    "RecentMatch",
    "RecentTeammate",
    "PlatformBan",
    "MatchSummary",
    "MatchDetails",
    "TeamScore",
    "PlayerStats",
    "Player",
]
