"""Leetify API endpoint definitions."""

from typing import Dict, Tuple, Union
from urllib.parse import quote

from .constants import DataSource, enum_str
from .identifiers import PlayerId


def _segment(value: str) -> str:
    """Percent-encode a caller-supplied path segment."""
    return quote(value, safe="")


class LeetifyEndpoints:
    """Leetify API route templates relative to a base URL."""

    def __init__(self, base_url: str):
        """
        Initialize endpoint configuration.

        Args:
            base_url: API root, with or without a trailing slash
        """
        self.base_url = base_url.rstrip("/")

    def url(self, path: str) -> str:
        """Join a route path onto the base URL."""
        return f"{self.base_url}{path}"

    # Profile endpoints
    def profile(self, player: PlayerId) -> Tuple[str, Dict[str, str]]:
        """Get player profile endpoint and query params."""
        return self.url("/v3/profile"), {player.query_param: player.value}

    def profile_matches(self, player: PlayerId) -> Tuple[str, Dict[str, str]]:
        """Get player match history endpoint and query params."""
        return self.url("/v3/profile/matches"), {player.query_param: player.value}

    # Match endpoints
    def match_by_game_id(self, game_id: str) -> str:
        """Get match by Leetify game id endpoint."""
        return self.url(f"/v2/matches/{_segment(game_id)}")

    def match_by_data_source(
        self, data_source: Union[DataSource, str], data_source_id: str
    ) -> str:
        """Get match by data source and source-specific match id endpoint."""
        source = _segment(enum_str(data_source))
        return self.url(f"/v2/matches/{source}/{_segment(data_source_id)}")

    # API key endpoints
    def validate_api_key(self) -> str:
        """Get API key validation endpoint."""
        return self.url("/api-key/validate")
