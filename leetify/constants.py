"""Leetify API constants and enum definitions."""

from enum import Enum
from typing import Union

DEFAULT_BASE_URL = "https://api-public.cs-prod.leetify.com"
DEFAULT_TIMEOUT = 30.0
API_KEY_HEADER = "_leetify_key"
USER_AGENT = "leetify-python/0.1.0"


class DataSource(str, Enum):
    """Origin of a match record."""

    FACEIT = "faceit"
    MATCHMAKING = "matchmaking"

    @classmethod
    def parse(cls, value: str) -> Union["DataSource", str]:
        """Return the known source for ``value``, or ``value`` itself."""
        try:
            return cls(value)
        except ValueError:
            return value


def enum_str(value: Union[DataSource, str]) -> str:
    """Extract string value from enum or return as-is."""
    return value.value if isinstance(value, Enum) else value
