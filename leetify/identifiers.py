"""Player identifiers accepted by the Leetify API.

A player is addressed either by the Leetify user id (a UUID) or by the
Steam64 id of their Steam account (a long numeric string). Both keep the raw
text exactly as given: Steam64 ids are never converted to ``int``.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Union

from .errors import InvalidIdentifierError

UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
DIGITS_PATTERN = re.compile(r"[0-9]+")

# Steam64 ids are 17 digits in practice
MIN_STEAM64_LENGTH = 15


def is_uuid_format(value: str) -> bool:
    """Check if a string matches xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx."""
    return UUID_PATTERN.fullmatch(value) is not None


def is_numeric(value: str) -> bool:
    """Check if a string is made of ASCII decimal digits only."""
    return DIGITS_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class LeetifyId:
    """Leetify user id (UUID format)."""

    value: str

    query_param: ClassVar[str] = "id"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_uuid_format(self.value):
            raise InvalidIdentifierError(str(self.value), expected="Leetify")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Steam64Id:
    """Steam64 id for a player."""

    value: str

    query_param: ClassVar[str] = "steam64_id"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_numeric(self.value):
            raise InvalidIdentifierError(str(self.value), expected="Steam64")

    def __str__(self) -> str:
        return self.value


PlayerId = Union[LeetifyId, Steam64Id]


def player_id(value: Union[PlayerId, str]) -> PlayerId:
    """
    Resolve a player id, classifying raw strings by their format.

    UUID-shaped strings become a LeetifyId, strings of at least 15 digits a
    Steam64Id. Anything else is rejected rather than guessed.

    Args:
        value: Typed id (returned unchanged) or raw id string

    Returns:
        LeetifyId or Steam64Id holding the original string

    Raises:
        InvalidIdentifierError: If the string matches neither format
    """
    if isinstance(value, (LeetifyId, Steam64Id)):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifierError(repr(value))

    if is_uuid_format(value):
        return LeetifyId(value)
    if is_numeric(value) and len(value) >= MIN_STEAM64_LENGTH:
        return Steam64Id(value)
    raise InvalidIdentifierError(value)
