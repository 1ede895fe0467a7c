"""High-level API for a single player."""

from typing import TYPE_CHECKING, List, Union

from .identifiers import PlayerId, player_id
from .models import MatchSummary, Profile

if TYPE_CHECKING:
    from .client import LeetifyClient


class Player:
    """A player id bound to a client.

    Saves passing the id to every call::

        async with LeetifyClient.new() as client:
            player = client.player("76561198283431555")
            profile = await player.profile()
            matches = await player.matches()

    Errors from the client propagate unchanged.
    """

    def __init__(self, id: Union[PlayerId, str], client: "LeetifyClient"):
        """
        Initialize the player.

        :param id: Leetify id, Steam64 id, or a raw id string to classify
        :param client: Client used for every request
        :raises InvalidIdentifierError: If a raw id matches no known format
        """
        self._id = player_id(id)
        self._client = client

    @property
    def id(self) -> PlayerId:
        return self._id

    @property
    def client(self) -> "LeetifyClient":
        return self._client

    async def profile(self) -> Profile:
        """Get the player's profile."""
        return await self._client.get_profile(self._id)

    async def matches(self) -> List[MatchSummary]:
        """Get the player's match history."""
        return await self._client.get_profile_matches(self._id)

    def __repr__(self) -> str:
        return f"Player(id={self._id!r})"
