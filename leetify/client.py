"""Leetify API HTTP client with builder configuration and error classification."""

from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional, Tuple, TypeVar, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import ClientConfig, Settings, get_global_settings
from .constants import API_KEY_HEADER, DEFAULT_TIMEOUT, USER_AGENT, DataSource, enum_str
from .endpoints import LeetifyEndpoints
from .errors import (
    ApiError,
    DecodeError,
    HttpError,
    InvalidApiKeyError,
    InvalidConfigError,
    MissingParameterError,
)
from .identifiers import PlayerId, player_id
from .logging import get_logger
from .models import MatchDetails, MatchSummary, Profile
from .player import Player

logger = get_logger(__name__)

T = TypeVar("T")

_PROFILE = TypeAdapter(Profile)
_MATCH_HISTORY = TypeAdapter(List[MatchSummary])
_MATCH_DETAILS = TypeAdapter(MatchDetails)


class ClientBuilder:
    """Builder for creating a customized LeetifyClient."""

    def __init__(self, client_class: Optional[type] = None) -> None:
        self._client_class = client_class or LeetifyClient
        self._api_key: Optional[str] = None
        self._timeout: Any = DEFAULT_TIMEOUT
        self._base_url: Optional[str] = None
        self._transport: Optional[httpx.AsyncBaseTransport] = None
        self._headers: Dict[str, str] = {}

    def api_key(self, key: str) -> "ClientBuilder":
        """Set the API key sent with every request."""
        self._api_key = key
        return self

    def timeout(self, timeout: Union[float, timedelta]) -> "ClientBuilder":
        """Set the request timeout, in seconds or as a timedelta."""
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self._timeout = timeout
        return self

    def base_url(self, url: str) -> "ClientBuilder":
        """Set a custom base URL for the API."""
        self._base_url = url
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "ClientBuilder":
        """Use a custom httpx transport (proxies, mounts, test stubs)."""
        self._transport = transport
        return self

    def headers(self, headers: Mapping[str, str]) -> "ClientBuilder":
        """Add default headers sent with every request."""
        self._headers.update(headers)
        return self

    def build(self) -> "LeetifyClient":
        """
        Validate the options and build the client.

        Returns:
            Configured LeetifyClient

        Raises:
            InvalidConfigError: On the first invalid option
        """
        values: Dict[str, Any] = {"api_key": self._api_key, "timeout": self._timeout}
        if self._base_url is not None:
            values["base_url"] = self._base_url

        try:
            config = ClientConfig(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "config"
            raise InvalidConfigError(field, first["msg"]) from e

        return self._client_class(
            config, transport=self._transport, headers=self._headers
        )


class LeetifyClient:
    """Client for the Leetify Public CS API."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the client and its HTTP session.

        Prefer :meth:`builder`, :meth:`new` or :meth:`with_api_key`.

        Args:
            config: Validated client options (defaults when None)
            transport: Optional httpx transport
            headers: Extra default headers
        """
        self.config = config or ClientConfig()
        self.endpoints = LeetifyEndpoints(self.config.base_url)

        session_headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        session_headers.update(headers or {})
        if self.config.api_key:
            session_headers[API_KEY_HEADER] = self.config.api_key

        self.session = httpx.AsyncClient(
            headers=session_headers,
            timeout=httpx.Timeout(self.config.timeout),
            transport=transport,
        )

        logger.debug(
            "leetify_client_created",
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            api_key="[REDACTED]" if self.config.api_key else None,
        )

    @classmethod
    def new(cls) -> "LeetifyClient":
        """Create a client without an API key (lower rate limits)."""
        return cls.builder().build()

    @classmethod
    def with_api_key(cls, api_key: str) -> "LeetifyClient":
        """Create a client with an API key and default settings."""
        return cls.builder().api_key(api_key).build()

    @classmethod
    def builder(cls) -> ClientBuilder:
        """Create a builder for customizing the client configuration."""
        return ClientBuilder(cls)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LeetifyClient":
        """Create a client from LEETIFY_* environment settings."""
        settings = settings or get_global_settings()
        builder = cls.builder().timeout(settings.timeout).base_url(settings.base_url)
        if settings.api_key:
            builder.api_key(settings.api_key)
        return builder.build()

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    async def __aenter__(self) -> "LeetifyClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx session and its pooled connections."""
        if not self.session.is_closed:
            await self.session.aclose()
            logger.debug("leetify_client_closed")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"

    # Request handling

    @staticmethod
    def _error_payload(response: httpx.Response) -> Tuple[Dict[str, Any], str]:
        """Extract the decoded error body and its message."""
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
            if isinstance(message, str) and message:
                return data, message
            return data, response.text or response.reason_phrase

        return {}, response.text or response.reason_phrase

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise the LeetifyError subclass matching a non-success status."""
        if response.is_success:
            return

        status = response.status_code
        data, message = self._error_payload(response)
        logger.warning(
            "leetify_api_error",
            path=response.request.url.path,
            status=status,
            message=message,
        )

        if status in (401, 403):
            raise InvalidApiKeyError(
                "Invalid or missing API key", status_code=status, response_data=data
            )
        raise ApiError(status, message, response_data=data)

    async def _request(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
        method: str = "GET",
    ) -> httpx.Response:
        """
        Execute a single HTTP request.

        Args:
            url: Request URL
            params: Query parameters
            method: HTTP method

        Returns:
            Successful response with its body read

        Raises:
            HttpError: On transport failures and timeouts
            InvalidApiKeyError: On 401/403
            ApiError: On any other non-success status
        """
        try:
            response = await self.session.request(method, url, params=params)
        except httpx.HTTPError as e:
            logger.warning("leetify_request_failed", url=url, error=str(e))
            raise HttpError(f"Request failed: {e}") from e

        try:
            logger.debug(
                "leetify_request",
                method=method,
                path=response.request.url.path,
                status=response.status_code,
            )
            self._raise_for_status(response)
            return response
        finally:
            await response.aclose()

    @staticmethod
    def _decode(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        """Decode a JSON body into the expected model."""
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Failed to parse response body: {e}",
                status_code=response.status_code,
            ) from e

    # Profile endpoints

    async def get_profile(self, id: Union[PlayerId, str]) -> Profile:
        """Get player profile by Leetify id or Steam64 id."""
        url, params = self.endpoints.profile(player_id(id))
        response = await self._request(url, params)
        return self._decode(response, _PROFILE)

    async def get_profile_matches(
        self, id: Union[PlayerId, str]
    ) -> List[MatchSummary]:
        """Get player match history, in the order returned by the API."""
        url, params = self.endpoints.profile_matches(player_id(id))
        response = await self._request(url, params)
        return self._decode(response, _MATCH_HISTORY)

    # Match endpoints

    async def get_match_by_game_id(self, game_id: str) -> MatchDetails:
        """Get match details by Leetify game id."""
        if not game_id:
            raise MissingParameterError("game_id")

        response = await self._request(self.endpoints.match_by_game_id(game_id))
        return self._decode(response, _MATCH_DETAILS)

    async def get_match_by_data_source(
        self, data_source: Union[DataSource, str], data_source_id: str
    ) -> MatchDetails:
        """
        Get match details by data source and the source's own match id.

        Args:
            data_source: DataSource member or any source name (e.g. "faceit")
            data_source_id: The data source specific match id
        """
        if not enum_str(data_source):
            raise MissingParameterError("data_source")
        if not data_source_id:
            raise MissingParameterError("data_source_id")

        url = self.endpoints.match_by_data_source(data_source, data_source_id)
        response = await self._request(url)
        return self._decode(response, _MATCH_DETAILS)

    # API key endpoints

    async def validate_api_key(self) -> None:
        """
        Validate the configured API key.

        Raises:
            InvalidApiKeyError: If no key is configured or the API rejects it
            ApiError: On other non-success statuses
        """
        if not self.config.api_key:
            raise InvalidApiKeyError("No API key configured")

        await self._request(self.endpoints.validate_api_key())
        logger.debug("leetify_api_key_valid")

    def player(self, id: Union[PlayerId, str]) -> Player:
        """Create a Player bound to this client."""
        return Player(id, self)
