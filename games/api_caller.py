# games/api_caller.py
"""
Async IGDB client.

Every call is attempted once: failures surface as IGDBRequestError and the
caller decides whether they are fatal.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from .config import CrawlConfig
from .errors import ConfigurationError, IGDBRequestError


def bearer(token: str) -> str:
    """Authorization header value for a raw or already-prefixed token"""
    token = token.strip()
    if token.lower().startswith("bearer "):
        return token
    return f"Bearer {token}"


class IGDBClient:
    """
    Thin wrapper over an aiohttp session that posts Apicalypse bodies
    to IGDB endpoints and returns the decoded JSON array.

    Use as an async context manager. A session passed in is borrowed and
    left open; otherwise one is created and closed here.
    """

    def __init__(self, config: CrawlConfig, session: Optional[aiohttp.ClientSession] = None):
        self.config = config
        self.base_url = config.igdb_base_url.rstrip("/")
        self.session = session
        self._owns_session = session is None
        self._access_token = config.access_token
        self.request_count = 0
        self.logger = logging.getLogger(self.__class__.__name__)

    async def __aenter__(self):
        """Async context manager entry"""
        if self.session is None:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
            )
        if not self._access_token:
            try:
                self._access_token = await self.exchange_twitch_credentials()
            except BaseException:
                await self.__aexit__(None, None, None)
                raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        if self.session and self._owns_session:
            await self.session.close()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Client-ID": self.config.client_id,
            "Authorization": bearer(self._access_token),
        }

    async def exchange_twitch_credentials(self) -> str:
        """
        Obtain an app access token with the client-credentials grant.

        Returns:
            The access token string

        Raises:
            ConfigurationError: no client id/secret configured
            IGDBRequestError: Twitch rejected the request
        """
        if not self.config.client_id or not self.config.client_secret:
            raise ConfigurationError("missing twitch client credentials")

        params = {
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "grant_type": "client_credentials",
        }
        self.logger.info("Requesting Twitch app access token")
        try:
            async with self.session.post(self.config.token_url, params=params) as response:
                if response.status != 200:
                    detail = await response.text()
                    raise IGDBRequestError("oauth2/token", response.status, detail[:200])
                data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise IGDBRequestError("oauth2/token", 0, str(e)) from e

        token = (data or {}).get("access_token")
        if not token:
            raise IGDBRequestError("oauth2/token", 200, "response without access_token")
        return token

    async def query(self, endpoint: str, body: str) -> List[Dict[str, Any]]:
        """
        POST an Apicalypse body to an IGDB endpoint.

        Args:
            endpoint: Endpoint name, e.g. "games" or "companies"
            body: Query text

        Returns:
            Decoded JSON array

        Raises:
            IGDBRequestError: transport error, non-200 status or a payload
                that is not a JSON array
        """
        url = f"{self.base_url}/{endpoint}"
        self.request_count += 1
        self.logger.debug(f"POST {url}: {body}")

        try:
            async with self.session.post(url, data=body, headers=self.headers) as response:
                if response.status != 200:
                    detail = await response.text()
                    raise IGDBRequestError(endpoint, response.status, detail[:200])
                data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise IGDBRequestError(endpoint, 0, str(e)) from e
        except json.JSONDecodeError as e:
            raise IGDBRequestError(endpoint, 200, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise IGDBRequestError(endpoint, 200, f"expected an array, got {type(data).__name__}")
        return data
