# games/config.py
"""
Crawl configuration.

Credentials come from the process environment (optionally a .env file);
business parameters are plain dataclass fields so callers and tests can
override any of them.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

IGDB_MAX_PAGE_SIZE = 500


@dataclass(frozen=True)
class CrawlConfig:
    """Named, overridable crawl parameters"""

    # Credentials
    client_id: str = ""
    access_token: str = ""
    client_secret: Optional[str] = None

    # Query
    page_size: int = IGDB_MAX_PAGE_SIZE
    max_batches: Optional[int] = None
    release_date_floor: int = 1577836800  # 2020-01-01 UTC
    rating_floor: float = 85

    # Pacing: four requests per second
    batch_delay: float = 0.25
    request_timeout: Optional[float] = None

    # Output
    json_path: str = "gameData.json"
    workbook_path: str = "gameData.xlsx"
    sheet_name: str = "sheet"

    # Endpoints
    igdb_base_url: str = "https://api.igdb.com/v4"
    token_url: str = "https://id.twitch.tv/oauth2/token"
    search_url: str = "https://www.google.com/search"

    # Behavior
    fatal_developer_errors: bool = False
    release_dates_utc: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "CrawlConfig":
        """
        Build a config from environment variables.

        Reads CLIENT_ID, API_KEY (access token) and CLIENT_SECRET. When no
        mapping is passed the process environment is used after loading a
        .env file from the working directory.

        Args:
            env: Mapping to read instead of os.environ
            **overrides: Field values that take precedence over the environment

        Returns:
            Validated CrawlConfig
        """
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        config = cls(
            client_id=env.get("CLIENT_ID", "").strip(),
            access_token=env.get("API_KEY", "").strip(),
            client_secret=(env.get("CLIENT_SECRET") or "").strip() or None,
        )
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            config = replace(config, **overrides)

        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigurationError when a field is out of range"""
        if not 0 < self.page_size <= IGDB_MAX_PAGE_SIZE:
            raise ConfigurationError(
                f"page_size must be between 1 and {IGDB_MAX_PAGE_SIZE}, got {self.page_size}"
            )
        if self.max_batches is not None and self.max_batches < 1:
            raise ConfigurationError(f"max_batches must be positive, got {self.max_batches}")
        if self.batch_delay < 0:
            raise ConfigurationError(f"batch_delay cannot be negative, got {self.batch_delay}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError(f"request_timeout must be positive, got {self.request_timeout}")

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless IGDB calls can be authenticated"""
        if not self.client_id:
            raise ConfigurationError("CLIENT_ID missing. Add it to .env or the environment.")
        if not self.access_token and not self.client_secret:
            raise ConfigurationError(
                "API_KEY or CLIENT_SECRET missing. Add one to .env or the environment."
            )
