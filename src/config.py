"""
Runtime configuration.

Settings are read once at startup from a local .env file and the process
environment, then passed explicitly to every component.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.errors import ConfigError

logger = logging.getLogger(__name__)

_REQUIRED = ("NOTION_API_TOKEN", "NOTION_DB_ID", "TEAMS_WEBHOOK_URL")


@dataclass(frozen=True)
class Settings:
    """Configuration for a single run."""

    notion_api_token: str
    notion_db_id: str
    teams_webhook_url: str
    published_checkbox_id: Optional[str] = None
    debug: bool = False
    notify_when_empty: bool = False


def _flag(name: str) -> bool:
    # Only the literal string "true" turns a flag on
    return os.environ.get(name, "") == "true"


def load_settings(env_file: str = ".env") -> Settings:
    """Loads the .env file and builds the Settings value."""
    if not os.path.isfile(env_file):
        raise ConfigError(f"Error loading {env_file} file")

    load_dotenv(env_file)
    logger.debug("Loaded environment from %s", env_file)

    missing = [name for name in _REQUIRED if not os.environ.get(name)]
    if missing:
        raise ConfigError(f"Missing required settings: {', '.join(missing)}")

    return Settings(
        notion_api_token=os.environ["NOTION_API_TOKEN"],
        notion_db_id=os.environ["NOTION_DB_ID"],
        teams_webhook_url=os.environ["TEAMS_WEBHOOK_URL"],
        published_checkbox_id=os.environ.get("NOTION_PUBLISHED_CHECKBOX_ID") or None,
        debug=_flag("DEBUG"),
        notify_when_empty=_flag("NOTIFY_WHEN_EMPTY"),
    )
