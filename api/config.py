"""
Configuration management for Recipe Box.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both the development server (api/main.py) and the
frontend (streamlit_app/app.py) to ensure .env is loaded before any other code
accesses environment variables.

In production .env will usually not exist; load_dotenv() is safe to call and will no-op.

Environment Variables:
- RECIPEBOOK_API_URL: Optional, recipe API base URL (defaults to http://localhost:8000,
  the local development server). Point it at the Sheety project URL in production.
- SHEETY_TOKEN: Optional, bearer token if the Sheety project has authentication enabled
- RECIPEBOOK_API_TIMEOUT: Optional, request timeout in seconds (default: 10)
- RECIPEBOOK_STORAGE: Optional, "session" (default) or "file" - where the login token
  and liked recipes are kept for each browser. "file" keeps them across restarts,
  partitioned by a per-browser client id
- RECIPEBOOK_STATE_FILE: Optional, path of the client state file (default: .recipebook_state.json)
- RECIPEBOOK_LOGIN_DELAY: Optional, artificial login delay in seconds (default: 0.3)
- LOG_LEVEL: Optional, logging level name (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from recipebook.storage import STORAGE_FILE, STORAGE_SESSION

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    # api/config.py -> api/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


class StoreConfig:
    """Configuration for the remote recipe store."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe API base URL.

        Returns:
            URL string with trailing slash removed.
        """
        url = os.getenv("RECIPEBOOK_API_URL", "http://localhost:8000")
        return url.rstrip("/")

    @staticmethod
    def get_token() -> Optional[str]:
        """Bearer token for the Sheety project, or None when the project is open."""
        return os.getenv("SHEETY_TOKEN") or None

    @staticmethod
    def get_timeout() -> float:
        return _float_env("RECIPEBOOK_API_TIMEOUT", 10.0)


class ClientConfig:
    """Configuration for client-side state (login token, liked recipes)."""

    @staticmethod
    def get_storage_backend() -> str:
        """
        Returns:
            "session" (default) or "file". Unknown values fall back to "session".
        """
        backend = os.getenv("RECIPEBOOK_STORAGE", STORAGE_SESSION).strip().lower()
        if backend not in (STORAGE_FILE, STORAGE_SESSION):
            return STORAGE_SESSION
        return backend

    @staticmethod
    def get_state_file() -> Path:
        return Path(os.getenv("RECIPEBOOK_STATE_FILE", ".recipebook_state.json"))

    @staticmethod
    def get_login_delay() -> float:
        return max(0.0, _float_env("RECIPEBOOK_LOGIN_DELAY", 0.3))


def configure_logging() -> None:
    """
    Configure root logging from LOG_LEVEL.

    Unknown level names fall back to INFO.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
