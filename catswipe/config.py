"""
AppConfig Loader for catswipe

Loads and validates all environment/config variables, supporting:
- TheCatAPI endpoint, API key and timeout
- Default batch size for the swipe deck
- Liked cats storage path (defaults to the per-user data directory)
- Log level for the entrypoint

Exposes a single AppConfig object for the entrypoint to use. Library code
(CatService, CatApiClient) takes these values as explicit arguments.
"""
import os
import sys
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

APP_DIR_NAME = "catswipe"
LIKED_CATS_FILE_NAME = "liked_cats.json"
DEFAULT_CAT_API_URL = "https://api.thecatapi.com/v1/images/search"


def default_data_dir() -> Path:
    """Per-user local application data directory."""
    if sys.platform.startswith("win"):
        base = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / APP_DIR_NAME


def default_liked_cats_path() -> Path:
    return default_data_dir() / LIKED_CATS_FILE_NAME


class AppConfig:
    """
    Centralized config loader.
    Loads env vars, applies defaults, and type conversion.

    # --- ENVIRONMENT VARIABLES ---
    # CAT_API_KEY: TheCatAPI key, sent as x-api-key when set
    # CAT_API_URL: Image search endpoint
    # CAT_API_TIMEOUT: HTTP timeout in seconds
    # CAT_BATCH_SIZE: Number of cats requested per deck refill
    # LIKED_CATS_FILE: Path of the liked cats JSON file
    # LOG_LEVEL: Root log level (DEBUG, INFO, ...)
    """
    def __init__(self):
        # --- TheCatAPI ---
        self.cat_api_key = os.getenv("CAT_API_KEY", "")
        self.cat_api_url = os.getenv("CAT_API_URL", DEFAULT_CAT_API_URL)
        self.cat_api_timeout = self._to_float(os.getenv("CAT_API_TIMEOUT", "10"), 10.0)

        # --- Deck ---
        self.batch_size = self._to_int(os.getenv("CAT_BATCH_SIZE", "10"), 10)
        if self.batch_size < 1:
            logger.warning(f"CAT_BATCH_SIZE must be positive, got {self.batch_size}. Using 10.")
            self.batch_size = 10

        # --- Storage ---
        liked_file = os.getenv("LIKED_CATS_FILE", "")
        self.liked_cats_file = Path(liked_file) if liked_file else default_liked_cats_path()

        # --- Logging ---
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _to_int(self, value: str, default: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid integer config value {value!r}; using {default}.")
            return default

    def _to_float(self, value: str, default: float) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid float config value {value!r}; using {default}.")
            return default

    def __repr__(self):
        return (f"<AppConfig api_url={self.cat_api_url} api_key={'set' if self.cat_api_key else 'unset'} "
                f"liked_cats_file={self.liked_cats_file}>")

# Singleton instance for the entrypoint to import
config = AppConfig()
