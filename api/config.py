"""
Configuration management for FridgeChef.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early in both the backend (api/main.py)
and the frontend (streamlit_app/app.py) so .env is loaded before any other
code reads environment variables.

In production .env will not exist; load_dotenv() is safe to call and no-ops,
and the platform's environment variables are used instead.

Environment Variables:
- GEMINI_API_KEY: Required, API key for the Gemini generative model
- API_KEY: Accepted as a fallback for GEMINI_API_KEY
- GEMINI_MODEL: Optional, defaults to "gemini-2.5-flash"
- RECIPE_COUNT: Optional, number of recipes to ask for (default: 5)
- BACKEND_URL: Optional, backend URL used by the frontend (default: http://localhost:8000)
- LOG_LEVEL: Optional, root log level for the backend (default: INFO)
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from fridgechef.generation import DEFAULT_MODEL_NAME
from fridgechef.prompts import DEFAULT_RECIPE_COUNT


def load_env_file() -> None:
    """
    Load environment variables from the .env file at the project root.

    Locates the project root by going up from this file (api/config.py ->
    project root). Existing environment variables take precedence.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env on module import
load_env_file()


class GeminiConfig:
    """Configuration for the Gemini recipe generation client."""

    @staticmethod
    def get_api_key() -> Optional[str]:
        """
        Get the Gemini API key from the environment.

        Returns:
            GEMINI_API_KEY, else API_KEY, else None

        Note:
            This does not raise; the generation client reports a missing key
            as a "not_configured" failure.
        """
        return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    @staticmethod
    def get_model_name() -> str:
        return os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME)

    @staticmethod
    def get_recipe_count() -> int:
        """
        Number of recipes requested per photo.

        Returns:
            RECIPE_COUNT as int (default: 5). Invalid or non-positive values
            fall back to the default.
        """
        raw = os.getenv("RECIPE_COUNT")
        try:
            count = int(raw) if raw else DEFAULT_RECIPE_COUNT
        except ValueError:
            return DEFAULT_RECIPE_COUNT
        return count if count > 0 else DEFAULT_RECIPE_COUNT


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_required_env_vars() -> dict:
    """
    Report which required environment variables are set.

    Returns:
        Dictionary with keys:
        - gemini_api_key: bool (True if set)
    """
    return {
        "gemini_api_key": GeminiConfig.get_api_key() is not None,
    }

