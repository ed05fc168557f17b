"""
Tests for environment-driven configuration in api/config.py.
"""

from unittest.mock import patch

import pytest

from api.config import GeminiConfig, get_log_level, get_required_env_vars
from fridgechef.generation import DEFAULT_MODEL_NAME


class TestGeminiConfig:
    """Test cases for GeminiConfig."""

    @patch.dict("os.environ", {"GEMINI_API_KEY": "primary", "API_KEY": "fallback"}, clear=True)
    def test_prefers_gemini_api_key(self):
        assert GeminiConfig.get_api_key() == "primary"

    @patch.dict("os.environ", {"API_KEY": "fallback"}, clear=True)
    def test_falls_back_to_api_key(self):
        assert GeminiConfig.get_api_key() == "fallback"

    @patch.dict("os.environ", {}, clear=True)
    def test_missing_key_is_none(self):
        assert GeminiConfig.get_api_key() is None

    @patch.dict("os.environ", {}, clear=True)
    def test_default_model(self):
        assert GeminiConfig.get_model_name() == DEFAULT_MODEL_NAME

    @patch.dict("os.environ", {"GEMINI_MODEL": "gemini-1.5-pro"}, clear=True)
    def test_model_override(self):
        assert GeminiConfig.get_model_name() == "gemini-1.5-pro"

    @pytest.mark.parametrize("raw, expected", [
        (None, 5),
        ("3", 3),
        ("0", 5),
        ("-2", 5),
        ("many", 5),
    ])
    def test_recipe_count(self, raw, expected):
        env = {} if raw is None else {"RECIPE_COUNT": raw}
        with patch.dict("os.environ", env, clear=True):
            assert GeminiConfig.get_recipe_count() == expected


class TestRequiredConfig:
    @patch.dict("os.environ", {}, clear=True)
    def test_missing_key_reported(self):
        assert get_required_env_vars() == {"gemini_api_key": False}

    @patch.dict("os.environ", {"GEMINI_API_KEY": "set"}, clear=True)
    def test_all_present(self):
        assert get_required_env_vars() == {"gemini_api_key": True}


@patch.dict("os.environ", {"LOG_LEVEL": "debug"}, clear=True)
def test_log_level_uppercased():
    assert get_log_level() == "DEBUG"
