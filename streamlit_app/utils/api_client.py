"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend go through functions in this module.

Key principles:
- Centralized error handling for network issues
- Graceful degradation when the backend is unavailable
- Recipe analysis returns a GenerationResult and never raises, so the page
  only branches on result.ok

# NOTE: analyze_fridge_photo() only sets a connect timeout. The model call
    behind it has no timeout and cannot be cancelled, so the read side waits
    for the backend to settle.
"""

import logging
import os
from typing import Any, Dict, Iterable, Optional

import requests
import streamlit as st
from pydantic import ValidationError

from fridgechef.generation import GenerationFailure, GenerationResult
from fridgechef.ingestion import EncodedImage
from fridgechef.models import DietaryFilter, Recipe

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 5


def get_backend_url() -> str:
    """
    Get the backend API base URL from environment variable or use default.

    Returns:
        Backend URL string with trailing slash removed. Defaults to
        http://localhost:8000 for local development.
    """
    url = os.getenv("BACKEND_URL", "http://localhost:8000")
    return url.rstrip("/")


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling the /health endpoint.

    Returns:
        Dictionary with normalized status info:
        {
            "status": "ok",
            "raw": {...},  # Full response from /health endpoint
        }
        Or None if the backend is unreachable or unhealthy.
    """
    try:
        response = requests.get(f"{get_backend_url()}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError):
        return None

    if data.get("status") == "ok":
        return {"status": "ok", "raw": data}
    return None


def _failure_reason(response: requests.Response) -> GenerationFailure:
    """Read the failure reason from an error response, defaulting to request_failed."""
    try:
        detail = response.json().get("detail")
    except ValueError:
        return GenerationFailure.REQUEST_FAILED
    if isinstance(detail, dict):
        try:
            return GenerationFailure(detail.get("reason"))
        except ValueError:
            pass
    return GenerationFailure.REQUEST_FAILED


def analyze_fridge_photo(image: EncodedImage, filters: Iterable[DietaryFilter]) -> GenerationResult:
    """
    Send a photo to the backend and get a recipe batch back.

    Args:
        image: Encoded photo (base64 payload + MIME type)
        filters: Active dietary filters in selection order

    Returns:
        GenerationResult with the recipes, or a failure reason:
        - request_failed: backend unreachable, timed out, or returned an error
        - invalid_response: backend answered 200 with a body that is not a recipe batch
        - not_configured / image_read / invalid_response: as reported by the backend
    """
    payload = {
        "image_base64": image.data,
        "mime_type": image.mime_type,
        "filters": [DietaryFilter(f).value for f in filters],
    }

    try:
        response = requests.post(
            f"{get_backend_url()}/recipes/analyze",
            json=payload,
            timeout=(CONNECT_TIMEOUT_SECONDS, None),
        )
    except requests.exceptions.ConnectionError as e:
        logger.error("Could not connect to backend: %s", e)
        return GenerationResult.failed(GenerationFailure.REQUEST_FAILED, f"Backend unreachable: {e}")
    except requests.exceptions.RequestException as e:
        logger.error("Analyze request failed: %s", e)
        return GenerationResult.failed(GenerationFailure.REQUEST_FAILED, str(e))

    if not response.ok:
        reason = _failure_reason(response)
        logger.error("Backend returned %s for analyze (%s)", response.status_code, reason.value)
        return GenerationResult.failed(reason, f"HTTP {response.status_code}: {response.text[:200]}")

    try:
        data = response.json()
        recipes = [Recipe.model_validate(r) for r in data.get("recipes", [])]
    except (ValueError, AttributeError, ValidationError) as e:
        logger.error("Backend returned an unusable recipe batch: %s", e)
        return GenerationResult.failed(GenerationFailure.INVALID_RESPONSE, str(e))

    return GenerationResult.success(recipes)
