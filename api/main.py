"""
FastAPI application for the FridgeChef API.

This module defines the REST API endpoints for the recipe backend:
- POST /recipes/analyze: Turn a fridge/pantry photo into recipe suggestions
- GET /filters: List the supported dietary filters
- GET /health: Health check with model configuration status

The backend owns the Gemini API key so it never reaches the browser.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time

from fastapi import Depends, FastAPI, HTTPException, status

from api.config import GeminiConfig, get_log_level, get_required_env_vars
from api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    FiltersResponse,
    GenerationErrorDetail,
    HealthResponse,
)
from fridgechef import __version__
from fridgechef.generation import (
    GENERIC_ERROR_MESSAGE,
    GenerationFailure,
    RecipeGenerationClient,
)
from fridgechef.models import DIETARY_OPTIONS

logging.basicConfig(level=get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

if not get_required_env_vars()["gemini_api_key"]:
    logger.warning("GEMINI_API_KEY is not set; /recipes/analyze will answer 503 until it is configured")

API_NAME = "FridgeChef API"
API_DESCRIPTION = "Suggests recipes from a photo of your fridge or pantry using a generative model"

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=__version__,
    tags_metadata=[
        {
            "name": "recipes",
            "description": "Analyze a fridge/pantry photo and generate recipe suggestions.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

# Every other failure reason maps to 502 Bad Gateway
_STATUS_BY_FAILURE = {
    GenerationFailure.NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    GenerationFailure.IMAGE_READ: status.HTTP_400_BAD_REQUEST,
}


def get_generation_client() -> RecipeGenerationClient:
    """Build a generation client from the current configuration."""
    return RecipeGenerationClient(
        api_key=GeminiConfig.get_api_key(),
        model_name=GeminiConfig.get_model_name(),
        recipe_count=GeminiConfig.get_recipe_count(),
    )


@app.post(
    "/recipes/analyze",
    response_model=AnalyzeResponse,
    response_model_by_alias=True,
    tags=["recipes"],
    summary="Generate recipes from a fridge photo",
    description="Identify the ingredients in the photo and suggest recipes that respect the given "
                "dietary filters. Failures are reported with a single generic message.",
    responses={
        400: {"model": GenerationErrorDetail, "description": "Image payload could not be decoded"},
        502: {"model": GenerationErrorDetail, "description": "Model request or response failed"},
        503: {"model": GenerationErrorDetail, "description": "Model API key not configured"},
    },
)
def analyze(
    request: AnalyzeRequest,
    client: RecipeGenerationClient = Depends(get_generation_client),
) -> AnalyzeResponse:
    """
    Analyze a photo and return a recipe batch.

    Args:
        request: AnalyzeRequest with base64 image, MIME type and filters
        client: Generation client (injected)

    Returns:
        AnalyzeResponse with the generated recipes (may be empty)

    Raises:
        HTTPException 400: If the image payload is not valid base64
        HTTPException 502: If the model call fails or returns an unusable response
        HTTPException 503: If the Gemini API key is not configured

    Example:
        ```bash
        POST /recipes/analyze
        {"image_base64": "...", "mime_type": "image/jpeg", "filters": ["Vegan"]}
        ```
    """
    image = request.to_encoded_image()
    result = client.generate(image, request.filters)

    if not result.ok:
        logger.warning("Analyze request failed: %s (%s)", result.failure.value, result.detail)
        raise HTTPException(
            status_code=_STATUS_BY_FAILURE.get(result.failure, status.HTTP_502_BAD_GATEWAY),
            detail=GenerationErrorDetail(
                reason=result.failure.value,
                message=GENERIC_ERROR_MESSAGE,
            ).model_dump(),
        )

    logger.info("Analyze request returned %d recipe(s)", len(result.recipes))
    return AnalyzeResponse(recipes=result.recipes)


@app.get("/filters", response_model=FiltersResponse, tags=["recipes"])
def list_filters() -> FiltersResponse:
    """Supported dietary filters, in display order."""
    return FiltersResponse(filters=DIETARY_OPTIONS)


@app.get("/health", response_model=HealthResponse, tags=["health"])
def health() -> HealthResponse:
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Status, API metadata, uptime and whether the model API key is set.
        Always returns 200 OK if the endpoint is reachable.
    """
    return HealthResponse(
        status="ok",
        name=API_NAME,
        version=__version__,
        model=GeminiConfig.get_model_name(),
        api_key_configured=GeminiConfig.get_api_key() is not None,
        uptime_seconds=int(time.time() - _APP_START_TIME),
    )


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": API_NAME,
        "version": __version__,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
