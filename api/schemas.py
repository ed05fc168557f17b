"""
Pydantic schemas for FastAPI request and response models.

The schemas include:
- AnalyzeRequest: base64 photo, MIME type and dietary filters
- AnalyzeResponse: the generated recipe batch (camelCase wire names)
- GenerationErrorDetail: body of a failed analysis
- FiltersResponse / HealthResponse

# NOTE: Recipe itself lives in fridgechef.models and is reused as-is. FastAPI
    serializes response models by alias, so recipes leave the API in the same
    camelCase shape the model produced them in.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fridgechef.ingestion import DEFAULT_MIME_TYPE, EncodedImage, strip_data_url
from fridgechef.models import DietaryFilter, Recipe


class AnalyzeRequest(BaseModel):
    """
    Input model for analyzing a fridge/pantry photo.

    image_base64 may be plain base64 or a full data URL; the prefix is stripped
    and, when present, its MIME type is used if mime_type is left empty.
    """
    image_base64: str = Field(..., min_length=1, description="Base64 image payload or data URL")
    mime_type: str = Field("", description="Declared image MIME type (e.g. image/jpeg)")
    filters: List[DietaryFilter] = Field(default_factory=list, description="Active dietary filters in selection order")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "image_base64": "/9j/4AAQSkZJRgABAQ...",
                "mime_type": "image/jpeg",
                "filters": ["Vegan", "Gluten-Free"],
            }
        }
    )

    @field_validator("filters")
    @classmethod
    def _dedupe_filters(cls, value: List[DietaryFilter]) -> List[DietaryFilter]:
        seen = []
        for f in value:
            if f not in seen:
                seen.append(f)
        return seen

    def to_encoded_image(self) -> EncodedImage:
        payload, url_mime = strip_data_url(self.image_base64)
        return EncodedImage(data=payload, mime_type=self.mime_type or url_mime or DEFAULT_MIME_TYPE)


class AnalyzeResponse(BaseModel):
    """Response model for a successful analysis."""
    recipes: List[Recipe] = Field(..., description="Generated recipes, in model order")


class GenerationErrorDetail(BaseModel):
    """Error detail returned when generation fails."""
    reason: str = Field(..., description="image_read, not_configured, request_failed or invalid_response")
    message: str = Field(..., description="Generic user-facing message")


class FiltersResponse(BaseModel):
    filters: List[DietaryFilter]


class HealthResponse(BaseModel):
    """Health check payload."""
    status: str = Field("ok")
    name: str
    version: str
    model: str = Field(..., description="Gemini model used for generation")
    api_key_configured: bool
    uptime_seconds: int = Field(..., description="Whole seconds since the API started")
