"""
Exception types for FridgeChef.

The taxonomy is intentionally flat: reading the uploaded image can fail, and
generating recipes can fail. Shopping list and filter operations are total and
define no errors.
"""


class FridgeChefError(Exception):
    """Base class for all FridgeChef errors."""


class ImageReadError(FridgeChefError):
    """Raised when an uploaded image cannot be read or decoded."""


class RecipeParseError(FridgeChefError):
    """Raised when the model response is not a valid recipe batch."""


class GenerationConfigError(FridgeChefError):
    """Raised when the generative model is not configured (e.g. missing API key)."""
