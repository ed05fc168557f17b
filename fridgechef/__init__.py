"""
FridgeChef core package.

Turns a photo of a fridge or pantry into a batch of recipe suggestions and
holds the UI state that drives the recipe grid, the shopping list and cooking
mode. This package has no Streamlit or FastAPI dependencies so both the
backend (api/) and the frontend (streamlit_app/) can import it.
"""

__version__ = "1.0.0"
