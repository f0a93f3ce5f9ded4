"""ASGI entrypoint for the food suitability API."""

from food_suitability.api.app import create_app
from food_suitability.containers import build_container

app = create_app(build_container())
