"""ASGI entrypoint for the food quantity API."""

from food_quantity.api.app import create_app
from food_quantity.containers import build_container

app = create_app(build_container())
