"""ASGI entrypoint for the smart nutrition API."""

from smart_nutrition.api.app import create_app
from smart_nutrition.containers import build_container

app = create_app(build_container())
