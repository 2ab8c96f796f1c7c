"""ASGI entrypoint for the nutrition backend API."""

from nutrition_backend.api.app import create_app
from nutrition_backend.containers import build_container

app = create_app(build_container())
