"""ASGI entrypoint for the nutrify API."""

from nutrify.api.app import create_app
from nutrify.containers import build_container

app = create_app(build_container())
