"""ASGI entrypoint for the memory generator API."""

from memory_generator.api.app import create_app
from memory_generator.containers import build_container

app = create_app(build_container())
