"""ASGI entrypoint for the media relay API."""

from media_relay.api.app import create_app
from media_relay.containers import build_container

app = create_app(build_container())
