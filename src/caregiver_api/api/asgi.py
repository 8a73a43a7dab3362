"""ASGI entrypoint for the caregiver API."""

from caregiver_api.api.app import create_app
from caregiver_api.containers import build_container

app = create_app(build_container())
