"""ASGI entrypoint for the FitFuel coach API."""

from fitfuel_coach.api.app import create_app
from fitfuel_coach.containers import build_container

app = create_app(build_container())
