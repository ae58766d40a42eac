"""ASGI entrypoint for the syrup calculator API."""

from syrup_calculator.api.app import create_app
from syrup_calculator.containers import build_container

app = create_app(build_container())
