"""ASGI entrypoint, served with `uvicorn diet_planner.api.asgi:app`."""

from diet_planner.api.app import create_app
from diet_planner.config import Settings
from diet_planner.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
