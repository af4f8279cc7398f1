"""FastAPI application entry point."""

from ddtrace import patch_all

from app import create_app
from config import load_config

patch_all()

app = create_app(load_config())
