"""HTTP application: route table and app factory."""

from .app import create_app
from .routes import build_router

__all__ = ["build_router", "create_app"]
