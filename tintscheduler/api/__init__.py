"""
HTTP layer - FastAPI application and routers.
"""

from .main import configure_logging, create_app

__all__ = ["configure_logging", "create_app"]
