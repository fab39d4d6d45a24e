"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from src.config import Settings

__all__ = ["get_settings"]


def get_settings(request: Request) -> Settings:
    """Return the immutable ``Settings`` the application was built with.

    ``create_app`` stores the instance on ``app.state.settings`` once at
    startup, so handlers never read the process environment themselves.
    """
    return request.app.state.settings
