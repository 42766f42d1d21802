"""API routers."""

from api.routers import detection

__all__ = ["detection"]
