"""API v1 Route modules."""

from backend.routers.v1 import bench, calculations, payments

__all__ = ["bench", "calculations", "payments"]
