"""
app/api/routers package marker.
"""

from app.api.routers.snapshot_router import router as snapshot_router

__all__ = [
    "snapshot_router",
]
