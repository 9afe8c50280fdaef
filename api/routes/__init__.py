"""
API Routes Module

This module contains all API endpoint implementations organized by function:
- query.py: Asset snapshot, history and alert endpoints
- profiles.py: Channel profile endpoints
- stream.py: WebSocket live updates

All routers are combined in main.py to create the complete API.
"""

from .query import router as query_router
from .profiles import router as profiles_router
from .stream import router as stream_router

__all__ = [
    "query_router",
    "profiles_router",
    "stream_router",
]
