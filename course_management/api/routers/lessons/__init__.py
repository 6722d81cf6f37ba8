"""
Lessons router package.

Exports the router for lesson listing and management endpoints.
"""

from .lessons_router import router

__all__ = ["router"]
