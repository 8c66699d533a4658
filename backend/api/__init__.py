"""
Sanctuary portal package.

Provides the FastAPI application that serves the church site's session
endpoints and its public, member and admin pages.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
