"""FastAPI REST API for grid layouts.

This module provides a REST API for computing layouts, validating
configurations, listing sheet presets and exporting to various formats.

Usage:
    uvicorn gridcut.web:app --reload
"""

from gridcut.web.app import app, create_app

__all__ = ["app", "create_app"]
