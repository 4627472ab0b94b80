"""FastAPI REST API for fence calculation.

Usage:
    uvicorn fences.web:app --reload
"""

from fences.web.app import app, create_app

__all__ = ["app", "create_app"]
