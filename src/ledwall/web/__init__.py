"""FastAPI REST API for LED wall calculations.

Usage:
    uvicorn ledwall.web:app --reload
"""

from ledwall.web.app import app, create_app

__all__ = ["app", "create_app"]
