"""
SurveyWallet API package.

Provides the FastAPI application for the survey and voting service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
