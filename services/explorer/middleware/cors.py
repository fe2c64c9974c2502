"""
CORS middleware configuration.
Origins come from settings.cors_origins (defaults to any origin). Read-only API: GET only.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.explorer.config import settings


def setup_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=600,
    )
