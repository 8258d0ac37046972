from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .settings import Settings


# PUBLIC_INTERFACE
def add_cors(application: FastAPI, settings: Settings) -> None:
    """Install CORS middleware for the origins configured in settings."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.allows_any_origin else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
