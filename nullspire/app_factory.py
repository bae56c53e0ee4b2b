"""Entry point for the FastAPI app (uvicorn nullspire.app_factory:create_app --factory)."""
from nullspire.app import create_app

__all__ = ["create_app"]
