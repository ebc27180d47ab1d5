"""Entry points for the FastAPI app."""
from users_api.app import app, create_app

__all__ = ["app", "create_app"]
