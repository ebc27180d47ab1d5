import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from users_api.core.config import Settings, get_settings
from users_api.core.logging_config import setup_logging
from users_api.repositories.json_storage import JsonUserRepository, StorageError
from users_api.routers import users as users_router
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse({"detail": "Storage unavailable"}, status_code=500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around the data file named in settings."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Users API")
    app.state.settings = settings
    app.state.user_service = UserService(JsonUserRepository(settings.data_file))
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.include_router(users_router.router)
    return app


app = create_app()
