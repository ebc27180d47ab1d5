"""
FastAPI routers. Each module exposes an APIRouter included by ``users_api.app``.
"""
