from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Request, Response

from users_api.services.user_service import UserNotFoundError, UserService

router = APIRouter(tags=["users"])


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _not_found() -> HTTPException:
    return HTTPException(404, "User not found")


@router.get("/")
def list_users(request: Request):
    return _get_user_service(request).list_users()


@router.post("/")
def create_user(request: Request, payload: Optional[dict] = Body(None)):
    _get_user_service(request).create_user(payload)
    return Response(status_code=200)


@router.get("/{user_id}")
def get_user(user_id: str, request: Request):
    try:
        return _get_user_service(request).get_user(user_id)
    except UserNotFoundError:
        raise _not_found()


@router.put("/{user_id}")
def update_user(user_id: str, request: Request, payload: Optional[dict] = Body(None)):
    try:
        _get_user_service(request).update_user(user_id, payload)
    except UserNotFoundError:
        raise _not_found()
    return Response(status_code=200)


@router.delete("/{user_id}")
def delete_user(user_id: str, request: Request):
    try:
        _get_user_service(request).delete_user(user_id)
    except UserNotFoundError:
        raise _not_found()
    return Response(status_code=200)
