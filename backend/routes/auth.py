"""
Auth endpoints — password sign-in, sign-out and session introspection.

Flow:
  1) POST /auth/sign-in   -> Supabase session (access_token, refresh_token)
  2) GET  /auth/session   -> user id, email, roles and the dashboard to open
  3) POST /auth/sign-out  -> revokes the session on the backend
"""

import logging

from fastapi import APIRouter, Depends

from config import settings
from deps import get_gateway
from domain.responses import error_responses, success_response
from middleware.auth import CurrentUser, require_authenticated_user
from middleware.rate_limit import rate_limit
from models import SessionInfo, SignInRequest
from services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses=error_responses(401, 422, 429, 502),
)


@router.post("/sign-in")
async def sign_in(
    request: SignInRequest,
    gateway=Depends(get_gateway),
    _rate=Depends(
        rate_limit(
            max_requests=settings.sign_in_rate_limit,
            window_seconds=settings.sign_in_rate_window_seconds,
        )
    ),
):
    session = await auth_service.sign_in(gateway, request.username, request.password)
    return success_response(data=session)


@router.get("/session")
async def get_session(
    user: CurrentUser = Depends(require_authenticated_user),
    gateway=Depends(get_gateway),
):
    roles = await auth_service.fetch_roles(gateway, user.id)
    info = SessionInfo(
        id=user.id,
        email=user.email,
        roles=roles,
        dashboard=auth_service.dashboard_for(roles),
    )
    return success_response(data=info.model_dump())


@router.post("/sign-out")
async def sign_out(
    user: CurrentUser = Depends(require_authenticated_user),
    gateway=Depends(get_gateway),
):
    revoked = await auth_service.sign_out(gateway)
    return success_response(data={"signed_out": True, "revoked": revoked})
