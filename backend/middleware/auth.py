"""
Access token helpers.

Supabase issues the access tokens (HS256 JWTs signed with the project's JWT
secret). This service only verifies them:
  - Authorization: Bearer <jwt> is required on dashboard endpoints
  - sub is the auth user id, email the login address
  - the raw token is kept so gateway calls run under the caller's identity
"""
import logging
from dataclasses import dataclass
from fastapi import HTTPException, Header
from typing import Optional

import jwt

from config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: Optional[str]
    access_token: str


def parse_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def decode_access_token(token: str) -> dict:
    if not settings.supabase_jwt_secret:
        raise HTTPException(
            status_code=500,
            detail="Server auth misconfigured (JWT secret missing).",
        )
    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            audience=settings.supabase_jwt_audience,
            options={"require": ["exp", "sub"]},
        )
        return payload
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Access token expired.")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid access token.")


async def require_authenticated_user(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> CurrentUser:
    token = parse_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Provide Authorization: Bearer <token>.",
        )
    payload = decode_access_token(token)
    return CurrentUser(id=payload["sub"], email=payload.get("email"), access_token=token)
