"""
Shared FastAPI dependencies.

Routers import from here: the caller-bound gateway session and the role
guards for the two dashboards.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header

from domain.enums import UserRole
from domain.errors import PermissionDeniedError
from gateway_client import GatewaySession, supabase_gateway
from middleware.auth import CurrentUser, parse_bearer_token, require_authenticated_user
from services import auth_service


def get_gateway(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> GatewaySession:
    """Gateway session running under the caller's token (anon key when absent)."""
    return supabase_gateway.session(parse_bearer_token(authorization))


async def _require_role(user: CurrentUser, gateway, allowed: set[str], label: str) -> CurrentUser:
    roles = await auth_service.fetch_roles(gateway, user.id)
    if not allowed.intersection(roles):
        raise PermissionDeniedError(f"{label} role required for this endpoint.")
    return user


async def require_admin(
    user: CurrentUser = Depends(require_authenticated_user),
    gateway=Depends(get_gateway),
) -> CurrentUser:
    """Require that the authenticated user holds the admin role."""
    return await _require_role(user, gateway, {UserRole.ADMIN.value}, "Admin")


async def require_delivery_partner(
    user: CurrentUser = Depends(require_authenticated_user),
    gateway=Depends(get_gateway),
) -> CurrentUser:
    """
    Require a delivery partner.

    Admins may also use the partner endpoints.
    """
    return await _require_role(
        user,
        gateway,
        {UserRole.DELIVERY_PARTNER.value, UserRole.ADMIN.value},
        "Delivery partner",
    )
