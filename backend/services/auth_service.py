"""
Auth Service — sign-in, sign-out and role lookup.

Roles live in the user_roles table (one row per user and role). The role
decides which dashboard a session opens:
    admin            -> admin dashboard
    delivery_partner -> delivery partner dashboard
    otherwise        -> customer
"""
import logging

from domain.constants import USER_ROLES_TABLE
from domain.enums import UserRole
from domain.errors import GatewayError, UnauthorizedError
from exceptions import GatewayAuthError, GatewayRequestError
from services.provisioning_service import login_address

logger = logging.getLogger(__name__)


def resolve_login(username_or_email: str) -> str:
    """A bare username is expanded to the internal login address."""
    value = username_or_email.strip()
    if "@" in value:
        return value
    return login_address(value)


def dashboard_for(roles: list[str]) -> str:
    if UserRole.ADMIN.value in roles:
        return UserRole.ADMIN.value
    if UserRole.DELIVERY_PARTNER.value in roles:
        return UserRole.DELIVERY_PARTNER.value
    return UserRole.CUSTOMER.value


async def fetch_roles(gateway, user_id: str) -> list[str]:
    try:
        rows = await gateway.select(USER_ROLES_TABLE, columns="role", eq={"user_id": user_id})
    except GatewayRequestError as e:
        logger.error(f"Error fetching roles for {user_id}: {e}")
        raise GatewayError("Failed to load user role")
    return [row["role"] for row in rows]


async def sign_in(gateway, username_or_email: str, password: str) -> dict:
    email = resolve_login(username_or_email)
    try:
        session = await gateway.sign_in_with_password(email, password)
    except GatewayAuthError as e:
        logger.warning(f"Sign-in rejected for {email}: {e}")
        raise UnauthorizedError("Invalid login credentials")
    except GatewayRequestError as e:
        logger.error(f"Sign-in failed for {email}: {e}")
        raise GatewayError("Failed to sign in")

    logger.info(f"Signed in: {email}")
    return {
        "access_token": session.get("access_token"),
        "refresh_token": session.get("refresh_token"),
        "token_type": session.get("token_type", "bearer"),
        "expires_in": session.get("expires_in"),
        "email": email,
    }


async def sign_out(gateway) -> bool:
    """
    Revoke the session remotely.

    Returns False when the backend call failed; the client discards its
    token either way.
    """
    try:
        await gateway.sign_out()
    except GatewayRequestError as e:
        logger.error(f"Sign-out failed: {e}")
        return False
    return True
