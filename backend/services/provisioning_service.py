"""
Provisioning Service — creates customer accounts.

A single remote procedure (create_customer_account) creates the auth user,
the profile row and the customer row in one transaction on the backend.
The customer starts out active; the next payment date is computed there.

The procedure is not known to be idempotent, so nothing here retries it.
"""
import logging
from typing import Optional

from config import settings
from domain.constants import CREATE_CUSTOMER_RPC
from domain.enums import SubscriptionPlan
from domain.errors import GatewayError, ValidationError
from exceptions import GatewayRequestError
from models import CreateCustomerRequest

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"
REQUIRED_FIELDS = ("username", "password", "full_name")


def login_address(username: str) -> str:
    """Customers sign in with <username>@<login domain>."""
    return f"{username.strip()}@{settings.login_email_domain}"


def resolve_plan(request: CreateCustomerRequest) -> Optional[SubscriptionPlan]:
    """Blank plan means the form default (basic); an unknown plan gives None."""
    value = (request.subscription_plan or "").strip()
    if not value:
        return SubscriptionPlan.BASIC
    try:
        return SubscriptionPlan(value)
    except ValueError:
        return None


def validate_new_customer(request: CreateCustomerRequest) -> SubscriptionPlan:
    """
    Reject the form before any remote call.

    Null and whitespace-only values count as missing. Returns the plan to
    provision.
    """
    missing = [
        name
        for name in REQUIRED_FIELDS
        if not (getattr(request, name) or "").strip()
    ]
    plan = resolve_plan(request)
    if missing or plan is None:
        details = {"missing": missing}
        if plan is None:
            details["invalid"] = ["subscription_plan"]
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, details=details)
    return plan


def _rpc_params(request: CreateCustomerRequest, plan: SubscriptionPlan) -> dict:
    phone: Optional[str] = (request.phone or "").strip() or None
    return {
        "p_username": request.username.strip(),
        "p_password": request.password,
        "p_full_name": request.full_name.strip(),
        "p_phone": phone,
        "p_subscription_plan": plan.value,
    }


async def create_customer_account(gateway, request: CreateCustomerRequest) -> dict:
    """
    Validate the form and invoke the provisioning procedure.

    Returns:
        dict: {login, username, subscription_plan, result}
    """
    plan = validate_new_customer(request)

    login = login_address(request.username)
    try:
        result = await gateway.rpc(CREATE_CUSTOMER_RPC, _rpc_params(request, plan))
    except GatewayRequestError as e:
        logger.error(f"Error creating customer {login}: {e}")
        raise GatewayError("Failed to create customer account")

    logger.info(f"Customer account created: {login} ({plan.value})")
    return {
        "login": login,
        "username": request.username.strip(),
        "subscription_plan": plan.value,
        "result": result,
    }
