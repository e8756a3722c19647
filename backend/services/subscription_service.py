"""
Subscription Service — flips a customer between active and inactive.

Only the two states are modeled. The update touches the status field alone
and performs no transition check; the remote store decides what is allowed.
"""
import logging

from domain.constants import CUSTOMER_ROSTER_COLUMNS, CUSTOMERS_TABLE
from domain.enums import SubscriptionStatus
from domain.errors import GatewayError, NotFoundError
from exceptions import GatewayRequestError
from models import Customer
from services import roster_service

logger = logging.getLogger(__name__)


def next_status(current: str) -> SubscriptionStatus:
    """Activate/Deactivate button: active -> inactive, anything else -> active."""
    if current == SubscriptionStatus.ACTIVE.value:
        return SubscriptionStatus.INACTIVE
    return SubscriptionStatus.ACTIVE


async def set_subscription_status(
    gateway,
    customer_id: str,
    status: SubscriptionStatus,
) -> Customer:
    try:
        rows = await gateway.update(
            CUSTOMERS_TABLE,
            {"subscription_status": status.value},
            match={"id": customer_id},
            columns=CUSTOMER_ROSTER_COLUMNS,
        )
    except GatewayRequestError as e:
        logger.error(f"Error updating subscription for {customer_id}: {e}")
        raise GatewayError("Failed to update subscription")

    if not rows:
        raise NotFoundError("Customer", customer_id)

    logger.info(f"Subscription for customer {customer_id} set to {status.value}")
    return Customer.model_validate(rows[0])


async def toggle_subscription(gateway, customer_id: str) -> Customer:
    customer = await roster_service.fetch_customer(gateway, customer_id)
    return await set_subscription_status(
        gateway, customer_id, next_status(customer.subscription_status)
    )
