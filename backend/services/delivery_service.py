"""
Delivery Service — delivered/pending toggle used by delivery partners.

Rule:
    delivered  -> delivery_status=delivered, delivered_at=<now, UTC>
    pending    -> delivery_status=pending,   delivered_at=null

Both fields travel in one update so delivered_at is set exactly when the
delivery is delivered. assigned and in_transit are set by other processes
and never written here. There is no version check: last write wins.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from domain.constants import DELIVERIES_TABLE
from domain.enums import DeliveryStatus
from domain.errors import GatewayError, NotFoundError
from exceptions import GatewayRequestError
from models import Delivery
from services import roster_service

logger = logging.getLogger(__name__)


def status_update(delivered: bool, now: Optional[datetime] = None) -> dict:
    """Build the combined status/timestamp update for one toggle."""
    if delivered:
        stamp = now or datetime.now(timezone.utc)
        return {
            "delivery_status": DeliveryStatus.DELIVERED.value,
            "delivered_at": stamp.isoformat(),
        }
    return {
        "delivery_status": DeliveryStatus.PENDING.value,
        "delivered_at": None,
    }


async def _apply(gateway, delivery_id: str, values: dict) -> Delivery:
    try:
        rows = await gateway.update(DELIVERIES_TABLE, values, match={"id": delivery_id})
    except GatewayRequestError as e:
        logger.error(f"Error updating delivery {delivery_id}: {e}")
        raise GatewayError("Failed to update delivery status")

    if not rows:
        raise NotFoundError("Delivery", delivery_id)

    logger.info(f"Delivery {delivery_id} marked {values['delivery_status']}")
    return Delivery.model_validate(rows[0])


async def mark_delivered(gateway, delivery_id: str) -> Delivery:
    return await _apply(gateway, delivery_id, status_update(delivered=True))


async def mark_not_delivered(gateway, delivery_id: str) -> Delivery:
    return await _apply(gateway, delivery_id, status_update(delivered=False))


async def toggle_delivery(gateway, delivery_id: str) -> Delivery:
    """Single-button toggle: delivered goes back to pending, anything else is delivered."""
    delivery = await roster_service.fetch_delivery(gateway, delivery_id)
    if delivery.delivery_status == DeliveryStatus.DELIVERED.value:
        return await mark_not_delivered(gateway, delivery_id)
    return await mark_delivered(gateway, delivery_id)
