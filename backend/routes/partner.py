"""
Delivery partner dashboard endpoints — roster, per-customer deliveries and
the delivered/pending toggle.
"""

import logging
from fastapi import APIRouter, Depends

from deps import get_gateway, require_delivery_partner
from domain.responses import command_response, error_responses, success_response
from services import commands, roster_service
from utils.validators import validated_customer_id, validated_delivery_id

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/partner",
    tags=["partner"],
    dependencies=[Depends(require_delivery_partner)],
    responses=error_responses(400, 401, 403, 404, 422, 502),
)


@router.get("/customers")
async def list_customers(gateway=Depends(get_gateway)):
    view = await roster_service.load_partner_dashboard(gateway)
    return success_response(
        data=view.model_dump(),
        meta={"total": len(view.customers)},
    )


@router.get("/customers/{customer_id}/deliveries")
async def list_customer_deliveries(
    customer_id: str = Depends(validated_customer_id),
    gateway=Depends(get_gateway),
):
    view = await roster_service.load_customer_detail(gateway, customer_id)
    return success_response(data=view.model_dump())


@router.post("/deliveries/{delivery_id}/delivered")
async def mark_delivered(
    delivery_id: str = Depends(validated_delivery_id),
    gateway=Depends(get_gateway),
):
    result = await commands.dispatch(commands.MarkDelivered(delivery_id=delivery_id), gateway)
    return command_response(result)


@router.post("/deliveries/{delivery_id}/pending")
async def mark_not_delivered(
    delivery_id: str = Depends(validated_delivery_id),
    gateway=Depends(get_gateway),
):
    result = await commands.dispatch(commands.MarkNotDelivered(delivery_id=delivery_id), gateway)
    return command_response(result)


@router.post("/deliveries/{delivery_id}/toggle")
async def toggle_delivery(
    delivery_id: str = Depends(validated_delivery_id),
    gateway=Depends(get_gateway),
):
    result = await commands.dispatch(commands.ToggleDelivery(delivery_id=delivery_id), gateway)
    return command_response(result)
