"""
Admin dashboard endpoints — stats, customer roster, provisioning and
subscription management.
"""

import logging
from fastapi import APIRouter, Depends

from deps import get_gateway, require_admin
from domain.responses import command_response, error_responses, success_response
from models import CreateCustomerRequest, SubscriptionUpdateRequest
from services import commands, roster_service
from utils.validators import validated_customer_id

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
    responses=error_responses(400, 401, 403, 404, 422, 502),
)


@router.get("/dashboard")
async def get_dashboard(gateway=Depends(get_gateway)):
    """Stats and roster in one view."""
    view = await roster_service.load_admin_dashboard(gateway)
    return success_response(data=view.model_dump())


@router.get("/stats")
async def get_stats(gateway=Depends(get_gateway)):
    stats = await roster_service.fetch_stats(gateway)
    return success_response(data=stats.model_dump())


@router.get("/customers")
async def list_customers(gateway=Depends(get_gateway)):
    customers = await roster_service.fetch_customers(gateway)
    return success_response(
        data=[c.model_dump() for c in customers],
        meta={"total": len(customers)},
    )


@router.post("/customers", status_code=201)
async def create_customer(
    request: CreateCustomerRequest,
    gateway=Depends(get_gateway),
):
    """Create a customer account (auth user + profile + customer row)."""
    result = await commands.dispatch(commands.CreateCustomer(request=request), gateway)
    return command_response(result)


@router.get("/customers/{customer_id}")
async def get_customer_detail(
    customer_id: str = Depends(validated_customer_id),
    gateway=Depends(get_gateway),
):
    """Customer details with delivery history."""
    view = await roster_service.load_customer_detail(gateway, customer_id)
    return success_response(data=view.model_dump())


@router.patch("/customers/{customer_id}/subscription")
async def update_subscription(
    request: SubscriptionUpdateRequest,
    customer_id: str = Depends(validated_customer_id),
    gateway=Depends(get_gateway),
):
    result = await commands.dispatch(
        commands.SetSubscriptionStatus(
            customer_id=customer_id,
            status=request.subscription_status,
        ),
        gateway,
    )
    return command_response(result)


@router.post("/customers/{customer_id}/subscription/toggle")
async def toggle_subscription(
    customer_id: str = Depends(validated_customer_id),
    gateway=Depends(get_gateway),
):
    """Activate an inactive customer or deactivate an active one."""
    result = await commands.dispatch(
        commands.ToggleSubscription(customer_id=customer_id), gateway
    )
    return command_response(result)
