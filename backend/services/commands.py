"""
Dashboard commands.

Every mutating dashboard action is a frozen command object. dispatch() looks
up the registered handler, runs it against the caller's gateway session and
returns a CommandResult carrying:
    - data:        the row (or payload) confirmed by the backend
    - notice:      the short message shown to the operator
    - invalidates: the view keys the client must refetch, keyed by entity

Failures are not caught here: handlers raise DomainError subclasses that the
app-level exception handler turns into the error envelope.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

from domain.constants import (
    VIEW_CUSTOMERS,
    VIEW_STATS,
    customer_view_key,
    deliveries_view_key,
)
from domain.enums import DeliveryStatus, SubscriptionStatus
from models import CreateCustomerRequest
from services import delivery_service, provisioning_service, subscription_service

logger = logging.getLogger(__name__)


# ── Commands ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateCustomer:
    request: CreateCustomerRequest


@dataclass(frozen=True)
class SetSubscriptionStatus:
    customer_id: str
    status: SubscriptionStatus


@dataclass(frozen=True)
class ToggleSubscription:
    customer_id: str


@dataclass(frozen=True)
class MarkDelivered:
    delivery_id: str


@dataclass(frozen=True)
class MarkNotDelivered:
    delivery_id: str


@dataclass(frozen=True)
class ToggleDelivery:
    delivery_id: str


@dataclass(frozen=True)
class CommandResult:
    data: Any
    notice: str
    invalidates: tuple[str, ...] = field(default_factory=tuple)


# ── Handlers ────────────────────────────────────────────────────────

# Handler registry: command type → handler coroutine
_handlers: Dict[type, Callable[[Any, Any], Awaitable[CommandResult]]] = {}


def register_handler(command_type: type):
    def decorator(func):
        _handlers[command_type] = func
        return func
    return decorator


def get_handler(command_type: type) -> Optional[Callable]:
    return _handlers.get(command_type)


def _subscription_result(customer) -> CommandResult:
    return CommandResult(
        data=customer.model_dump(),
        notice="Subscription updated successfully",
        invalidates=(VIEW_CUSTOMERS, customer_view_key(customer.id)),
    )


def _delivery_result(delivery) -> CommandResult:
    if delivery.delivery_status == DeliveryStatus.DELIVERED.value:
        notice = "Delivery marked as delivered!"
    else:
        notice = "Delivery marked as not delivered"
    return CommandResult(
        data=delivery.model_dump(),
        notice=notice,
        invalidates=(deliveries_view_key(delivery.customer_id), VIEW_STATS),
    )


@register_handler(CreateCustomer)
async def _create_customer(command: CreateCustomer, gateway) -> CommandResult:
    created = await provisioning_service.create_customer_account(gateway, command.request)
    return CommandResult(
        data=created,
        notice=f"Customer created! Login: {created['login']}",
        invalidates=(VIEW_CUSTOMERS, VIEW_STATS),
    )


@register_handler(SetSubscriptionStatus)
async def _set_subscription(command: SetSubscriptionStatus, gateway) -> CommandResult:
    customer = await subscription_service.set_subscription_status(
        gateway, command.customer_id, command.status
    )
    return _subscription_result(customer)


@register_handler(ToggleSubscription)
async def _toggle_subscription(command: ToggleSubscription, gateway) -> CommandResult:
    customer = await subscription_service.toggle_subscription(gateway, command.customer_id)
    return _subscription_result(customer)


@register_handler(MarkDelivered)
async def _mark_delivered(command: MarkDelivered, gateway) -> CommandResult:
    return _delivery_result(await delivery_service.mark_delivered(gateway, command.delivery_id))


@register_handler(MarkNotDelivered)
async def _mark_not_delivered(command: MarkNotDelivered, gateway) -> CommandResult:
    return _delivery_result(
        await delivery_service.mark_not_delivered(gateway, command.delivery_id)
    )


@register_handler(ToggleDelivery)
async def _toggle_delivery(command: ToggleDelivery, gateway) -> CommandResult:
    return _delivery_result(await delivery_service.toggle_delivery(gateway, command.delivery_id))


# ── Dispatch ────────────────────────────────────────────────────────

async def dispatch(command, gateway) -> CommandResult:
    handler = get_handler(type(command))
    if handler is None:
        raise LookupError(f"No handler registered for {type(command).__name__}")
    logger.debug(f"Dispatching {type(command).__name__}")
    return await handler(command, gateway)
