"""
Roster Service — read-only queries behind both dashboards.

Handles:
    1. Customer roster (customers + profile, newest first)
    2. Delivery history for one customer (latest delivery date first)
    3. Dashboard statistics (four exact counts fetched concurrently)

Every call is a fresh fetch; nothing is cached between requests. The stats
counts are independent reads and may observe different snapshots if the
store changes in between.
"""
import asyncio
import logging

from domain.constants import (
    ACTIVE_DELIVERY_STATUSES,
    CUSTOMER_ROSTER_COLUMNS,
    CUSTOMERS_TABLE,
    DELIVERIES_TABLE,
    DELIVERY_PARTNERS_TABLE,
)
from domain.errors import GatewayError, NotFoundError
from exceptions import GatewayRequestError
from models import (
    AdminDashboardView,
    Customer,
    CustomerDetailView,
    DashboardStats,
    Delivery,
    PartnerDashboardView,
)

logger = logging.getLogger(__name__)


async def fetch_customers(gateway) -> list[Customer]:
    try:
        rows = await gateway.select(
            CUSTOMERS_TABLE,
            columns=CUSTOMER_ROSTER_COLUMNS,
            order_by="created_at",
            descending=True,
        )
    except GatewayRequestError as e:
        logger.error(f"Error fetching customers: {e}")
        raise GatewayError("Failed to fetch customers")
    return [Customer.model_validate(row) for row in rows]


async def fetch_customer(gateway, customer_id: str) -> Customer:
    try:
        rows = await gateway.select(
            CUSTOMERS_TABLE,
            columns=CUSTOMER_ROSTER_COLUMNS,
            eq={"id": customer_id},
        )
    except GatewayRequestError as e:
        logger.error(f"Error fetching customer {customer_id}: {e}")
        raise GatewayError("Failed to fetch customer")
    if not rows:
        raise NotFoundError("Customer", customer_id)
    return Customer.model_validate(rows[0])


async def fetch_customer_deliveries(gateway, customer_id: str) -> list[Delivery]:
    try:
        rows = await gateway.select(
            DELIVERIES_TABLE,
            eq={"customer_id": customer_id},
            order_by="delivery_date",
            descending=True,
        )
    except GatewayRequestError as e:
        logger.error(f"Error fetching deliveries for customer {customer_id}: {e}")
        raise GatewayError("Failed to fetch deliveries")
    return [Delivery.model_validate(row) for row in rows]


async def fetch_delivery(gateway, delivery_id: str) -> Delivery:
    try:
        rows = await gateway.select(DELIVERIES_TABLE, eq={"id": delivery_id})
    except GatewayRequestError as e:
        logger.error(f"Error fetching delivery {delivery_id}: {e}")
        raise GatewayError("Failed to fetch deliveries")
    if not rows:
        raise NotFoundError("Delivery", delivery_id)
    return Delivery.model_validate(rows[0])


async def fetch_stats(gateway) -> DashboardStats:
    """
    Aggregate counts for the admin dashboard.

    Active deliveries are those still pending, assigned or in transit.
    """
    try:
        customers, deliveries, partners, active = await asyncio.gather(
            gateway.count(CUSTOMERS_TABLE),
            gateway.count(DELIVERIES_TABLE),
            gateway.count(DELIVERY_PARTNERS_TABLE),
            gateway.count(
                DELIVERIES_TABLE,
                in_={"delivery_status": ACTIVE_DELIVERY_STATUSES},
            ),
        )
    except GatewayRequestError as e:
        logger.error(f"Error fetching statistics: {e}")
        raise GatewayError("Failed to fetch statistics")

    return DashboardStats(
        total_customers=customers,
        total_deliveries=deliveries,
        total_partners=partners,
        active_deliveries=active,
    )


# ════════════════════════════════════════════════════════════════════
# Dashboard views
# ════════════════════════════════════════════════════════════════════


async def load_admin_dashboard(gateway) -> AdminDashboardView:
    stats, customers = await asyncio.gather(
        fetch_stats(gateway),
        fetch_customers(gateway),
    )
    return AdminDashboardView(stats=stats, customers=tuple(customers))


async def load_partner_dashboard(gateway) -> PartnerDashboardView:
    customers = await fetch_customers(gateway)
    return PartnerDashboardView(customers=tuple(customers))


async def load_customer_detail(gateway, customer_id: str) -> CustomerDetailView:
    customer, deliveries = await asyncio.gather(
        fetch_customer(gateway, customer_id),
        fetch_customer_deliveries(gateway, customer_id),
    )
    return CustomerDetailView(customer=customer, deliveries=tuple(deliveries))
