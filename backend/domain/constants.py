"""
Domain constants used across services/routers.
"""

from domain.enums import DeliveryStatus

# Remote tables
CUSTOMERS_TABLE = "customers"
DELIVERIES_TABLE = "deliveries"
DELIVERY_PARTNERS_TABLE = "delivery_partners"
USER_ROLES_TABLE = "user_roles"

# Remote procedure that creates auth user + profile + customer in one call
CREATE_CUSTOMER_RPC = "create_customer_account"

# Roster rows embed the owning profile
CUSTOMER_ROSTER_COLUMNS = "*, profiles(full_name, phone)"

# Deliveries that still need work
ACTIVE_DELIVERY_STATUSES = (
    DeliveryStatus.PENDING.value,
    DeliveryStatus.ASSIGNED.value,
    DeliveryStatus.IN_TRANSIT.value,
)

# Invalidation keys returned by mutations
VIEW_CUSTOMERS = "customers"
VIEW_STATS = "stats"


def customer_view_key(customer_id: str) -> str:
    return f"customer:{customer_id}"


def deliveries_view_key(customer_id: str) -> str:
    return f"deliveries:{customer_id}"
