"""
Pydantic models for request/response validation.

Row models mirror the remote tables. Status and plan fields on rows are kept
as plain strings so a value added on the backend does not break reads.
The create-customer form is also left loose: the provisioning service checks
it so every rejection carries the same 400 message.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from domain.enums import SubscriptionStatus


class FruitBase(BaseModel):
    """Shared base — allows construction by Python name or alias."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class RowModel(FruitBase):
    """Row as confirmed by the remote store; read-only once parsed."""
    model_config = ConfigDict(frozen=True)


class ViewModel(BaseModel):
    """Immutable view model handed to a dashboard."""
    model_config = ConfigDict(frozen=True)


# ── Rows ────────────────────────────────────────────────────────────

class Profile(RowModel):
    full_name: str
    phone: Optional[str] = None


class Customer(RowModel):
    id: str
    user_id: str
    subscription_plan: str
    subscription_status: str
    next_payment_date: Optional[str] = None
    created_at: Optional[str] = None
    profiles: Optional[Profile] = None


class Delivery(RowModel):
    id: str
    customer_id: str
    delivery_date: str
    delivery_status: str
    items: Optional[str] = None
    delivery_address: Optional[str] = None
    delivered_at: Optional[str] = None


# ── Views ───────────────────────────────────────────────────────────

class DashboardStats(ViewModel):
    total_customers: int = 0
    total_deliveries: int = 0
    total_partners: int = 0
    active_deliveries: int = 0


class AdminDashboardView(ViewModel):
    stats: DashboardStats
    customers: tuple[Customer, ...] = ()


class PartnerDashboardView(ViewModel):
    customers: tuple[Customer, ...] = ()


class CustomerDetailView(ViewModel):
    customer: Customer
    deliveries: tuple[Delivery, ...] = ()


# ── Requests ────────────────────────────────────────────────────────

class CreateCustomerRequest(FruitBase):
    """
    Admin form for a new customer account.

    Required fields are checked by the provisioning service so that an empty
    form is rejected with one message and never reaches the backend.
    """
    username: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    subscription_plan: Optional[str] = None


class SubscriptionUpdateRequest(FruitBase):
    subscription_status: SubscriptionStatus = Field(..., alias="status")


class SignInRequest(FruitBase):
    username: str = Field(..., min_length=1, description="Username or full login email")
    password: str = Field(..., min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v


class SessionInfo(FruitBase):
    id: str
    email: Optional[str] = None
    roles: list[str] = Field(default_factory=list)
    dashboard: str
