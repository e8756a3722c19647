"""
Domain enums for customers, deliveries and user roles.
"""

from enum import Enum


class SubscriptionPlan(str, Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class DeliveryStatus(str, Enum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"


class UserRole(str, Enum):
    ADMIN = "admin"
    DELIVERY_PARTNER = "delivery_partner"
    CUSTOMER = "customer"
