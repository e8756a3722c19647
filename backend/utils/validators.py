"""
Input validation utilities.

Row identities on the remote store are UUIDs; reject anything else before
it is interpolated into a PostgREST filter.
"""
import uuid

from fastapi import HTTPException, Path


def validate_identity(value: str, label: str = "id") -> str:
    """
    Validate a row identity.

    Returns:
        The identity in canonical lowercase form

    Raises:
        HTTPException(400) if the value is not a UUID
    """
    if not value:
        raise HTTPException(status_code=400, detail=f"{label} is required")
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {label}: {value[:40]}")


def validated_customer_id(
    customer_id: str = Path(..., description="Customer row id (UUID)"),
) -> str:
    """FastAPI dependency for validating customer id path parameters."""
    return validate_identity(customer_id, "customer id")


def validated_delivery_id(
    delivery_id: str = Path(..., description="Delivery row id (UUID)"),
) -> str:
    """FastAPI dependency for validating delivery id path parameters."""
    return validate_identity(delivery_id, "delivery id")
