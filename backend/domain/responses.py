"""
Standard API response models and helpers for consistent response formatting.

All endpoints should use these helpers to ensure consistent response envelopes:
- Success: { "success": true, "data": <payload>, "meta": {...} }
- Error: { "success": false, "error": { "code": "...", "message": "...", "details": {...} } }

Mutations put their user-facing notice in meta.notice and the views the
client should refetch in meta.invalidates.
"""
from typing import Any
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standard error detail structure."""
    code: str = Field(..., description="Error code (e.g., 'not_found', 'gateway')")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")


class StandardErrorResponse(BaseModel):
    """Standard error response envelope."""
    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")


def success_response(data: Any, meta: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response payload
        meta: Optional metadata (notice, invalidation keys, counts)

    Returns:
        dict: { "success": true, "data": <data>, "meta": <meta> }
    """
    response = {"success": True, "data": data}
    if meta:
        response["meta"] = meta
    return response


def command_response(result) -> dict[str, Any]:
    """Wrap a CommandResult from services.commands in the success envelope."""
    return success_response(
        data=result.data,
        meta={
            "notice": result.notice,
            "invalidates": list(result.invalidates),
        },
    )


def error_responses(*status_codes: int) -> dict[int, dict[str, Any]]:
    """OpenAPI `responses=` entries documenting the error envelope for a router."""
    return {code: {"model": StandardErrorResponse} for code in status_codes}
