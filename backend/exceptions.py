"""
Custom exception classes for remote data gateway operations.
"""


class GatewayRequestError(Exception):
    """Raised when a Supabase request fails (network error or non-2xx answer)."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GatewayAuthError(GatewayRequestError):
    """Raised when the auth endpoint rejects the supplied credentials or token."""
    pass
