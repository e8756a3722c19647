"""
Supabase gateway client (PostgREST tables + RPC, GoTrue auth).

One httpx.AsyncClient is shared by the whole process. Each request gets a
GatewaySession bound to the caller's access token so that row-level
security on the remote store applies to every query.
"""
import logging
from typing import Any, Iterable, Optional

import httpx

from config import settings
from exceptions import GatewayAuthError, GatewayRequestError

logger = logging.getLogger(__name__)


def build_filters(
    eq: Optional[dict[str, Any]] = None,
    in_: Optional[dict[str, Iterable[str]]] = None,
) -> list[tuple[str, str]]:
    """Translate equality/inclusion filters into PostgREST query params."""
    params = []
    for column, value in (eq or {}).items():
        params.append((column, f"eq.{value}"))
    for column, values in (in_ or {}).items():
        params.append((column, f"in.({','.join(values)})"))
    return params


def parse_content_range(header: Optional[str]) -> int:
    """
    Extract the exact row count from a PostgREST Content-Range header.

    "0-24/318" -> 318, "*/0" -> 0
    """
    if not header or "/" not in header:
        raise GatewayRequestError(f"Missing row count in Content-Range: {header!r}")
    total = header.rsplit("/", 1)[1]
    if not total.isdigit():
        raise GatewayRequestError(f"Row count not available in Content-Range: {header!r}")
    return int(total)


class SupabaseGateway:
    """Singleton holder of the shared HTTP client."""

    _instance = None
    _client: Optional[httpx.AsyncClient] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SupabaseGateway, cls).__new__(cls)
        return cls._instance

    @property
    def client(self) -> httpx.AsyncClient:
        """Get (and lazily open) the shared httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=settings.gateway_timeout_seconds)
            logger.info(f"Supabase gateway client opened ({settings.supabase_url or 'no URL configured'})")
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.info("Supabase gateway client closed")
        self._client = None

    def session(self, access_token: Optional[str] = None) -> "GatewaySession":
        return GatewaySession(self, access_token)

    async def request(
        self,
        method: str,
        url: str,
        *,
        access_token: Optional[str] = None,
        params: Any = None,
        json: Any = None,
        headers: Optional[dict] = None,
    ) -> httpx.Response:
        """
        Send one request to Supabase.

        Raises GatewayRequestError on transport failures and non-2xx answers.
        """
        if not settings.supabase_url:
            raise GatewayRequestError("SUPABASE_URL is not configured")

        request_headers = {
            "apikey": settings.supabase_anon_key,
            "Authorization": f"Bearer {access_token or settings.supabase_anon_key}",
        }
        if headers:
            request_headers.update(headers)

        try:
            response = await self.client.request(
                method, url, params=params, json=json, headers=request_headers
            )
        except httpx.HTTPError as e:
            raise GatewayRequestError(f"{method} {url} failed: {e}") from e

        if response.status_code >= 400:
            raise GatewayRequestError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response


class GatewaySession:
    """Table, RPC and auth operations on behalf of one caller."""

    def __init__(self, gateway: SupabaseGateway, access_token: Optional[str] = None):
        self.gateway = gateway
        self.access_token = access_token

    async def _rest(self, method: str, path: str, **kwargs) -> httpx.Response:
        return await self.gateway.request(
            method, f"{settings.rest_url}/{path}", access_token=self.access_token, **kwargs
        )

    # ── Rows ────────────────────────────────────────────────────────

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        eq: Optional[dict[str, Any]] = None,
        in_: Optional[dict[str, Iterable[str]]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        params = [("select", columns.replace(" ", ""))]
        params.extend(build_filters(eq, in_))
        if order_by:
            params.append(("order", f"{order_by}.{'desc' if descending else 'asc'}"))
        response = await self._rest("GET", table, params=params)
        return response.json()

    async def count(
        self,
        table: str,
        *,
        eq: Optional[dict[str, Any]] = None,
        in_: Optional[dict[str, Iterable[str]]] = None,
    ) -> int:
        params = [("select", "*")]
        params.extend(build_filters(eq, in_))
        response = await self._rest(
            "HEAD", table, params=params, headers={"Prefer": "count=exact"}
        )
        return parse_content_range(response.headers.get("content-range"))

    async def update(
        self,
        table: str,
        values: dict,
        *,
        match: dict[str, Any],
        columns: Optional[str] = None,
    ) -> list[dict]:
        """
        Partial update of the rows matching `match`; returns the updated rows.

        `columns` shapes the returned rows the same way as select (embeds included).
        """
        params = build_filters(eq=match)
        if columns:
            params.append(("select", columns.replace(" ", "")))
        response = await self._rest(
            "PATCH",
            table,
            params=params,
            json=values,
            headers={"Prefer": "return=representation"},
        )
        return response.json()

    async def rpc(self, function: str, params: dict) -> Any:
        response = await self._rest("POST", f"rpc/{function}", json=params)
        if not response.content:
            return None
        return response.json()

    # ── Auth ────────────────────────────────────────────────────────

    async def sign_in_with_password(self, email: str, password: str) -> dict:
        try:
            response = await self.gateway.request(
                "POST",
                f"{settings.auth_url}/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
            )
        except GatewayRequestError as e:
            if e.status_code in (400, 401):
                raise GatewayAuthError(str(e), status_code=e.status_code, body=e.body) from e
            raise
        return response.json()

    async def sign_out(self) -> None:
        await self.gateway.request(
            "POST", f"{settings.auth_url}/logout", access_token=self.access_token
        )

    async def get_user(self) -> dict:
        response = await self.gateway.request(
            "GET", f"{settings.auth_url}/user", access_token=self.access_token
        )
        return response.json()


# Global gateway instance
supabase_gateway = SupabaseGateway()
