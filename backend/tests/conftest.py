"""
Pytest configuration and shared fixtures for The Fruit Union tests.

Provides an in-memory stand-in for the Supabase gateway session, an HTTP
client wired to it through FastAPI dependency overrides, and helpers to
mint Supabase-style access tokens.
"""
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import AsyncGenerator, Optional

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import settings
from deps import get_gateway
from domain.enums import UserRole
from exceptions import GatewayAuthError, GatewayRequestError
from main import app
from middleware.rate_limit import limiter

# ── Test Configuration ───────────────────────────────────────────────
# Set test-only values for settings that would normally come from .env
TEST_JWT_SECRET = "test-jwt-secret-for-pytest-only-0123456789abcdef"
settings.supabase_jwt_secret = TEST_JWT_SECRET
settings.supabase_jwt_audience = "authenticated"
settings.login_email_domain = "internal.local"


# ── In-memory gateway ────────────────────────────────────────────────


def _now_iso(offset_seconds: int = 0) -> str:
    return (datetime.now(timezone.utc) + timedelta(seconds=offset_seconds)).isoformat()


class InMemoryGateway:
    """
    Same surface as gateway_client.GatewaySession, backed by dicts.

    Put an operation name ("select", "count", "update", "rpc", "sign_in",
    "sign_out") in fail_on to make it raise GatewayRequestError.
    """

    def __init__(self):
        self.tables: dict[str, list[dict]] = {
            "customers": [],
            "profiles": [],
            "deliveries": [],
            "delivery_partners": [],
            "user_roles": [],
        }
        self.passwords: dict[str, str] = {}
        self.fail_on: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.rpc_calls: list[tuple[str, dict]] = []
        self.signed_out = False
        self._clock = 0

    # ── seeding ──────────────────────────────────────────────────────

    def _tick(self) -> str:
        self._clock += 1
        return _now_iso(self._clock)

    def add_customer(
        self,
        full_name: str,
        phone: Optional[str] = None,
        plan: str = "basic",
        status: str = "active",
    ) -> str:
        user_id = str(uuid.uuid4())
        customer_id = str(uuid.uuid4())
        self.tables["profiles"].append({"id": user_id, "full_name": full_name, "phone": phone})
        self.tables["customers"].append({
            "id": customer_id,
            "user_id": user_id,
            "subscription_plan": plan,
            "subscription_status": status,
            "next_payment_date": (date.today() + timedelta(days=30)).isoformat(),
            "created_at": self._tick(),
        })
        return customer_id

    def add_delivery(
        self,
        customer_id: str,
        status: str = "pending",
        delivery_date: Optional[str] = None,
        items: str = "Seasonal fruit box",
        address: str = "12 Orchard Lane",
    ) -> str:
        delivery_id = str(uuid.uuid4())
        self.tables["deliveries"].append({
            "id": delivery_id,
            "customer_id": customer_id,
            "delivery_date": delivery_date or date.today().isoformat(),
            "delivery_status": status,
            "items": items,
            "delivery_address": address,
            "delivered_at": _now_iso() if status == "delivered" else None,
        })
        return delivery_id

    def add_partner(self, name: str = "Partner") -> str:
        partner_id = str(uuid.uuid4())
        self.tables["delivery_partners"].append({"id": partner_id, "name": name})
        return partner_id

    def grant_role(self, user_id: str, role: str) -> None:
        self.tables["user_roles"].append({"user_id": user_id, "role": role})

    def row(self, table: str, row_id: str) -> dict:
        return next(r for r in self.tables[table] if r["id"] == row_id)

    # ── gateway surface ──────────────────────────────────────────────

    def _record(self, op: str, target: str) -> None:
        self.calls.append((op, target))
        if op in self.fail_on:
            raise GatewayRequestError(f"simulated {op} failure on {target}", status_code=500)

    @staticmethod
    def _matches(row: dict, eq, in_) -> bool:
        for column, value in (eq or {}).items():
            if str(row.get(column)) != str(value):
                return False
        for column, values in (in_ or {}).items():
            if row.get(column) not in values:
                return False
        return True

    def _shape(self, rows: list[dict], columns: Optional[str]) -> list[dict]:
        if columns and "profiles(" in columns:
            for r in rows:
                profile = next(
                    (p for p in self.tables["profiles"] if p["id"] == r["user_id"]), None
                )
                r["profiles"] = (
                    {"full_name": profile["full_name"], "phone": profile["phone"]}
                    if profile else None
                )
        return rows

    async def select(self, table, *, columns="*", eq=None, in_=None, order_by=None, descending=False):
        self._record("select", table)
        rows = [dict(r) for r in self.tables[table] if self._matches(r, eq, in_)]
        self._shape(rows, columns)
        if order_by:
            rows.sort(key=lambda r: r.get(order_by) or "", reverse=descending)
        return rows

    async def count(self, table, *, eq=None, in_=None):
        self._record("count", table)
        return sum(1 for r in self.tables[table] if self._matches(r, eq, in_))

    async def update(self, table, values, *, match, columns=None):
        self._record("update", table)
        updated = []
        for r in self.tables[table]:
            if self._matches(r, match, None):
                r.update(values)
                updated.append(dict(r))
        return self._shape(updated, columns)

    async def rpc(self, function, params):
        self._record("rpc", function)
        self.rpc_calls.append((function, params))
        assert function == "create_customer_account"
        customer_id = self.add_customer(
            full_name=params["p_full_name"],
            phone=params["p_phone"],
            plan=params["p_subscription_plan"],
        )
        email = f"{params['p_username']}@{settings.login_email_domain}"
        self.passwords[email] = params["p_password"]
        return customer_id

    async def sign_in_with_password(self, email, password):
        self._record("sign_in", email)
        if self.passwords.get(email) != password:
            raise GatewayAuthError("invalid_grant", status_code=400)
        return {
            "access_token": f"token-for-{email}",
            "refresh_token": "refresh",
            "token_type": "bearer",
            "expires_in": 3600,
        }

    async def sign_out(self):
        self._record("sign_out", "session")
        self.signed_out = True


# ── Token helpers ────────────────────────────────────────────────────


def make_token(
    user_id: str,
    email: str = "user@internal.local",
    expires_in: int = 3600,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "aud": audience,
        "role": "authenticated",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=expires_in)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers(user_id: str, email: str = "user@internal.local") -> dict:
    return {"Authorization": f"Bearer {make_token(user_id, email)}"}


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest_asyncio.fixture
async def client(gateway: InMemoryGateway) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app with the in-memory gateway injected."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(gateway: InMemoryGateway) -> dict:
    user_id = str(uuid.uuid4())
    gateway.grant_role(user_id, UserRole.ADMIN.value)
    return auth_headers(user_id, "admin@internal.local")


@pytest.fixture
def partner_headers(gateway: InMemoryGateway) -> dict:
    user_id = str(uuid.uuid4())
    gateway.grant_role(user_id, UserRole.DELIVERY_PARTNER.value)
    return auth_headers(user_id, "rider@internal.local")


@pytest.fixture
def customer_headers(gateway: InMemoryGateway) -> dict:
    user_id = str(uuid.uuid4())
    gateway.grant_role(user_id, UserRole.CUSTOMER.value)
    return auth_headers(user_id, "jane_d@internal.local")


@pytest.fixture
def token_factory():
    """Mint access tokens: token_factory(user_id, expires_in=..., secret=..., audience=...)."""
    return make_token
