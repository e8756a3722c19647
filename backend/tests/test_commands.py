"""
Tests for command dispatch — notices and invalidation keys.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from dataclasses import dataclass

import pytest

from domain.enums import SubscriptionStatus
from models import CreateCustomerRequest
from services import commands


class TestDispatch:

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_customer(self, gateway):
        request = CreateCustomerRequest(username="jane_d", password="secret123", full_name="Jane Doe")

        result = await commands.dispatch(commands.CreateCustomer(request=request), gateway)

        assert result.notice == "Customer created! Login: jane_d@internal.local"
        assert result.invalidates == ("customers", "stats")
        assert result.data["login"] == "jane_d@internal.local"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_set_subscription(self, gateway):
        customer_id = gateway.add_customer("Jane")

        result = await commands.dispatch(
            commands.SetSubscriptionStatus(customer_id=customer_id, status=SubscriptionStatus.INACTIVE),
            gateway,
        )

        assert result.notice == "Subscription updated successfully"
        assert result.invalidates == ("customers", f"customer:{customer_id}")
        assert result.data["subscription_status"] == "inactive"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delivery_commands_invalidate_owner_only(self, gateway):
        customer_id = gateway.add_customer("Jane")
        delivery_id = gateway.add_delivery(customer_id)

        delivered = await commands.dispatch(commands.MarkDelivered(delivery_id=delivery_id), gateway)
        pending = await commands.dispatch(commands.MarkNotDelivered(delivery_id=delivery_id), gateway)

        assert delivered.notice == "Delivery marked as delivered!"
        assert pending.notice == "Delivery marked as not delivered"
        assert delivered.invalidates == (f"deliveries:{customer_id}", "stats")
        assert "customers" not in pending.invalidates

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_toggle_delivery(self, gateway):
        delivery_id = gateway.add_delivery(gateway.add_customer("Jane"), status="delivered")
        result = await commands.dispatch(commands.ToggleDelivery(delivery_id=delivery_id), gateway)
        assert result.data["delivery_status"] == "pending"
        assert result.data["delivered_at"] is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unregistered_command(self, gateway):
        @dataclass(frozen=True)
        class Unknown:
            pass

        with pytest.raises(LookupError):
            await commands.dispatch(Unknown(), gateway)

    @pytest.mark.unit
    def test_commands_are_frozen(self):
        command = commands.MarkDelivered(delivery_id="x")
        with pytest.raises(Exception):
            command.delivery_id = "y"
