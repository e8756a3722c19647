"""
Tests for request and row models.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from pydantic import ValidationError

from domain.enums import SubscriptionStatus
from models import (
    CreateCustomerRequest,
    Customer,
    DashboardStats,
    SignInRequest,
    SubscriptionUpdateRequest,
)


class TestRowModels:

    @pytest.mark.unit
    def test_customer_with_embedded_profile(self):
        customer = Customer.model_validate({
            "id": "c1",
            "user_id": "u1",
            "subscription_plan": "premium",
            "subscription_status": "active",
            "next_payment_date": "2025-05-01",
            "profiles": {"full_name": "Jane Doe", "phone": None},
        })
        assert customer.profiles.full_name == "Jane Doe"

    @pytest.mark.unit
    def test_unknown_status_tolerated_on_rows(self):
        customer = Customer.model_validate({
            "id": "c1",
            "user_id": "u1",
            "subscription_plan": "family",
            "subscription_status": "paused",
        })
        assert customer.subscription_status == "paused"
        assert customer.profiles is None


class TestRequestModels:

    @pytest.mark.unit
    def test_subscription_update_by_alias(self):
        request = SubscriptionUpdateRequest.model_validate({"status": "inactive"})
        assert request.subscription_status is SubscriptionStatus.INACTIVE

    @pytest.mark.unit
    def test_subscription_update_rejects_unknown(self):
        with pytest.raises(ValidationError):
            SubscriptionUpdateRequest.model_validate({"status": "paused"})

    @pytest.mark.unit
    def test_create_customer_accepts_nulls_for_service_check(self):
        request = CreateCustomerRequest.model_validate(
            {"username": None, "password": None, "full_name": None, "subscription_plan": "gold"}
        )
        assert request.username is None
        assert request.subscription_plan == "gold"

    @pytest.mark.unit
    def test_sign_in_requires_values(self):
        with pytest.raises(ValidationError):
            SignInRequest(username="", password="x")

    @pytest.mark.unit
    def test_sign_in_whitespace_username_rejected(self):
        with pytest.raises(ValidationError):
            SignInRequest(username="   ", password="x")

    @pytest.mark.unit
    def test_sign_in_username_stripped(self):
        assert SignInRequest(username=" jane_d ", password=" pw ").username == "jane_d"


class TestViewModels:

    @pytest.mark.unit
    def test_stats_frozen(self):
        stats = DashboardStats(total_customers=1)
        with pytest.raises(ValidationError):
            stats.total_customers = 2

    @pytest.mark.unit
    def test_rows_frozen(self):
        customer = Customer.model_validate({
            "id": "c1",
            "user_id": "u1",
            "subscription_plan": "basic",
            "subscription_status": "active",
            "profiles": {"full_name": "Jane Doe"},
        })
        with pytest.raises(ValidationError):
            customer.subscription_status = "inactive"
        with pytest.raises(ValidationError):
            customer.profiles.full_name = "Someone Else"
