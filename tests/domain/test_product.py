"""Unit tests for the Product aggregate and its enumerations."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import BillingModel, Category, Product
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestCategory:

    def test_parse_display_value(self):
        assert Category.parse("Trading Bots") is Category.TRADING_BOTS

    def test_parse_member_name(self):
        assert Category.parse("CYBERSECURITY") is Category.CYBERSECURITY

    def test_parse_is_case_insensitive_on_value(self):
        assert Category.parse("saas software") is Category.SAAS

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Category.parse("Hardware")


class TestBillingModel:

    def test_every_member_has_a_suffix_and_call_to_action(self):
        for member in BillingModel:
            assert isinstance(member.price_suffix, str)
            assert member.call_to_action

    def test_subscription_mapping(self):
        assert BillingModel.SUBSCRIPTION.price_suffix == "/mo"
        assert BillingModel.SUBSCRIPTION.call_to_action == "Activate Sub"

    def test_service_mapping(self):
        assert BillingModel.SERVICE.price_suffix == ""
        assert BillingModel.SERVICE.call_to_action == "Book Delivery"

    def test_one_time_mapping(self):
        assert BillingModel.ONE_TIME.price_suffix == ""
        assert BillingModel.ONE_TIME.call_to_action == "Instant Access"

    def test_parse(self):
        assert BillingModel.parse("One-time") is BillingModel.ONE_TIME
        assert BillingModel.parse("SUBSCRIPTION") is BillingModel.SUBSCRIPTION

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown billing model"):
            BillingModel.parse("Lease")


class TestProduct:

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id="x", name="  ", category=Category.SAAS, price=Money.of("1"))

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError, match="ID is required"):
            Product(id="", name="X", category=Category.SAAS, price=Money.of("1"))

    def test_rating_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="Rating must be between"):
            make_product(rating=5.5)

    def test_display_price_adds_subscription_suffix(self):
        p = make_product(price="29", billing_model=BillingModel.SUBSCRIPTION)
        assert p.display_price == "$29.00/mo"

    def test_display_price_one_time(self):
        assert make_product(price="99").display_price == "$99.00"

    def test_matches_text_name_and_description(self):
        p = make_product(name="CryptoBot X", description="Automated trading bot")
        assert p.matches_text("crypto")
        assert p.matches_text("TRADING")
        assert not p.matches_text("figma")

    def test_update_details_only_changes_given_fields(self):
        p = make_product(name="Old", description="keep me")
        p.update_details(name="New", rating=3.0)
        assert p.name == "New"
        assert p.rating == 3.0
        assert p.description == "keep me"

    def test_update_details_blank_disclaimer_clears_it(self):
        p = make_product()
        p.disclaimer = "risky"
        p.update_details(disclaimer="")
        assert p.disclaimer is None

    def test_snapshot_is_independent(self):
        p = make_product(price="10")
        copy = p.snapshot()
        p.update_price(Money.of("99"))
        assert copy.price == Money.of("10")
