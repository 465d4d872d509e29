"""Tests for the reference revenue and bonus strategies."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from sales_analytics.core.config import Settings
from sales_analytics.features.sales_report.schemas import LineItem, Product
from sales_analytics.features.sales_report.strategies import (
    SellerView,
    TieredBonusStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    default_options,
)

PRODUCT = Product(sku="A", purchase_price=Decimal("50"), sale_price=Decimal("100"))


def view(profit: str) -> SellerView:
    return SellerView(seller_id="s1", profit=Decimal(profit), revenue=Decimal("0"), sales_count=0)


class TestSimpleRevenue:
    """Tests for calculate_simple_revenue."""

    def test_discounted_revenue(self):
        """100 * 2 * (1 - 10%) = 180.00."""
        item = LineItem(sku="A", sale_price=Decimal("100"), quantity=2, discount=Decimal("10"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("180.00")

    def test_missing_discount_means_full_price(self):
        """No discount leaves the price unchanged."""
        item = LineItem(sku="A", sale_price=Decimal("19.99"), quantity=3)
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("59.97")

    @pytest.mark.parametrize(
        ("discount", "expected"),
        [
            ("-20", Decimal("100.00")),
            ("100", Decimal("0.00")),
            ("150", Decimal("0.00")),
        ],
    )
    def test_discount_is_clamped(self, discount, expected):
        """Discounts outside 0-100 are clamped."""
        item = LineItem(sku="A", sale_price=Decimal("100"), quantity=1, discount=Decimal(discount))
        assert calculate_simple_revenue(item, PRODUCT) == expected

    @pytest.mark.parametrize("price", [None, Decimal("NaN"), Decimal("Infinity"), Decimal("0")])
    def test_unusable_price_yields_zero(self, price):
        """Missing, zero or non-finite prices contribute 0."""
        item = LineItem(sku="A", sale_price=price, quantity=5)
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("0.00")

    def test_non_finite_discount_is_ignored(self):
        """A NaN discount counts as no discount."""
        item = LineItem(sku="A", sale_price=Decimal("10"), quantity=1, discount=Decimal("NaN"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("10.00")

    def test_zero_quantity_yields_zero(self):
        """Zero units produce no revenue."""
        item = LineItem(sku="A", sale_price=Decimal("10"), quantity=0)
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("0.00")

    def test_rounds_half_away_from_zero(self):
        """1.005 rounds up to 1.01."""
        item = LineItem(sku="A", sale_price=Decimal("1.005"), quantity=1)
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("1.01")

    def test_receipt_price_wins_over_catalog(self):
        """The line item's sale_price is used, not the catalog price."""
        item = LineItem(sku="A", sale_price=Decimal("70"), quantity=1)
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("70.00")


class TestTieredBonus:
    """Tests for TieredBonusStrategy."""

    @pytest.mark.parametrize(
        ("rank", "expected"),
        [(0, "0.15"), (1, "0.10"), (2, "0.10"), (3, "0.05"), (4, "0")],
    )
    def test_rates_for_five_sellers(self, rank, expected):
        """Five sellers map to 15/10/10/5/0 percent."""
        assert calculate_bonus_by_profit.rate_for(rank, 5) == Decimal(expected)

    def test_middle_ranks_get_default_rate(self):
        """Ranks between third and last get 5%."""
        strategy = TieredBonusStrategy()
        assert [strategy.rate_for(rank, 8) for rank in range(3, 7)] == [Decimal("0.05")] * 4

    def test_lone_seller_gets_top_rate(self):
        """Rank 0 of 1 is first place, not last place."""
        assert calculate_bonus_by_profit.rate_for(0, 1) == Decimal("0.15")

    def test_podium_beats_last_place(self):
        """With three sellers the third is podium, not last."""
        assert calculate_bonus_by_profit.rate_for(2, 3) == Decimal("0.10")
        assert calculate_bonus_by_profit.rate_for(1, 2) == Decimal("0.10")

    def test_bonus_amount(self):
        """Bonus is profit times rate, rounded to cents."""
        assert calculate_bonus_by_profit(0, 5, view("1000")) == Decimal("150.00")
        assert calculate_bonus_by_profit(3, 5, view("123.45")) == Decimal("6.17")

    def test_negative_profit_not_floored_by_default(self):
        """Default policy applies the rate to negative profit."""
        assert calculate_bonus_by_profit(0, 2, view("-200")) == Decimal("-30.00")

    def test_floor_at_zero(self):
        """floor_at_zero clamps negative bonuses."""
        strategy = TieredBonusStrategy(floor_at_zero=True)
        assert strategy(0, 2, view("-200")) == Decimal("0.00")
        assert strategy(0, 2, view("200")) == Decimal("30.00")

    def test_from_settings(self):
        """Rates are read from settings."""
        settings = Settings(
            bonus_top_rate=Decimal("0.2"),
            bonus_podium_rate=Decimal("0.12"),
            bonus_default_rate=Decimal("0.03"),
            bonus_last_rate=Decimal("0.01"),
            bonus_floor_at_zero=True,
        )

        strategy = TieredBonusStrategy.from_settings(settings)

        assert strategy.rate_for(0, 10) == Decimal("0.2")
        assert strategy.rate_for(1, 10) == Decimal("0.12")
        assert strategy.rate_for(5, 10) == Decimal("0.03")
        assert strategy.rate_for(9, 10) == Decimal("0.01")
        assert strategy.floor_at_zero is True

    def test_settings_reject_rates_above_one(self):
        """A rate of 15 (instead of 0.15) is rejected."""
        with pytest.raises(ValidationError):
            Settings(bonus_top_rate=Decimal("15"))


class TestDefaultOptions:
    """Tests for default_options."""

    def test_reference_strategies(self):
        """Default options use the reference strategies and a limit of 10."""
        options = default_options()

        assert options.calculate_revenue is calculate_simple_revenue
        assert options.calculate_bonus is calculate_bonus_by_profit
        assert options.top_products_limit == 10
