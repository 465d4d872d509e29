"""Pluggable calculation strategies.

A revenue strategy prices one line item; a bonus strategy turns a seller's
profit rank into a bonus amount. Both are plain callables so callers can
pass a function, a lambda or a configured policy object.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from sales_analytics.features.sales_report.money import ZERO, Number, round_currency, to_decimal
from sales_analytics.features.sales_report.schemas import LineItem, Product

if TYPE_CHECKING:
    from sales_analytics.core.config import Settings

TOP_PRODUCTS_LIMIT = 10
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class SellerView:
    """Read-only view of a ranked seller handed to bonus strategies.

    Attributes:
        seller_id: Seller identifier.
        profit: Full-precision profit (revenue minus cost).
        revenue: Full-precision revenue.
        sales_count: Number of receipts.
    """

    seller_id: str
    profit: Decimal
    revenue: Decimal
    sales_count: int


class RevenueStrategy(Protocol):
    """Computes the revenue of one line item after discount."""

    def __call__(self, item: LineItem, product: Product) -> Number: ...


class BonusStrategy(Protocol):
    """Computes a seller's bonus from its zero-based profit rank."""

    def __call__(self, rank_index: int, total_sellers: int, seller: SellerView) -> Number: ...


# =============================================================================
# Revenue
# =============================================================================


def calculate_simple_revenue(item: LineItem, product: Product) -> Decimal:
    """Revenue of a line item: sale_price * quantity * (1 - discount / 100).

    The discount is clamped to 0-100 percent; a missing one counts as 0.
    A missing or non-finite price yields 0.

    Args:
        item: Line item from a receipt.
        product: Catalog entry (unused; the receipt price wins).

    Returns:
        Revenue rounded to cents, never negative.
    """
    price = to_decimal(item.sale_price)
    quantity = to_decimal(item.quantity)
    if not price or not quantity:
        return round_currency(ZERO)

    discount = to_decimal(item.discount) or ZERO
    discount = min(max(discount, ZERO), HUNDRED)

    revenue = price * quantity * (1 - discount / HUNDRED)
    return round_currency(max(revenue, ZERO))


# =============================================================================
# Bonus
# =============================================================================


@dataclass(frozen=True)
class TieredBonusStrategy:
    """Percentage-of-profit bonus by rank tier.

    Tiers are checked in order: first place, second and third place, last
    place, everyone else. A lone seller is therefore paid the first-place
    rate. Profit is not floored unless ``floor_at_zero`` is set, so a
    negative profit yields a negative bonus at the literal rate.
    """

    top_rate: Decimal = Decimal("0.15")
    podium_rate: Decimal = Decimal("0.10")
    last_rate: Decimal = Decimal("0")
    default_rate: Decimal = Decimal("0.05")
    floor_at_zero: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> TieredBonusStrategy:
        """Build the policy from application settings."""
        return cls(
            top_rate=settings.bonus_top_rate,
            podium_rate=settings.bonus_podium_rate,
            last_rate=settings.bonus_last_rate,
            default_rate=settings.bonus_default_rate,
            floor_at_zero=settings.bonus_floor_at_zero,
        )

    def rate_for(self, rank_index: int, total_sellers: int) -> Decimal:
        """Return the bonus rate for a zero-based rank."""
        if rank_index == 0:
            return self.top_rate
        if rank_index in (1, 2):
            return self.podium_rate
        if rank_index == total_sellers - 1:
            return self.last_rate
        return self.default_rate

    def __call__(self, rank_index: int, total_sellers: int, seller: SellerView) -> Decimal:
        profit = to_decimal(seller.profit)
        if profit is None:
            return round_currency(ZERO)

        bonus = profit * self.rate_for(rank_index, total_sellers)
        if self.floor_at_zero:
            bonus = max(bonus, ZERO)
        return round_currency(bonus)


calculate_bonus_by_profit = TieredBonusStrategy()


# =============================================================================
# Options
# =============================================================================


@dataclass(frozen=True)
class AnalysisOptions:
    """Strategies and limits for one report computation.

    Attributes:
        calculate_revenue: Line-item revenue strategy.
        calculate_bonus: Rank-to-bonus strategy.
        top_products_limit: Maximum number of top products per seller.
    """

    calculate_revenue: RevenueStrategy | None = None
    calculate_bonus: BonusStrategy | None = None
    top_products_limit: int = TOP_PRODUCTS_LIMIT


def default_options(top_products_limit: int = TOP_PRODUCTS_LIMIT) -> AnalysisOptions:
    """Options with the reference revenue and bonus strategies."""
    return AnalysisOptions(
        calculate_revenue=calculate_simple_revenue,
        calculate_bonus=calculate_bonus_by_profit,
        top_products_limit=top_products_limit,
    )
