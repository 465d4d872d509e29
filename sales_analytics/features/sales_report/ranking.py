"""Profit ranking and bonus assignment."""

from dataclasses import dataclass

from sales_analytics.features.sales_report.aggregator import SellerAggregate
from sales_analytics.features.sales_report.money import from_cents, to_cents
from sales_analytics.features.sales_report.strategies import BonusStrategy, SellerView


@dataclass(frozen=True)
class RankedSeller:
    """A seller's aggregate with its rank and bonus.

    Attributes:
        rank: Zero-based position by profit (0 = highest).
        aggregate: Seller totals.
        bonus_cents: Bonus returned by the strategy, rounded to cents.
    """

    rank: int
    aggregate: SellerAggregate
    bonus_cents: int


def rank_sellers(aggregates: list[SellerAggregate]) -> list[SellerAggregate]:
    """Sort sellers by profit, highest first.

    The sort is stable: sellers with equal profit keep their input order.
    """
    return sorted(aggregates, key=lambda aggregate: aggregate.profit_cents, reverse=True)


def seller_view(aggregate: SellerAggregate) -> SellerView:
    """Build the read-only view handed to bonus strategies."""
    return SellerView(
        seller_id=aggregate.seller.id,
        profit=from_cents(aggregate.profit_cents),
        revenue=from_cents(aggregate.revenue_cents),
        sales_count=aggregate.sales_count,
    )


def assign_bonuses(
    ranked: list[SellerAggregate],
    calculate_bonus: BonusStrategy,
) -> list[RankedSeller]:
    """Apply the bonus strategy to each seller in rank order.

    Args:
        ranked: Aggregates sorted by profit (see rank_sellers).
        calculate_bonus: Rank-to-bonus strategy.

    Returns:
        Ranked sellers with bonuses, in the same order.
    """
    total = len(ranked)
    return [
        RankedSeller(
            rank=rank,
            aggregate=aggregate,
            bonus_cents=to_cents(calculate_bonus(rank, total, seller_view(aggregate))),
        )
        for rank, aggregate in enumerate(ranked)
    ]
