"""Fold purchase records into per-seller accumulators.

Money is summed in integer cents. Each line item's revenue and cost is
rounded to the cent before it is added, so totals do not depend on the
order of the records.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sales_analytics.features.sales_report.money import to_cents
from sales_analytics.features.sales_report.schemas import Product, PurchaseRecord, Seller
from sales_analytics.features.sales_report.strategies import RevenueStrategy


@dataclass
class SellerAggregate:
    """Running totals for one seller.

    Attributes:
        seller: Seller reference data.
        revenue_cents: Revenue accumulated from line items.
        cost_cents: Purchase cost accumulated from line items.
        sales_count: Number of receipts.
        products_sold: SKU to cumulative quantity, in first-sold order.
    """

    seller: Seller
    revenue_cents: int = 0
    cost_cents: int = 0
    sales_count: int = 0
    products_sold: dict[str, int] = field(default_factory=dict)

    @property
    def profit_cents(self) -> int:
        return self.revenue_cents - self.cost_cents


@dataclass
class AggregationResult:
    """Aggregates in seller-list order plus skip counters."""

    aggregates: list[SellerAggregate]
    processed_records: int = 0
    skipped_records: int = 0
    skipped_items: int = 0


def aggregate_purchases(
    purchase_records: Iterable[PurchaseRecord],
    seller_index: dict[str, Seller],
    product_index: dict[str, Product],
    calculate_revenue: RevenueStrategy,
) -> AggregationResult:
    """Accumulate revenue, cost, receipt count and quantities per seller.

    Every indexed seller gets an aggregate, even without receipts. Records
    of unknown sellers and items of unknown SKUs are skipped and counted.

    Args:
        purchase_records: Receipts in input order.
        seller_index: Seller id to seller.
        product_index: SKU to product.
        calculate_revenue: Line-item revenue strategy.

    Returns:
        Aggregation result.
    """
    totals = {seller_id: SellerAggregate(seller=seller) for seller_id, seller in seller_index.items()}
    result = AggregationResult(aggregates=[])

    for record in purchase_records:
        aggregate = totals.get(record.seller_id)
        if aggregate is None:
            result.skipped_records += 1
            continue

        result.processed_records += 1
        aggregate.sales_count += 1

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                result.skipped_items += 1
                continue

            aggregate.revenue_cents += to_cents(calculate_revenue(item, product))
            aggregate.cost_cents += to_cents(product.purchase_price * item.quantity)
            aggregate.products_sold[item.sku] = (
                aggregate.products_sold.get(item.sku, 0) + item.quantity
            )

    result.aggregates = list(totals.values())
    return result
