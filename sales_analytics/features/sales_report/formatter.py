"""Build report rows from ranked sellers."""

from sales_analytics.features.sales_report.money import from_cents
from sales_analytics.features.sales_report.ranking import RankedSeller
from sales_analytics.features.sales_report.schemas import SellerReport, TopProduct
from sales_analytics.features.sales_report.strategies import TOP_PRODUCTS_LIMIT


def top_products(products_sold: dict[str, int], limit: int = TOP_PRODUCTS_LIMIT) -> list[TopProduct]:
    """Best-selling SKUs by quantity.

    Ties keep the order in which SKUs were first sold.

    Args:
        products_sold: SKU to cumulative quantity, in first-sold order.
        limit: Maximum number of entries.

    Returns:
        Up to ``limit`` products, highest quantity first.
    """
    ordered = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=quantity) for sku, quantity in ordered[:limit]]


def format_report(ranked: RankedSeller, top_products_limit: int = TOP_PRODUCTS_LIMIT) -> SellerReport:
    """Convert one ranked seller into its report row."""
    aggregate = ranked.aggregate
    return SellerReport(
        seller_id=aggregate.seller.id,
        name=aggregate.seller.full_name,
        revenue=from_cents(aggregate.revenue_cents),
        profit=from_cents(aggregate.profit_cents),
        sales_count=aggregate.sales_count,
        top_products=top_products(aggregate.products_sold, top_products_limit),
        bonus=from_cents(ranked.bonus_cents),
    )


def format_reports(
    ranked: list[RankedSeller],
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[SellerReport]:
    """Convert ranked sellers into report rows, keeping their order."""
    return [format_report(seller, top_products_limit) for seller in ranked]
