"""Example: seller sales report with default and custom strategies.

Usage:
    python examples/sales_report_demo.py
"""

import json
from decimal import Decimal
from pathlib import Path

from sales_analytics.features.sales_report import (
    AnalysisOptions,
    LineItem,
    Product,
    SellerView,
    TieredBonusStrategy,
    analyze,
    calculate_simple_revenue,
    default_options,
)

DATASET_PATH = Path(__file__).parent / "data" / "sample_dataset.json"


def print_reports(reports):
    """Pretty print report rows."""
    for rank, report in enumerate(reports, 1):
        print(f"  {rank}. {report.name} ({report.seller_id})")
        print(f"     revenue={report.revenue}  profit={report.profit}  bonus={report.bonus}")
        print(f"     receipts={report.sales_count}")
        top = ", ".join(f"{p.sku} x{p.quantity}" for p in report.top_products)
        print(f"     top products: {top}")


def catalog_price_revenue(item: LineItem, product: Product) -> Decimal:
    """Revenue at catalog price, ignoring the receipt price and discount."""
    return (product.sale_price or Decimal("0")) * item.quantity


def flat_bonus(rank_index: int, total_sellers: int, seller: SellerView) -> Decimal:
    """Same 5% for everybody with a positive profit."""
    return max(seller.profit * Decimal("0.05"), Decimal("0"))


def main():
    dataset = json.loads(DATASET_PATH.read_text(encoding="utf-8"))

    print("=" * 70)
    print("SELLER SALES REPORT")
    print("=" * 70)

    print("\n--- Reference strategies ---")
    print_reports(analyze(dataset, default_options()))

    print("\n--- Catalog prices, flat 5% bonus ---")
    print_reports(
        analyze(
            dataset,
            AnalysisOptions(calculate_revenue=catalog_price_revenue, calculate_bonus=flat_bonus),
        )
    )

    print("\n--- Reference revenue, bonus floored at zero, top 3 products ---")
    print_reports(
        analyze(
            dataset,
            AnalysisOptions(
                calculate_revenue=calculate_simple_revenue,
                calculate_bonus=TieredBonusStrategy(floor_at_zero=True),
                top_products_limit=3,
            ),
        )
    )


if __name__ == "__main__":
    main()
