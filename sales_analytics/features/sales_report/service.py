"""Service layer for the seller sales report.

Pipeline: validate -> index -> aggregate -> rank -> assign bonuses -> format.
Each call builds its own indices and accumulators; nothing is shared
between calls.
"""

from typing import Any, cast

from sales_analytics.core.config import get_settings
from sales_analytics.core.exceptions import SalesAnalyticsError
from sales_analytics.core.logging import get_logger
from sales_analytics.features.sales_report.aggregator import aggregate_purchases
from sales_analytics.features.sales_report.formatter import format_reports
from sales_analytics.features.sales_report.indexer import build_product_index, build_seller_index
from sales_analytics.features.sales_report.ranking import assign_bonuses, rank_sellers
from sales_analytics.features.sales_report.schemas import SalesReportResponse, SellerReport
from sales_analytics.features.sales_report.strategies import (
    AnalysisOptions,
    BonusStrategy,
    RevenueStrategy,
    TieredBonusStrategy,
    calculate_simple_revenue,
)
from sales_analytics.features.sales_report.validation import validate_dataset, validate_options

logger = get_logger(__name__)


def analyze(dataset: Any, options: Any) -> list[SellerReport]:
    """Compute the per-seller sales report.

    Args:
        dataset: Mapping (or SalesDataset) with sellers, products and
            purchase_records.
        options: AnalysisOptions or a mapping with calculate_revenue and
            calculate_bonus strategies.

    Returns:
        One report per seller, sorted by profit descending.

    Raises:
        SalesAnalyticsError: Dataset or options are invalid. Raised before
            any aggregation; no partial report is produced.
    """
    try:
        parsed = validate_dataset(dataset)
        opts = validate_options(options)
    except SalesAnalyticsError as e:
        logger.warning(
            "sales_report.validation_failed",
            error=e.message,
            error_code=e.code,
            details=e.details,
        )
        raise

    product_index = build_product_index(parsed.products)
    seller_index = build_seller_index(parsed.sellers)

    aggregation = aggregate_purchases(
        parsed.purchase_records,
        seller_index=seller_index,
        product_index=product_index,
        calculate_revenue=cast(RevenueStrategy, opts.calculate_revenue),
    )
    if aggregation.skipped_records or aggregation.skipped_items:
        logger.info(
            "sales_report.unknown_references_skipped",
            skipped_records=aggregation.skipped_records,
            skipped_items=aggregation.skipped_items,
        )

    ranked = assign_bonuses(
        rank_sellers(aggregation.aggregates),
        cast(BonusStrategy, opts.calculate_bonus),
    )
    reports = format_reports(ranked, opts.top_products_limit)

    logger.info(
        "sales_report.analysis_completed",
        seller_count=len(reports),
        product_count=len(product_index),
        record_count=aggregation.processed_records,
    )

    return reports


class SalesReportService:
    """Runs the sales report with strategies configured from settings."""

    def __init__(self) -> None:
        """Initialize sales report service."""
        self.settings = get_settings()

    def build_options(self) -> AnalysisOptions:
        """Reference revenue strategy plus the configured bonus tiers."""
        return AnalysisOptions(
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=TieredBonusStrategy.from_settings(self.settings),
            top_products_limit=self.settings.sales_report_top_products_limit,
        )

    def generate_report(self, dataset: Any) -> SalesReportResponse:
        """Compute the report for a raw dataset.

        Args:
            dataset: Raw dataset (typically a decoded JSON object).

        Returns:
            Report response with rows sorted by profit.
        """
        reports = analyze(dataset, self.build_options())
        return SalesReportResponse(reports=reports, total_sellers=len(reports))
