"""Seller sales report: revenue, profit, top products and rank bonuses.

Use ``analyze(dataset, options)`` directly, or the HTTP endpoint
``POST /sales-report``.
"""

from sales_analytics.features.sales_report.routes import router
from sales_analytics.features.sales_report.schemas import (
    LineItem,
    Product,
    PurchaseRecord,
    SalesDataset,
    SalesReportResponse,
    Seller,
    SellerReport,
    TopProduct,
)
from sales_analytics.features.sales_report.service import SalesReportService, analyze
from sales_analytics.features.sales_report.strategies import (
    AnalysisOptions,
    BonusStrategy,
    RevenueStrategy,
    SellerView,
    TieredBonusStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    default_options,
)

__all__ = [
    "AnalysisOptions",
    "BonusStrategy",
    "LineItem",
    "Product",
    "PurchaseRecord",
    "RevenueStrategy",
    "SalesDataset",
    "SalesReportResponse",
    "SalesReportService",
    "Seller",
    "SellerReport",
    "SellerView",
    "TieredBonusStrategy",
    "TopProduct",
    "analyze",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "default_options",
    "router",
]
