"""Lookup indices over reference data.

Duplicate keys are not an error: the later entry overwrites the earlier one.
"""

from collections.abc import Iterable

from sales_analytics.core.logging import get_logger
from sales_analytics.features.sales_report.schemas import Product, Seller

logger = get_logger(__name__)


def build_product_index(products: Iterable[Product]) -> dict[str, Product]:
    """Map SKU to product."""
    products = list(products)
    index = {product.sku: product for product in products}
    if len(index) < len(products):
        logger.debug(
            "sales_report.duplicate_skus",
            duplicates=len(products) - len(index),
        )
    return index


def build_seller_index(sellers: Iterable[Seller]) -> dict[str, Seller]:
    """Map seller id to seller.

    Iteration order follows each id's first appearance in ``sellers``.
    """
    sellers = list(sellers)
    index = {seller.id: seller for seller in sellers}
    if len(index) < len(sellers):
        logger.debug(
            "sales_report.duplicate_seller_ids",
            duplicates=len(sellers) - len(index),
        )
    return index
