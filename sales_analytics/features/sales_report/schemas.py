"""Pydantic schemas for the sales report.

Input models ignore unknown fields, so datasets exported with extra columns
(customer lists, receipt dates, product names) parse unchanged. Only the
values the report is computed from are validated strictly: keys,
purchase_price and quantity. Display-only and informational values
(seller names, catalog sale price, receipt totals) never reject a record;
unusable values there become empty or None.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sales_analytics.features.sales_report.money import to_decimal

# =============================================================================
# Input Schemas
# =============================================================================


class Product(BaseModel):
    """Catalog entry. Joined to line items by SKU."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    sku: str = Field(..., min_length=1, description="Unique product identifier.")
    purchase_price: Decimal = Field(
        Decimal("0"),
        ge=0,
        description="Unit cost paid to the supplier. Used to compute seller cost.",
    )
    sale_price: Decimal | None = Field(
        Decimal("0"),
        description="Catalog unit sale price. Informational; line items carry the price used.",
    )

    @field_validator("sale_price", mode="before")
    @classmethod
    def lenient_sale_price(cls, value: Any) -> Decimal | None:
        return to_decimal(value)


class Seller(BaseModel):
    """Seller reference data."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., min_length=1, description="Unique seller identifier.")
    first_name: str = ""
    last_name: str = ""

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def lenient_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class LineItem(BaseModel):
    """One product entry within a receipt.

    Price and discount are kept as given (including None or non-finite
    values); revenue strategies decide how to treat them.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    sku: str = Field(..., description="Product SKU. Unknown SKUs are skipped.")
    discount: Decimal | None = Field(
        None,
        allow_inf_nan=True,
        description="Discount in percent (0-100).",
    )
    quantity: int = Field(0, ge=0, description="Units sold.")
    sale_price: Decimal | None = Field(
        None,
        allow_inf_nan=True,
        description="Unit sale price on this receipt.",
    )


class PurchaseRecord(BaseModel):
    """One receipt issued by one seller."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    seller_id: str = Field(..., description="Issuing seller. Unknown sellers are skipped.")
    items: list[LineItem] = Field(default_factory=list)
    total_amount: Decimal | None = None
    total_discount: Decimal | None = None

    @field_validator("total_amount", "total_discount", mode="before")
    @classmethod
    def lenient_totals(cls, value: Any) -> Decimal | None:
        """Receipt totals are not used for revenue; keep what parses."""
        return to_decimal(value)


class SalesDataset(BaseModel):
    """Complete input of one report computation."""

    model_config = ConfigDict(extra="ignore")

    sellers: list[Seller] = Field(..., min_length=1)
    products: list[Product] = Field(..., min_length=1)
    purchase_records: list[PurchaseRecord] = Field(..., min_length=1)


# =============================================================================
# Report Schemas
# =============================================================================


class TopProduct(BaseModel):
    """A best-selling SKU of one seller."""

    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int = Field(..., ge=0)


class SellerReport(BaseModel):
    """Final report row for one seller.

    Monetary values are rounded to cents.
    """

    model_config = ConfigDict(frozen=True)

    seller_id: str = Field(..., description="Seller identifier.")
    name: str = Field(..., description="First and last name separated by a space.")
    revenue: Decimal = Field(..., description="Revenue after discounts.")
    profit: Decimal = Field(..., description="Revenue minus purchase cost.")
    sales_count: int = Field(..., ge=0, description="Number of receipts issued.")
    top_products: list[TopProduct] = Field(
        default_factory=list,
        description="Best-selling SKUs by quantity, highest first.",
    )
    bonus: Decimal = Field(..., description="Rank-based bonus.")


class SalesReportResponse(BaseModel):
    """Sales report ordered by profit (highest first)."""

    reports: list[SellerReport] = Field(
        ...,
        description="One row per seller, sorted by profit descending.",
    )
    total_sellers: int = Field(..., ge=0, description="Number of sellers ranked.")
