"""API routes for the seller sales report."""

from typing import Any

from fastapi import APIRouter, Body, Request

from sales_analytics.core.middleware import bind_request_outcome
from sales_analytics.features.sales_report.schemas import SalesReportResponse
from sales_analytics.features.sales_report.service import SalesReportService

router = APIRouter(prefix="/sales-report", tags=["sales-report"])


@router.post(
    "",
    response_model=SalesReportResponse,
    summary="Compute the seller sales report",
    description="""
Rank sellers by profit and compute their bonuses from raw sales data.

**Request body**: a JSON object with three non-empty arrays:
- `sellers`: `{id, first_name, last_name}`
- `products`: `{sku, purchase_price, sale_price}`
- `purchase_records`: `{seller_id, items: [{sku, discount, quantity, sale_price}], total_amount, total_discount}`

Extra fields (for example a `customers` array) are ignored.

**Per seller**:
- `revenue`: sum of `sale_price * quantity * (1 - discount / 100)` over line items
- `profit`: revenue minus `purchase_price * quantity`
- `sales_count`: number of receipts
- `top_products`: up to 10 SKUs by quantity sold
- `bonus`: 15% of profit for first place, 10% for second and third,
  0% for last place, 5% for everyone else (rates are configurable)

Receipts of unknown sellers and items of unknown SKUs are skipped.

**Errors** (RFC 7807): `INVALID_INPUT`, `MISSING_FIELD`, `INVALID_TYPE`,
`EMPTY_COLLECTION`, `INVALID_RECORD`.
""",
)
def create_sales_report(
    request: Request,
    payload: Any = Body(..., description="Sales dataset."),
) -> SalesReportResponse:
    """Compute the sales report for the posted dataset.

    Args:
        request: Incoming request, annotated with the report outcome.
        payload: Raw dataset decoded from the JSON body.

    Returns:
        Report rows sorted by profit.
    """
    service = SalesReportService()
    response = service.generate_report(payload)
    bind_request_outcome(request, seller_count=response.total_sellers)
    return response
