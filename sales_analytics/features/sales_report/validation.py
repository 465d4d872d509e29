"""Input validation for the sales report pipeline.

Runs before any aggregation: structural checks on the raw dataset and the
options first, then parsing of every record into its typed model. Nothing
downstream of this module raises.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from sales_analytics.core.exceptions import (
    EmptyCollectionError,
    InvalidInputError,
    InvalidOptionError,
    InvalidRecordError,
    InvalidTypeError,
    MissingFieldError,
    MissingOptionsError,
    MissingStrategyError,
)
from sales_analytics.features.sales_report.schemas import (
    Product,
    PurchaseRecord,
    SalesDataset,
    Seller,
)
from sales_analytics.features.sales_report.strategies import TOP_PRODUCTS_LIMIT, AnalysisOptions

REQUIRED_FIELDS = ("sellers", "products", "purchase_records")

_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "sellers": TypeAdapter(list[Seller]),
    "products": TypeAdapter(list[Product]),
    "purchase_records": TypeAdapter(list[PurchaseRecord]),
}

# Accepted spellings of each strategy key in mapping-style options
_STRATEGY_KEYS = {
    "calculate_revenue": ("calculate_revenue", "calculateRevenue"),
    "calculate_bonus": ("calculate_bonus", "calculateBonus"),
}


def _type_name(value: object) -> str:
    return "None" if value is None else type(value).__name__


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def _record_errors(field: str, exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into field/message/type triples."""
    return [
        {
            "field": ".".join([field, *(str(part) for part in error["loc"])]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def validate_dataset(dataset: object) -> SalesDataset:
    """Check the dataset structure and parse its records.

    Args:
        dataset: Mapping (or SalesDataset) with sellers, products and
            purchase_records. Extra keys are ignored.

    Returns:
        Parsed dataset.

    Raises:
        InvalidInputError: Dataset is missing or not a mapping.
        MissingFieldError: A required collection is absent.
        InvalidTypeError: A required collection is not a list.
        EmptyCollectionError: A required collection is empty.
        InvalidRecordError: A record cannot be parsed into its model.
    """
    if isinstance(dataset, BaseModel):
        dataset = dict(dataset)
    if not isinstance(dataset, Mapping):
        raise InvalidInputError(received=_type_name(dataset))

    for field in REQUIRED_FIELDS:
        if field not in dataset:
            raise MissingFieldError(field)
        value = dataset[field]
        if not _is_sequence(value):
            raise InvalidTypeError(field, received=_type_name(value))
        if len(value) == 0:
            raise EmptyCollectionError(field)

    parsed: dict[str, Any] = {}
    for field in REQUIRED_FIELDS:
        try:
            parsed[field] = _ADAPTERS[field].validate_python(list(dataset[field]))
        except PydanticValidationError as e:
            raise InvalidRecordError(field, _record_errors(field, e)) from e

    return SalesDataset(**parsed)


def validate_options(options: object) -> AnalysisOptions:
    """Check that both calculation strategies are present and callable.

    Args:
        options: AnalysisOptions, or a mapping with calculate_revenue and
            calculate_bonus (camelCase keys are accepted too) and an optional
            top_products_limit.

    Returns:
        Normalized options.

    Raises:
        MissingOptionsError: Options are missing or not a structured record.
        MissingStrategyError: A strategy is missing or not callable.
        InvalidOptionError: top_products_limit is not a positive integer.
    """
    if isinstance(options, AnalysisOptions):
        normalized = options
    elif isinstance(options, Mapping):
        strategies = {
            name: next((options[key] for key in keys if key in options), None)
            for name, keys in _STRATEGY_KEYS.items()
        }
        normalized = AnalysisOptions(
            calculate_revenue=strategies["calculate_revenue"],
            calculate_bonus=strategies["calculate_bonus"],
            top_products_limit=options.get("top_products_limit", TOP_PRODUCTS_LIMIT),
        )
    else:
        raise MissingOptionsError(received=_type_name(options))

    missing = [
        name
        for name in ("calculate_revenue", "calculate_bonus")
        if not callable(getattr(normalized, name))
    ]
    if missing:
        raise MissingStrategyError(missing)

    limit = normalized.top_products_limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidOptionError("top_products_limit", limit, "must be a positive integer")

    return normalized
