from .product import (
    CATEGORY,
    PRICE,
    PRODUCT_NAME,
    PriceRange,
    Product,
    ProductQuery,
    ProductQueryResult,
    ProductView,
)
from .results import OperationResult
from .schema import (
    PRODUCT_TABLE_SCHEMA,
    BillingMode,
    KeyAttribute,
    KeyType,
    ScalarAttributeType,
    TableSchema,
)

__all__ = [
    # Attribute names
    "CATEGORY",
    "PRODUCT_NAME",
    "PRICE",

    # Write model
    "Product",

    # Read models
    "PriceRange",
    "ProductQuery",
    "ProductQueryResult",
    "ProductView",

    # Results
    "OperationResult",

    # Table schema
    "PRODUCT_TABLE_SCHEMA",
    "BillingMode",
    "KeyAttribute",
    "KeyType",
    "ScalarAttributeType",
    "TableSchema",
]
