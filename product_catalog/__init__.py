"""
Product Catalog

A small command-line utility around a single DynamoDB table of products,
keyed by category (partition key) and productname (sort key), built on
boto3 and Pydantic:

- create the table with on-demand billing
- write products typed in at the console
- query one category with a server-side price filter
"""

from .config import ProductCatalogConfig
from .exceptions import (
    ConfigurationError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ProductCatalogError,
    RetryableError,
    ValidationError,
)
from .models import (
    PRODUCT_TABLE_SCHEMA,
    OperationResult,
    PriceRange,
    Product,
    ProductQuery,
    ProductQueryResult,
    ProductView,
    TableSchema,
)
from .core import TableGateway, create_table_gateway
from .handlers import ProductReadApi, ProductWriteApi

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "ProductCatalogConfig",

    # Exceptions
    "ProductCatalogError",
    "ConfigurationError",
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",

    # Models
    "Product",
    "ProductView",
    "PriceRange",
    "ProductQuery",
    "ProductQueryResult",
    "OperationResult",
    "TableSchema",
    "PRODUCT_TABLE_SCHEMA",

    # Gateway
    "TableGateway",
    "create_table_gateway",

    # APIs
    "ProductReadApi",
    "ProductWriteApi",
]
