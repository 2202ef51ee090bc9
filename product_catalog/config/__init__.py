from .config import (
    DEFAULT_PRICE_LOWER_BOUND,
    DEFAULT_PRICE_UPPER_BOUND,
    DEFAULT_QUERY_CATEGORY,
    DEFAULT_TABLE_NAME,
    ProductCatalogConfig,
)

__all__ = [
    "ProductCatalogConfig",
    "DEFAULT_TABLE_NAME",
    "DEFAULT_QUERY_CATEGORY",
    "DEFAULT_PRICE_LOWER_BOUND",
    "DEFAULT_PRICE_UPPER_BOUND",
]
