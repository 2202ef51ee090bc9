# Base exception class
from .base import ProductCatalogError

from .domain_exceptions import (
    ConfigurationError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ProductCatalogError",

    # Domain exceptions (alphabetically ordered)
    "ConfigurationError",
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",
]
