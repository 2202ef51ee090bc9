"""
Explicit operation results.

The read/write APIs never let a DynamoDB failure escape as an exception.
Each call returns an OperationResult holding either the value or the error
detail, and the caller decides what to print.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from ..exceptions import ProductCatalogError

T = TypeVar("T")


class OperationResult(BaseModel, Generic[T]):
    """Success value or error detail of a single remote operation."""

    operation: str
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, operation: str, value: Optional[T] = None) -> 'OperationResult[T]':
        return cls(operation=operation, value=value)

    @classmethod
    def failure(cls, operation: str, error: ProductCatalogError) -> 'OperationResult[T]':
        return cls(
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            error_code=error.error_code,
        )
