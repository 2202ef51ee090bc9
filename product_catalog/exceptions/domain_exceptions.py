"""
Domain-Specific Exceptions for the Product Catalog

All exceptions extend ProductCatalogError. The gateway raises them after
translating boto3 errors; the read/write APIs convert them into failed
OperationResult values at the call site.

Organized by category:
1. Configuration Errors
2. Data Validation Errors
3. Resource Not Found Errors
4. Conflict Errors
5. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import ProductCatalogError


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ProductCatalogError):
    """Raised when required configuration is missing or invalid.

    This is the only error that aborts the process.
    """

    def __init__(self, message: str, setting: Optional[str] = None, original_error: Optional[Exception] = None):
        self.setting = setting
        context = {}
        if setting:
            context['setting'] = setting
        super().__init__(message, original_error, context)


# =============================================================================
# Data Validation Errors
# =============================================================================

class ValidationError(ProductCatalogError):
    """Raised when data validation fails.

    Used for:
    - DynamoDB ValidationException (e.g. a non-numeric price sent as N)
    - Pydantic model validation failures
    - Unsupported attribute types
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class NotFoundError(ProductCatalogError):
    """Raised when a DynamoDB resource (table, index) is not found."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict Errors
# =============================================================================

class ConflictError(ProductCatalogError):
    """Raised when an operation collides with existing state.

    Used for:
    - ResourceInUseException when the table already exists
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(ProductCatalogError):
    """Raised when DynamoDB cannot be reached or rejects the caller.

    Used for:
    - Network connectivity issues and invalid endpoints
    - Authentication/authorization failures
    - Missing credentials
    - Unrecognized error codes
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(ProductCatalogError):
    """Raised when an operation fails for a temporary reason.

    Nothing in this program retries; the error is reported like any other.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
