from typing import Any, Dict, Optional


def _client_error_code(error: Optional[Exception]) -> Optional[str]:
    response = getattr(error, 'response', None)
    if not isinstance(response, dict):
        return None
    return response.get('Error', {}).get('Code')


class ProductCatalogError(Exception):
    """Root of the product catalog exception tree.

    Carries the cause (usually a botocore ClientError) and a flat context
    mapping that is appended to the message when the error is printed, e.g.
    ``Table not found (Context: resource_type=table)``.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = dict(context) if context else {}
        # DynamoDB code such as 'ResourceInUseException', None for non-AWS causes
        self.error_code = _client_error_code(original_error)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} (Context: {details})"
