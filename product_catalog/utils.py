"""
Product Catalog Utilities

Helpers shared by the models and the read/write APIs:

- Mapping between plain strings and DynamoDB typed attribute values
  ({'S': ...} / {'N': ...}) for the low-level client
- Query building (projection expressions with attribute name placeholders)

Numbers stay strings end to end. The N wire format is itself a string, so a
price typed by the user reaches DynamoDB exactly as entered and is validated
there, not here.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

STRING = 'S'
NUMBER = 'N'

SUPPORTED_SCALAR_TYPES = (STRING, NUMBER)


# =============================================================================
# Attribute Value Mapping
# =============================================================================

def to_attribute_value(value: str, attribute_type: str = STRING) -> Dict[str, str]:
    """Wrap a string in a DynamoDB typed attribute value.

    Args:
        value: Raw string value
        attribute_type: 'S' for string, 'N' for number

    Returns:
        Typed attribute value for the low-level client

    Raises:
        ValidationError: If the attribute type is not supported

    Examples:
        >>> to_attribute_value('kitchen')
        {'S': 'kitchen'}
        >>> to_attribute_value('4.50', 'N')
        {'N': '4.50'}
    """
    if attribute_type not in SUPPORTED_SCALAR_TYPES:
        raise ValidationError(
            f"Unsupported attribute type '{attribute_type}'",
            errors={'attribute_type': attribute_type}
        )
    return {attribute_type: str(value)}


def from_attribute_value(attribute: Dict[str, Any]) -> str:
    """Unwrap a DynamoDB typed attribute value to its string form.

    Numbers are returned in the exact text DynamoDB sent back.

    Raises:
        ValidationError: If the attribute is not a single S or N value
    """
    if not isinstance(attribute, dict) or len(attribute) != 1:
        raise ValidationError(f"Malformed attribute value: {attribute!r}")

    attribute_type, value = next(iter(attribute.items()))
    if attribute_type not in SUPPORTED_SCALAR_TYPES:
        raise ValidationError(
            f"Unsupported attribute type '{attribute_type}'",
            errors={'attribute_type': attribute_type}
        )
    return value


def parse_price_bound(value: str) -> Decimal:
    """Parse a query price bound.

    Bounds are sent as DynamoDB numbers, which have no NaN or Infinity.

    Raises:
        ValueError: If the value is not a finite decimal
    """
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"Price bound must be numeric, got {value!r}") from None
    if not number.is_finite():
        raise ValueError(f"Price bound must be a finite number, got {value!r}")
    return number


def item_to_strings(item: Dict[str, Dict[str, Any]]) -> Dict[str, str]:
    """Unwrap every attribute of a low-level DynamoDB item."""
    return {name: from_attribute_value(attribute) for name, attribute in item.items()}


# =============================================================================
# Query Building
# =============================================================================

def build_projection_expression(fields: Optional[List[str]]) -> tuple[Optional[str], Optional[Dict[str, str]]]:
    """Build ProjectionExpression with ExpressionAttributeNames.

    Attribute names go through placeholders so reserved words are safe.

    Args:
        fields: List of attribute names to project, None for all attributes

    Returns:
        Tuple of (ProjectionExpression, ExpressionAttributeNames) or (None, None)

    Example:
        >>> build_projection_expression(['productname', 'price'])
        ('#f0, #f1', {'#f0': 'productname', '#f1': 'price'})
    """
    if not fields:
        return None, None

    expression_names = {}
    projection_parts = []

    for i, field in enumerate(fields):
        attr_name = f"#f{i}"
        expression_names[attr_name] = field
        projection_parts.append(attr_name)

    projection_expression = ', '.join(projection_parts)
    return projection_expression, expression_names
