"""
Product Models

Write side:
- Product: a full item as entered by the user, serialized to typed attributes

Read side:
- ProductQuery / PriceRange: key condition value and optional price filter
- ProductView: the projected (productname, price) pair returned by a query
- ProductQueryResult: matched items plus the read/returned counts
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..exceptions import ValidationError
from ..utils import NUMBER, STRING, item_to_strings, parse_price_bound, to_attribute_value

logger = logging.getLogger(__name__)

# Attribute names of the product table
CATEGORY = 'category'
PRODUCT_NAME = 'productname'
PRICE = 'price'


class Product(BaseModel):
    """
    A product item as written by the interactive writer.

    Values are kept exactly as typed. In particular price is not parsed:
    it is sent as a DynamoDB number and DynamoDB decides whether it is one.
    """

    category: str = Field(..., description="Partition key")
    productname: str = Field(..., description="Sort key")
    price: str = Field(..., description="Price in DynamoDB number text form")

    def key(self) -> Dict[str, Dict[str, str]]:
        """Primary key of this product as typed attribute values."""
        return {
            CATEGORY: to_attribute_value(self.category, STRING),
            PRODUCT_NAME: to_attribute_value(self.productname, STRING),
        }

    def to_dynamodb_item(self) -> Dict[str, Dict[str, str]]:
        """
        Convert to a low-level DynamoDB item.

        Example:
            >>> Product(category='kitchen', productname='kettle', price='4.5').to_dynamodb_item()
            {'category': {'S': 'kitchen'}, 'productname': {'S': 'kettle'}, 'price': {'N': '4.5'}}
        """
        item = self.key()
        item[PRICE] = to_attribute_value(self.price, NUMBER)
        return item


class ProductView(BaseModel):
    """
    Read model for a queried product, limited to the projected attributes.

    Extra attributes are rejected so that a response carrying more than the
    projection asked for fails loudly instead of being silently ignored.
    """

    productname: str
    price: str

    model_config = ConfigDict(extra='forbid')

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]) -> 'ProductView':
        """
        Create a view from a low-level DynamoDB item.

        Raises:
            ValidationError: If the item does not match the projection
        """
        try:
            return cls(**item_to_strings(item))
        except Exception as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            raise ValidationError(f"Failed to convert DynamoDB item to {cls.__name__}: {e}", original_error=e) from e


class PriceRange(BaseModel):
    """Inclusive numeric price range, bounds kept in DynamoDB number text form."""

    lower: str
    upper: str

    @field_validator('lower', 'upper')
    @classmethod
    def validate_numeric(cls, v):
        parse_price_bound(v)
        return v

    @model_validator(mode='after')
    def validate_order(self):
        # DynamoDB rejects BETWEEN with lower > upper
        if parse_price_bound(self.lower) > parse_price_bound(self.upper):
            raise ValueError(f"Lower bound {self.lower} is greater than upper bound {self.upper}")
        return self


class ProductQuery(BaseModel):
    """Parameters of a category query with an optional price filter."""

    category: str = Field(..., min_length=1, description="Partition key value to match")
    price_range: Optional[PriceRange] = Field(None, description="Filter applied after the key match")
    projection: List[str] = Field(
        default_factory=lambda: [PRODUCT_NAME, PRICE],
        description="Attributes returned for each item"
    )


class ProductQueryResult(BaseModel):
    """
    Outcome of a category query.

    scanned_count is the number of items matched by the key condition and read;
    count is the number left after the filter. The filter never lowers
    scanned_count.
    """

    items: List[ProductView] = Field(default_factory=list)
    count: int = 0
    scanned_count: int = 0
