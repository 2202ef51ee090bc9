"""
Product Read API

Category queries with an optional server-side price filter:
- KeyConditionExpression on the partition key (category)
- FilterExpression with BETWEEN on price, applied by DynamoDB after the key match
- ProjectionExpression limiting each item to productname and price
- All pages followed through LastEvaluatedKey

The filter only shrinks what is returned. Every key-matched item is still
read (and billed), which is why ProductQueryResult reports both counts.
"""

import logging
from typing import Any, Dict

from ...core import TableGateway
from ...exceptions import ProductCatalogError
from ...models import CATEGORY, PRICE, OperationResult, ProductQuery, ProductQueryResult, ProductView
from ...utils import NUMBER, STRING, build_projection_expression, to_attribute_value

logger = logging.getLogger(__name__)


def build_query_request(query: ProductQuery) -> Dict[str, Any]:
    """
    Build boto3 client query parameters for a product query.

    Example:
        >>> build_query_request(ProductQuery(category='kitchen'))['KeyConditionExpression']
        '#pk = :category'
    """
    request = {
        'KeyConditionExpression': '#pk = :category',
        'ExpressionAttributeNames': {'#pk': CATEGORY},
        'ExpressionAttributeValues': {':category': to_attribute_value(query.category, STRING)},
    }

    if query.price_range is not None:
        request['FilterExpression'] = '#price BETWEEN :lower_bound AND :upper_bound'
        request['ExpressionAttributeNames']['#price'] = PRICE
        request['ExpressionAttributeValues'][':lower_bound'] = to_attribute_value(query.price_range.lower, NUMBER)
        request['ExpressionAttributeValues'][':upper_bound'] = to_attribute_value(query.price_range.upper, NUMBER)

    proj_expr, expr_names = build_projection_expression(query.projection)
    if proj_expr:
        request['ProjectionExpression'] = proj_expr
        request['ExpressionAttributeNames'].update(expr_names)

    return request


class ProductReadApi:
    """Read-only API for product queries."""

    def __init__(self, gateway: TableGateway):
        """Initialize read API with a shared gateway."""
        self.gateway = gateway

    def query_by_category(self, query: ProductQuery) -> OperationResult[ProductQueryResult]:
        """
        Query products in one category, optionally filtered by price.

        DynamoDB Operation: Query on the table's primary key

        Args:
            query: Category and optional inclusive price range

        Returns:
            OperationResult with the projected items and counts; on failure
            no items are returned
        """
        operation = "Query"
        request = build_query_request(query)
        result = ProductQueryResult()

        try:
            for page in self.gateway.query_pages(**request):
                result.items.extend(ProductView.from_dynamodb_item(item) for item in page.get('Items', []))
                result.count += page.get('Count', 0)
                result.scanned_count += page.get('ScannedCount', 0)
        except ProductCatalogError as e:
            logger.warning(f"{operation} failed for category {query.category}: {e}")
            return OperationResult.failure(operation, e)

        logger.debug(
            f"Query for category {query.category} returned {result.count} of "
            f"{result.scanned_count} key-matched items"
        )
        return OperationResult.success(operation, result)
