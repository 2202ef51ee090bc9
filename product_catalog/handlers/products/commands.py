"""
Product Write API

Write operations against the product table:
- create_table: provision the table (PAY_PER_REQUEST, category/productname key)
- put_product: write a single product item

Every method returns an OperationResult. Failures reported by DynamoDB are
caught here, logged, and returned; they never propagate to the caller.
"""

import logging
from typing import Any, Dict, Optional

from ...core import TableGateway
from ...exceptions import ProductCatalogError
from ...models import PRODUCT_TABLE_SCHEMA, OperationResult, Product, TableSchema

logger = logging.getLogger(__name__)


class ProductWriteApi:
    """
    Write-only API for the product table.

    No retries and no rollback: each call is one request, reported as
    success or failure.
    """

    def __init__(self, gateway: TableGateway, schema: Optional[TableSchema] = None):
        """Initialize write API with a shared gateway."""
        self.gateway = gateway
        self.schema = schema or PRODUCT_TABLE_SCHEMA

    def create_table(self, wait: bool = False) -> OperationResult[Dict[str, Any]]:
        """
        Create the product table.

        DynamoDB Operation: CreateTable
        Key Schema: category (HASH), productname (RANGE), both strings

        The table is not checked for existence first. Running this against an
        existing table yields a failed result carrying ResourceInUseException.

        Args:
            wait: Block until the new table is ACTIVE

        Returns:
            OperationResult with the table description on success
        """
        operation = "CreateTable"
        try:
            description = self.gateway.create_table(self.schema)
            if wait:
                self.gateway.wait_until_exists()
        except ProductCatalogError as e:
            logger.warning(f"{operation} failed for {self.gateway.table_name}: {e}")
            return OperationResult.failure(operation, e)

        return OperationResult.success(operation, description)

    def put_product(self, product: Product) -> OperationResult[Product]:
        """
        Write one product.

        DynamoDB Operation: PutItem (unconditional, overwrites an existing key)

        The price is sent as a DynamoDB number without local parsing, so a
        non-numeric price comes back as a failed result from DynamoDB.

        Returns:
            OperationResult with the written product on success
        """
        operation = "PutItem"
        try:
            self.gateway.put_item(product.to_dynamodb_item())
        except ProductCatalogError as e:
            logger.warning(f"{operation} failed for {product.category}/{product.productname}: {e}")
            return OperationResult.failure(operation, e)

        return OperationResult.success(operation, product)
