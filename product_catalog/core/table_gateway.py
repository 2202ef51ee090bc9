"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around the low-level boto3
DynamoDB client for a single table. The gateway:

1. Builds the client once, lazily, and reuses it for every call
2. Exposes only the operations the product APIs need (CreateTable, PutItem, Query)
3. Translates botocore errors into product catalog exceptions

The low-level client is used rather than the Table resource because items
are sent as explicit typed attribute values. A price typed by the user goes
out as {'N': '<text>'} untouched, so DynamoDB (not the resource layer's
Decimal conversion) decides whether it is a number.

The gateway raises; the read/write APIs built on top of it turn those
exceptions into OperationResult values.
"""

import logging
from typing import Any, Dict, Iterator, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from ..config import ProductCatalogConfig
from ..exceptions import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)
from ..models import TableSchema

logger = logging.getLogger(__name__)

THROTTLING_ERROR_CODES = [
    'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
    'ThrottlingException', 'TooManyRequestsException',
]

SERVICE_ERROR_CODES = [
    'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
    'InternalFailure', 'RequestTimeoutException',
]

AUTH_ERROR_CODES = [
    'UnrecognizedClientException', 'AccessDeniedException', 'InvalidSignatureException',
    'IncompleteSignatureException', 'ExpiredTokenException', 'MissingAuthenticationTokenException',
]


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map a DynamoDB ClientError to a product catalog exception.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "CreateTable", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional resource identifier for context

    Returns:
        Appropriate domain exception
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ResourceInUseException':
        return ConflictError(f"Table already exists or is in use - {full_message}", resource_id or table_name, original_error=error)

    elif error_code == 'ResourceNotFoundException':
        return NotFoundError(f"Table not found - {full_message}", 'table', table_name, original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'LimitExceededException':
        return ValidationError(f"DynamoDB limit exceeded - {full_message}", original_error=error)

    elif error_code in THROTTLING_ERROR_CODES:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in SERVICE_ERROR_CODES:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in AUTH_ERROR_CODES:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


def map_botocore_error(error: BotoCoreError, operation: str, table_name: str) -> ConnectionError:
    """Map client-side botocore failures (credentials, endpoint, network) to ConnectionError."""
    return ConnectionError(
        f"{operation} on {table_name} could not reach DynamoDB: {error}",
        original_error=error,
        context={'error_class': type(error).__name__}
    )


class TableGateway:
    """
    Thin gateway for a single DynamoDB table.

    One instance is built at startup and handed to each API; it holds no
    state besides the lazily created client.
    """

    def __init__(self, config: ProductCatalogConfig, table_name: Optional[str] = None):
        """Initialize table gateway.

        Args:
            config: Product catalog configuration
            table_name: Table to operate on (defaults to config.table_name)
        """
        self.config = config
        self.table_name = table_name or config.table_name
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the low-level DynamoDB client."""
        if self._client is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                client_kwargs = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    client_kwargs['endpoint_url'] = self.config.endpoint_url

                client_kwargs['config'] = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )

                self._client = session.client('dynamodb', **client_kwargs)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB client: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._client

    def create_table(self, schema: TableSchema) -> Dict[str, Any]:
        """
        Create the table described by schema.

        No existence check is made first; creating a table that already
        exists raises ConflictError.

        Returns:
            The TableDescription from the CreateTable response
        """
        request = schema.to_create_table_kwargs(self.table_name)
        try:
            response = self.client.create_table(**request)
        except ClientError as e:
            raise map_dynamodb_error(e, "CreateTable", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "CreateTable", self.table_name) from e

        logger.info(f"Created table {self.table_name} with billing mode {request['BillingMode']}")
        return response.get('TableDescription', {})

    def wait_until_exists(self) -> None:
        """Block until the table reports ACTIVE."""
        try:
            self.client.get_waiter('table_exists').wait(TableName=self.table_name)
        except WaiterError as e:
            raise ConnectionError(f"Timed out waiting for table {self.table_name}: {e}", e) from e
        logger.info(f"Table {self.table_name} is active")

    def put_item(self, item: Dict[str, Dict[str, Any]]) -> None:
        """
        Put a typed item into the table, replacing any item with the same key.

        Args:
            item: Low-level item, attribute name to typed value
        """
        resource_id = self._describe_key(item)
        try:
            self.client.put_item(TableName=self.table_name, Item=item)
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, resource_id) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "PutItem", self.table_name) from e

        logger.info(f"Put item in {self.table_name}: {resource_id}")

    def query_pages(self, **kwargs) -> Iterator[Dict[str, Any]]:
        """
        Execute a Query and yield every page, following LastEvaluatedKey.

        Uses the boto3 query paginator. Errors raised while fetching any page
        are mapped to product catalog exceptions.

        Example:
            for page in gateway.query_pages(
                KeyConditionExpression='#pk = :category',
                ExpressionAttributeNames={'#pk': 'category'},
                ExpressionAttributeValues={':category': {'S': 'kitchen'}},
            ):
                handle(page['Items'])
        """
        logger.debug(f"Paginated query on {self.table_name}: {kwargs}")
        paginator = self.client.get_paginator('query')
        try:
            for page in paginator.paginate(TableName=self.table_name, **kwargs):
                yield page
        except ClientError as e:
            raise map_dynamodb_error(e, "Query", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "Query", self.table_name) from e

    @staticmethod
    def _describe_key(item: Dict[str, Dict[str, Any]]) -> Optional[str]:
        """Short category/productname identifier for log and error context."""
        parts = [
            next(iter(item[name].values()))
            for name in ('category', 'productname')
            if isinstance(item.get(name), dict) and item[name]
        ]
        return "/".join(str(part) for part in parts) or None


def create_table_gateway(config: ProductCatalogConfig, table_name: Optional[str] = None) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: Product catalog configuration
        table_name: Table name override (defaults to config.table_name)

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(config, table_name)
