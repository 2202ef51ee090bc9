"""
Core infrastructure components for DynamoDB operations.

- TableGateway: Thin wrapper over the boto3 DynamoDB client for one table
- Factory function for creating gateways
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
]
