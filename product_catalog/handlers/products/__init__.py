"""
Product CQRS APIs

Read API:
- Category queries with a server-side price filter
- Projection to productname and price
- Pagination through LastEvaluatedKey

Write API:
- Table provisioning with PAY_PER_REQUEST billing
- Single-item writes with typed attribute values

Usage:
    gateway = TableGateway(config)
    read_api = ProductReadApi(gateway)
    write_api = ProductWriteApi(gateway)
"""

from .commands import ProductWriteApi
from .queries import ProductReadApi, build_query_request

__all__ = [
    "ProductReadApi",
    "ProductWriteApi",
    "build_query_request",
]
