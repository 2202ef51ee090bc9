"""
Test configuration and fixtures for the product catalog.

Provides a moto-backed DynamoDB, a gateway bound to it, and the read/write
APIs built on that gateway.
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import product_catalog
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from product_catalog import (
    PRODUCT_TABLE_SCHEMA,
    Product,
    ProductCatalogConfig,
    ProductReadApi,
    ProductWriteApi,
    TableGateway,
)

TEST_REGION = "us-east-1"
TEST_TABLE = "test-products"


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)


@pytest.fixture
def mock_config():
    """Configuration for tests, no endpoint override so moto intercepts."""
    return ProductCatalogConfig(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name=TEST_REGION,
        endpoint_url=None,
        table_name=TEST_TABLE,
        query_category="kitchen",
        price_lower_bound="3.0",
        price_upper_bound="6",
    )


@pytest.fixture
def mock_dynamodb(aws_credentials):
    """In-process DynamoDB client."""
    with mock_aws():
        yield boto3.client("dynamodb", region_name=TEST_REGION)


@pytest.fixture
def gateway(mock_config, mock_dynamodb):
    """Gateway bound to the mocked DynamoDB."""
    return TableGateway(mock_config)


@pytest.fixture
def product_table(gateway):
    """Create the product table and return its name."""
    gateway.create_table(PRODUCT_TABLE_SCHEMA)
    return gateway.table_name


@pytest.fixture
def write_api(gateway):
    return ProductWriteApi(gateway)


@pytest.fixture
def read_api(gateway):
    return ProductReadApi(gateway)


@pytest.fixture
def sample_products():
    """Kitchen products around the [3.0, 6] boundaries plus one other category."""
    return [
        Product(category="kitchen", productname="sponge", price="2.99"),
        Product(category="kitchen", productname="whisk", price="3.0"),
        Product(category="kitchen", productname="kettle", price="4.5"),
        Product(category="kitchen", productname="ladle", price="6"),
        Product(category="kitchen", productname="toaster", price="6.01"),
        Product(category="garden", productname="trowel", price="4.5"),
    ]


@pytest.fixture
def seeded_table(product_table, write_api, sample_products):
    """Product table populated with sample_products."""
    for product in sample_products:
        assert write_api.put_product(product).ok
    return product_table
