import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from ..exceptions import ConfigurationError
from ..utils import parse_price_bound

logger = logging.getLogger(__name__)

# Local development overrides live in .envlocal; .env is the fallback
DEFAULT_ENV_FILE = ".envlocal"
FALLBACK_ENV_FILE = ".env"

DEFAULT_TABLE_NAME = "stratusgrid-products"
DEFAULT_QUERY_CATEGORY = "kitchen"
DEFAULT_PRICE_LOWER_BOUND = "3.0"
DEFAULT_PRICE_UPPER_BOUND = "6"


class ProductCatalogConfig(BaseModel):
    """Configuration for the DynamoDB connection and the product table operations."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID (None defers to the boto3 credential chain)"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_REGION"),
        validate_default=True,
        description="AWS region name (required)"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    table_name: str = Field(
        default_factory=lambda: os.getenv("PRODUCT_TABLE_NAME", DEFAULT_TABLE_NAME),
        min_length=3,
        max_length=255,
        description="Name of the product table"
    )

    # Query parameters
    query_category: str = Field(
        default_factory=lambda: os.getenv("PRODUCT_QUERY_CATEGORY", DEFAULT_QUERY_CATEGORY),
        min_length=1,
        description="Partition key value used by the query command"
    )

    price_lower_bound: str = Field(
        default_factory=lambda: os.getenv("PRODUCT_PRICE_MIN", DEFAULT_PRICE_LOWER_BOUND),
        validate_default=True,
        description="Inclusive lower price bound of the query filter"
    )

    price_upper_bound: str = Field(
        default_factory=lambda: os.getenv("PRODUCT_PRICE_MAX", DEFAULT_PRICE_UPPER_BOUND),
        validate_default=True,
        description="Inclusive upper price bound of the query filter"
    )

    wait_for_table: bool = Field(
        default_factory=lambda: os.getenv("PRODUCT_WAIT_FOR_TABLE", "false").lower() == "true",
        description="Block until a newly created table is ACTIVE"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of botocore retry attempts for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS_REGION must be set in the environment or a .envlocal file")
        return v

    @field_validator('price_lower_bound', 'price_upper_bound')
    @classmethod
    def validate_price_bound(cls, v):
        """Price bounds are sent as DynamoDB numbers, so they must be finite decimals."""
        parse_price_bound(v)
        return v

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'ProductCatalogConfig':
        """Create configuration from a dotenv file and environment variables.

        Variables already present in the environment win over the file.

        Args:
            env_file: Dotenv file to load (defaults to .envlocal, then .env)

        Returns:
            ProductCatalogConfig instance

        Raises:
            ConfigurationError: If a required setting is missing or invalid
        """
        if env_file:
            loaded = load_dotenv(env_file)
        else:
            loaded = load_dotenv(DEFAULT_ENV_FILE) or load_dotenv(FALLBACK_ENV_FILE)
        if not loaded:
            logger.debug("No dotenv file loaded, using process environment only")

        try:
            return cls()
        except PydanticValidationError as e:
            first = e.errors()[0]
            setting = ".".join(str(part) for part in first.get('loc', ()))
            raise ConfigurationError(f"Invalid configuration: {first['msg']}", setting or None, e) from e

    @classmethod
    def for_local_development(cls) -> 'ProductCatalogConfig':
        """Create configuration for DynamoDB Local.

        Returns:
            ProductCatalogConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
