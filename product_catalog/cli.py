"""
Product table command-line interface.

Usage:
    product-catalog [command] [options]

Commands:
    create-table - Create the product table (PAY_PER_REQUEST billing)
    insert       - Prompt for products and write them until 'q' is entered
    query        - List products in a category within a price range (default)

Configuration comes from a .envlocal (or .env) file and the environment.
AWS_REGION is required; credentials follow the standard boto3 chain.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from .config import ProductCatalogConfig
from .console import render_create_result, render_query_result, run_insert_loop
from .core import create_table_gateway
from .exceptions import ConfigurationError
from .handlers import ProductReadApi, ProductWriteApi
from .models import PriceRange, ProductQuery

logger = logging.getLogger(__name__)

COMMANDS = ["create-table", "insert", "query"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-catalog",
        description="Provision, populate and query a DynamoDB product table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "command",
        nargs="?",
        default="query",
        choices=COMMANDS,
        help="Operation to run (default: query)"
    )

    parser.add_argument(
        "--table-name",
        help="Table name (overrides PRODUCT_TABLE_NAME)"
    )

    parser.add_argument(
        "--category",
        help="Category to query (overrides PRODUCT_QUERY_CATEGORY)"
    )

    parser.add_argument(
        "--min-price",
        help="Inclusive lower price bound (overrides PRODUCT_PRICE_MIN)"
    )

    parser.add_argument(
        "--max-price",
        help="Inclusive upper price bound (overrides PRODUCT_PRICE_MAX)"
    )

    parser.add_argument(
        "--no-filter",
        action="store_true",
        help="Query the whole category without the price filter"
    )

    parser.add_argument(
        "--wait",
        action="store_true",
        help="After create-table, wait until the table is ACTIVE"
    )

    parser.add_argument(
        "--env-file",
        help="Dotenv file to load (default: .envlocal, then .env)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )

    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format=LOG_FORMAT)


def load_config(args: argparse.Namespace) -> ProductCatalogConfig:
    """
    Load configuration and apply command-line overrides.

    Raises:
        ConfigurationError: If required settings are missing or invalid
    """
    config = ProductCatalogConfig.from_env(args.env_file)

    overrides = {
        'table_name': args.table_name,
        'query_category': args.category,
        'price_lower_bound': args.min_price,
        'price_upper_bound': args.max_price,
    }
    for setting, value in overrides.items():
        if value is None:
            continue
        try:
            setattr(config, setting, value)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid value for {setting}: {e.errors()[0]['msg']}", setting, e) from e

    return config


def build_query(config: ProductCatalogConfig, apply_filter: bool = True) -> ProductQuery:
    """
    Build the product query from configuration.

    Raises:
        ConfigurationError: If the price bounds do not form a valid range
    """
    try:
        price_range = None
        if apply_filter:
            price_range = PriceRange(lower=config.price_lower_bound, upper=config.price_upper_bound)
        return ProductQuery(category=config.query_category, price_range=price_range)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid query configuration: {e.errors()[0]['msg']}", original_error=e) from e


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one product table operation.

    Operation failures are printed and still exit 0. Only a configuration
    failure aborts, with exit code 1.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args)
        query = build_query(config, not args.no_filter) if args.command == "query" else None
    except ConfigurationError as e:
        logger.error(f"Configuration failed: {e}")
        print(f"Fatal: {e}", file=sys.stderr)
        return 1

    if config.enable_debug_logging:
        logging.getLogger().setLevel(logging.DEBUG)

    gateway = create_table_gateway(config)
    logger.debug(f"Running {args.command} against {gateway.table_name} in {config.region_name}")

    if args.command == "create-table":
        result = ProductWriteApi(gateway).create_table(wait=args.wait or config.wait_for_table)
        render_create_result(result)
    elif args.command == "insert":
        run_insert_loop(ProductWriteApi(gateway))
    else:
        render_query_result(ProductReadApi(gateway).query_by_category(query))

    return 0
