"""
Console I/O for the product table operations.

Prompts read one line each from the input stream; results are printed to
the output stream. Streams default to stdin/stdout and are injectable so the
interactive loop can be driven from tests.
"""

import logging
import sys
from typing import List, Optional, TextIO

from .handlers import ProductWriteApi
from .models import OperationResult, Product, ProductQueryResult

logger = logging.getLogger(__name__)

# Entering this as the category ends the insert loop
SENTINEL = "q"
DIVIDER = "------------------"


def prompt_value(field: str, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None) -> Optional[str]:
    """Print `Enter <field>: ` and read one line.

    Returns:
        The line with trailing whitespace removed, or None at end of input
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    output_stream.write(f"Enter {field}: ")
    output_stream.flush()

    line = input_stream.readline()
    if line == "":
        return None
    return line.rstrip()


def run_insert_loop(
    write_api: ProductWriteApi,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None
) -> List[OperationResult[Product]]:
    """
    Prompt for products and write each one until the sentinel is entered.

    A failed write is printed and the loop keeps prompting. End of input
    stops the loop the same way the sentinel does.

    Returns:
        One result per attempted write, in order
    """
    output_stream = output_stream or sys.stdout
    results = []

    while True:
        category = prompt_value("category", input_stream, output_stream)
        if category is None or category == SENTINEL:
            break

        productname = prompt_value("product name", input_stream, output_stream)
        price = prompt_value("price", input_stream, output_stream)
        if productname is None or price is None:
            logger.debug("Input ended in the middle of a product, nothing written")
            break

        result = write_api.put_product(Product(category=category, productname=productname, price=price))
        if not result.ok:
            print(result.error, file=output_stream)
        results.append(result)

    logger.info(f"Insert loop finished after {len(results)} write(s)")
    return results


def render_create_result(result: OperationResult, output_stream: Optional[TextIO] = None) -> None:
    output_stream = output_stream or sys.stdout
    if result.ok:
        print("Creating DynamoDB table was successful!", file=output_stream)
    else:
        print("Error occurred while creating DynamoDB table.", file=output_stream)
        print(result.error, file=output_stream)


def render_query_result(result: OperationResult[ProductQueryResult], output_stream: Optional[TextIO] = None) -> None:
    """Print each returned product followed by a divider, or the error."""
    output_stream = output_stream or sys.stdout
    if not result.ok:
        print("Error occurred during query operation", file=output_stream)
        print(result.error, file=output_stream)
        return

    print("Query was successful!\n", file=output_stream)
    for product in result.value.items:
        print(f"Product name: {product.productname}", file=output_stream)
        print(f"Price: {product.price}", file=output_stream)
        print(DIVIDER, file=output_stream)
