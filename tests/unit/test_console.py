import io
from unittest.mock import Mock

import pytest

from product_catalog.console import (
    DIVIDER,
    prompt_value,
    render_create_result,
    render_query_result,
    run_insert_loop,
)
from product_catalog.exceptions import ConflictError, NotFoundError, ValidationError
from product_catalog.handlers import ProductWriteApi
from product_catalog.models import OperationResult, Product, ProductQueryResult, ProductView


@pytest.fixture
def write_api():
    api = Mock(spec=ProductWriteApi)
    api.put_product.side_effect = lambda product: OperationResult.success("PutItem", product)
    return api


class TestPromptValue:

    def test_prompt_and_strip(self):
        output = io.StringIO()

        value = prompt_value("category", io.StringIO("kitchen\n"), output)

        assert value == "kitchen"
        assert output.getvalue() == "Enter category: "

    def test_trailing_whitespace_removed(self):
        assert prompt_value("price", io.StringIO("4.50  \r\n"), io.StringIO()) == "4.50"

    def test_end_of_input(self):
        assert prompt_value("category", io.StringIO(""), io.StringIO()) is None

    def test_empty_line_is_a_value(self):
        assert prompt_value("category", io.StringIO("\n"), io.StringIO()) == ""


class TestInsertLoop:

    def test_sentinel_stops_without_writing(self, write_api):
        results = run_insert_loop(write_api, io.StringIO("q\n"), io.StringIO())

        assert results == []
        write_api.put_product.assert_not_called()

    def test_writes_until_sentinel(self, write_api):
        output = io.StringIO()
        stdin = io.StringIO("kitchen\nkettle\n4.5\ngarden\ntrowel\n12\nq\n")

        results = run_insert_loop(write_api, stdin, output)

        assert [r.value for r in results] == [
            Product(category="kitchen", productname="kettle", price="4.5"),
            Product(category="garden", productname="trowel", price="12"),
        ]
        assert output.getvalue() == (
            "Enter category: Enter product name: Enter price: "
            "Enter category: Enter product name: Enter price: "
            "Enter category: "
        )

    def test_sentinel_only_applies_to_category(self, write_api):
        results = run_insert_loop(write_api, io.StringIO("kitchen\nq\n1\nq\n"), io.StringIO())

        assert [r.value.productname for r in results] == ["q"]

    def test_failed_write_keeps_prompting(self, write_api):
        failure = OperationResult.failure("PutItem", ValidationError("cannot be converted into a number"))
        success = OperationResult.success("PutItem")
        write_api.put_product.side_effect = [failure, success]
        output = io.StringIO()

        results = run_insert_loop(write_api, io.StringIO("kitchen\nkettle\ncheap\nkitchen\nkettle\n4\nq\n"), output)

        assert [r.ok for r in results] == [False, True]
        assert "cannot be converted into a number\n" in output.getvalue()
        assert write_api.put_product.call_count == 2

    def test_end_of_input_stops(self, write_api):
        results = run_insert_loop(write_api, io.StringIO("kitchen\nkettle\n4\n"), io.StringIO())

        assert len(results) == 1

    def test_end_of_input_mid_product_writes_nothing(self, write_api):
        results = run_insert_loop(write_api, io.StringIO("kitchen\nkettle\n"), io.StringIO())

        assert results == []
        write_api.put_product.assert_not_called()


class TestRendering:

    def test_create_success(self):
        output = io.StringIO()

        render_create_result(OperationResult.success("CreateTable", {}), output)

        assert output.getvalue() == "Creating DynamoDB table was successful!\n"

    def test_create_failure(self):
        output = io.StringIO()

        render_create_result(OperationResult.failure("CreateTable", ConflictError("Table already exists")), output)

        assert output.getvalue() == "Error occurred while creating DynamoDB table.\nTable already exists\n"

    def test_query_success(self):
        output = io.StringIO()
        value = ProductQueryResult(
            items=[ProductView(productname="whisk", price="3.0"), ProductView(productname="ladle", price="6")],
            count=2,
            scanned_count=4,
        )

        render_query_result(OperationResult.success("Query", value), output)

        assert output.getvalue() == (
            "Query was successful!\n\n"
            "Product name: whisk\n"
            "Price: 3.0\n"
            f"{DIVIDER}\n"
            "Product name: ladle\n"
            "Price: 6\n"
            f"{DIVIDER}\n"
        )

    def test_query_failure_prints_no_items(self):
        output = io.StringIO()

        render_query_result(OperationResult.failure("Query", NotFoundError("Table not found")), output)

        assert output.getvalue() == "Error occurred during query operation\nTable not found\n"
        assert "Product name" not in output.getvalue()
