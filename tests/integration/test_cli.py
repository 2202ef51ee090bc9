"""
End-to-end runs of the command-line entry point against moto.
"""

import io

import pytest

from product_catalog.cli import build_parser, main

pytestmark = pytest.mark.integration


@pytest.fixture
def cli_env(monkeypatch, tmp_path, mock_dynamodb):
    """Environment for main(): mocked DynamoDB and no dotenv file."""
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("PRODUCT_TABLE_NAME", "cli-products")
    monkeypatch.delenv("PRODUCT_QUERY_CATEGORY", raising=False)
    monkeypatch.delenv("PRODUCT_PRICE_MIN", raising=False)
    monkeypatch.delenv("PRODUCT_PRICE_MAX", raising=False)
    monkeypatch.delenv("PRODUCT_WAIT_FOR_TABLE", raising=False)
    return ["--env-file", str(tmp_path / "absent.env")]


class TestParser:

    def test_defaults_to_query(self):
        args = build_parser().parse_args([])

        assert args.command == "query"
        assert args.no_filter is False
        assert args.wait is False

    def test_rejects_unknown_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["drop-table"])


class TestMain:

    def test_missing_region_is_fatal(self, monkeypatch, tmp_path, capsys):
        monkeypatch.delenv("AWS_REGION", raising=False)

        exit_code = main(["query", "--env-file", str(tmp_path / "absent.env")])

        assert exit_code == 1
        assert "Fatal:" in capsys.readouterr().err

    def test_inverted_price_bounds_are_fatal(self, cli_env, capsys):
        exit_code = main(["query", "--min-price", "9", "--max-price", "1", *cli_env])

        assert exit_code == 1
        assert "greater than upper bound" in capsys.readouterr().err

    @pytest.mark.parametrize("bound", ["NaN", "sNaN", "Infinity"])
    def test_non_finite_price_bound_is_fatal(self, cli_env, capsys, bound):
        exit_code = main(["query", "--min-price", bound, *cli_env])

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "Fatal:" in err
        assert "must be a finite number" in err

    def test_non_finite_price_bound_from_environment_is_fatal(self, cli_env, monkeypatch, capsys):
        monkeypatch.setenv("PRODUCT_PRICE_MAX", "Infinity")

        assert main(["query", *cli_env]) == 1
        assert "Fatal:" in capsys.readouterr().err

    def test_create_table_twice(self, cli_env, capsys):
        assert main(["create-table", *cli_env]) == 0
        assert capsys.readouterr().out == "Creating DynamoDB table was successful!\n"

        assert main(["create-table", *cli_env]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Error occurred while creating DynamoDB table.\n")
        assert "ResourceInUseException" in out or "already exists" in out

    def test_insert_then_query(self, cli_env, monkeypatch, capsys):
        assert main(["create-table", *cli_env]) == 0

        monkeypatch.setattr("sys.stdin", io.StringIO(
            "kitchen\nwhisk\n3.0\nkitchen\nsponge\n2.99\ngarden\ntrowel\n5\nq\n"
        ))
        assert main(["insert", *cli_env]) == 0
        capsys.readouterr()

        assert main(["query", *cli_env]) == 0
        out = capsys.readouterr().out

        assert out.startswith("Query was successful!\n\n")
        assert "Product name: whisk\n" in out
        assert "sponge" not in out
        assert "trowel" not in out

    def test_query_overrides(self, cli_env, monkeypatch, capsys):
        main(["create-table", *cli_env])
        monkeypatch.setattr("sys.stdin", io.StringIO("garden\ntrowel\n5\nq\n"))
        main(["insert", *cli_env])
        capsys.readouterr()

        assert main(["query", "--category", "garden", "--no-filter", *cli_env]) == 0

        assert "Product name: trowel\nPrice: 5\n" in capsys.readouterr().out

    def test_query_missing_table_still_exits_zero(self, cli_env, capsys):
        assert main(["query", *cli_env]) == 0

        assert capsys.readouterr().out.startswith("Error occurred during query operation\n")
