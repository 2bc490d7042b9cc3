"""Command-line entry point for running a FlexiQL pipeline."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from flexiql.errors import FlexiQLError, QuerySyntaxError
from flexiql.formatter import print_result
from flexiql.parsing.pipeline_parser import QueryParser
from flexiql.query_executor import QueryExecutor
from flexiql.table_loader import CsvTableLoader


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        prog="flexiql",
        description="A simple CSV query language",
        epilog='Example: flexiql "employees >> salary greater than 50000 >> sort salary desc >> show name, salary"',
    )
    arg_parser.add_argument(
        "query",
        help="Pipeline to run: <table> >> <stage> >> ...",
    )
    arg_parser.add_argument(
        "-d", "--data-dir",
        type=Path,
        default=Path("."),
        help="Directory holding <table>.csv files (default: current directory)",
    )
    arg_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unreadable limits, unknown operators and repeated stages",
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each execution step",
    )

    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    try:
        query = QueryParser(strict=args.strict).parse(args.query)
        result = QueryExecutor(CsvTableLoader(args.data_dir)).execute(query)
    except QuerySyntaxError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        return 1
    except FlexiQLError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
