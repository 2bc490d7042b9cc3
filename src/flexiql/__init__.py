"""FlexiQL - A small pipeline query language for CSV tables."""

from flexiql.conditions import check_condition, evaluate_condition
from flexiql.errors import (
    ColumnNotFoundError,
    EmptyQueryError,
    FlexiQLError,
    InvalidFilterError,
    MissingFilterValueError,
    QuerySyntaxError,
    ResourceLoadError,
)
from flexiql.formatter import format_result
from flexiql.parsing import Condition, Operator, Query, QueryParser
from flexiql.query_executor import QueryExecutor, QueryResult
from flexiql.table_loader import CsvTableLoader, Table

__all__ = [
    # Main API
    "QueryParser",
    "QueryExecutor",
    "QueryResult",
    "Query",
    "Condition",
    "Operator",
    "check_condition",
    "evaluate_condition",
    "format_result",
    # Tables
    "Table",
    "CsvTableLoader",
    # Errors
    "FlexiQLError",
    "QuerySyntaxError",
    "EmptyQueryError",
    "InvalidFilterError",
    "MissingFilterValueError",
    "ColumnNotFoundError",
    "ResourceLoadError",
]

__version__ = "0.1.0"
