"""Parsing module for the pipeline DSL."""

from flexiql.parsing.pipeline_lexer import PipelineLexer, Stage
from flexiql.parsing.pipeline_parser import (
    Condition,
    Operator,
    Query,
    QueryParser,
    StageKind,
    parse_filter,
)

__all__ = [
    "Condition",
    "Operator",
    "PipelineLexer",
    "Query",
    "QueryParser",
    "Stage",
    "StageKind",
    "parse_filter",
]
