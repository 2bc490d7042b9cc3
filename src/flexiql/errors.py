"""Exceptions raised while parsing and executing FlexiQL queries."""

from __future__ import annotations


class FlexiQLError(Exception):
    """Base class for every error surfaced to a FlexiQL caller."""


class QuerySyntaxError(FlexiQLError, SyntaxError):
    """A query string could not be parsed."""


class EmptyQueryError(QuerySyntaxError):
    """The query has no table reference."""

    def __init__(self) -> None:
        super().__init__("Empty query")


class InvalidFilterError(QuerySyntaxError):
    """A filter stage has fewer than three words."""

    def __init__(self, stage: str) -> None:
        super().__init__(f"Invalid filter: {stage}")
        self.stage = stage


class MissingFilterValueError(QuerySyntaxError):
    """A filter stage has no value after its operator."""

    def __init__(self, stage: str) -> None:
        super().__init__(f"Missing value in filter: {stage}")
        self.stage = stage


class DuplicateStageError(QuerySyntaxError):
    """A stage kind appears more than once (strict mode only)."""

    def __init__(self, kind: str, stage: str) -> None:
        super().__init__(f"Duplicate {kind} stage: {stage}")
        self.kind = kind
        self.stage = stage


class InvalidLimitError(QuerySyntaxError):
    """A take/limit value is not a non-negative integer (strict mode only)."""

    def __init__(self, stage: str) -> None:
        super().__init__(f"Invalid limit: {stage}")
        self.stage = stage


class UnknownOperatorError(QuerySyntaxError):
    """A filter operator is not recognized (strict mode only)."""

    def __init__(self, operator: str, stage: str) -> None:
        super().__init__(f"Unknown operator '{operator}' in filter: {stage}")
        self.operator = operator
        self.stage = stage


class ColumnNotFoundError(FlexiQLError, KeyError):
    """A query references a column that the table does not have."""

    def __init__(self, column: str, stage: str) -> None:
        super().__init__(column)
        self.column = column
        self.stage = stage

    def __str__(self) -> str:
        # KeyError would repr() the column otherwise
        return f"Column '{self.column}' not found (in {self.stage} stage)"


class ResourceLoadError(FlexiQLError, OSError):
    """The table loader could not produce a table."""

    def __init__(self, resource: str, reason: str) -> None:
        super().__init__(f"{resource}: {reason}")
        self.resource = resource
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.resource}: {self.reason}"
