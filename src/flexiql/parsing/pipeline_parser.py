"""Parser for FlexiQL pipelines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from flexiql.errors import (
    DuplicateStageError,
    EmptyQueryError,
    InvalidFilterError,
    InvalidLimitError,
    MissingFilterValueError,
    UnknownOperatorError,
)
from flexiql.parsing.pipeline_lexer import PipelineLexer, Stage

logger = logging.getLogger(__name__)


class StageKind(Enum):
    """What a pipeline stage does."""

    SHOW = "show"
    SORT = "sort"
    LIMIT = "limit"
    FILTER = "filter"


class Operator(Enum):
    """A filter operator."""

    EQUALS = "equals"
    GREATER_THAN = "greater than"
    LESS_THAN = "less than"
    CONTAINS = "contains"
    RAW = "raw"  # Unrecognized word, kept verbatim in Condition.raw_operator


# Symbolic spellings the evaluator understands for a RAW operator
SYMBOLIC_OPERATORS: dict[str, Operator] = {
    "=": Operator.EQUALS,
    "==": Operator.EQUALS,
    ">": Operator.GREATER_THAN,
    "<": Operator.LESS_THAN,
}

_STAGE_KEYWORDS: dict[str, StageKind] = {
    "show": StageKind.SHOW,
    "sort": StageKind.SORT,
    "take": StageKind.LIMIT,
    "limit": StageKind.LIMIT,
}

_LIMIT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class Condition:
    """A single column-operator-value filter."""

    column: str
    operator: Operator
    value: str
    raw_operator: str = ""

    @property
    def effective_operator(self) -> Operator | None:
        """The operator the evaluator applies, or None if it never matches."""
        if self.operator is not Operator.RAW:
            return self.operator
        return SYMBOLIC_OPERATORS.get(self.raw_operator)


@dataclass
class Query:
    """A parsed pipeline."""

    table: str
    filter: Condition | None = None
    columns: list[str] | None = None  # Projection, in output order
    sort_column: str | None = None
    sort_desc: bool = False
    limit: int | None = None


def classify_stage(stage: Stage) -> StageKind:
    """Classify a non-table stage by its first word."""
    return _STAGE_KEYWORDS.get(stage.keyword, StageKind.FILTER)


def parse_filter(text: str) -> Condition:
    """Parse a filter stage like ``salary greater than 50000``.

    Raises:
        InvalidFilterError: if the stage has fewer than three words.
        MissingFilterValueError: if nothing follows the operator.
    """
    words = text.split()
    if len(words) < 3:
        raise InvalidFilterError(text)

    column = words[0]
    if len(words) >= 4 and words[1] == "greater" and words[2] == "than":
        operator, raw, value_start = Operator.GREATER_THAN, "greater than", 3
    elif len(words) >= 4 and words[1] == "less" and words[2] == "than":
        operator, raw, value_start = Operator.LESS_THAN, "less than", 3
    elif words[1] == "equals":
        operator, raw, value_start = Operator.EQUALS, words[1], 2
    elif words[1] == "contains":
        operator, raw, value_start = Operator.CONTAINS, words[1], 2
    else:
        operator, raw, value_start = Operator.RAW, words[1], 2

    if len(words) <= value_start:
        raise MissingFilterValueError(text)

    return Condition(
        column=column,
        operator=operator,
        value=" ".join(words[value_start:]),
        raw_operator=raw,
    )


def parse_limit(value: str) -> int | None:
    """Parse a take/limit count, or None if it is not a non-negative integer."""
    if _LIMIT_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


class QueryParser:
    """Parser for FlexiQL pipelines.

    By default the parser is lenient: a limit it cannot read is dropped, an
    operator it does not know is kept and simply never matches, and a
    repeated stage kind replaces the earlier one. Each of these logs a
    warning. With ``strict=True`` they raise instead.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.lexer = PipelineLexer()
        self.lexer.build()

    def parse(self, data: str) -> Query:
        """Parse a pipeline string."""
        stages = self.lexer.split_stages(data)
        table_stage = stages[0]
        if not table_stage.text:
            raise EmptyQueryError()

        query = Query(table=table_stage.text)
        seen: set[StageKind] = set()
        for stage in stages[1:]:
            if not stage.words:
                continue
            kind = classify_stage(stage)
            if kind in (StageKind.SORT, StageKind.LIMIT) and len(stage.words) < 2:
                logger.warning("Ignoring %s stage without an argument: '%s'", kind.value, stage.text)
                continue
            if kind in seen:
                self._lenient(DuplicateStageError(kind.value, stage.text),
                              "Stage '%s' replaces an earlier %s stage", stage.text, kind.value)
            seen.add(kind)
            self._apply_stage(query, kind, stage)
        return query

    def _apply_stage(self, query: Query, kind: StageKind, stage: Stage) -> None:
        words = stage.words
        if kind is StageKind.SHOW:
            # Everything after the keyword, not just the remaining words
            remainder = stage.text[len(words[0]):]
            query.columns = [column.strip() for column in remainder.split(",")]
        elif kind is StageKind.SORT:
            query.sort_column = words[1]
            query.sort_desc = len(words) >= 3 and words[2].lower() == "desc"
        elif kind is StageKind.LIMIT:
            query.limit = parse_limit(words[1])
            if query.limit is None:
                self._lenient(InvalidLimitError(stage.text),
                              "Ignoring unreadable limit '%s'", words[1])
        else:
            query.filter = parse_filter(stage.text)
            if query.filter.effective_operator is None:
                self._lenient(UnknownOperatorError(query.filter.raw_operator, stage.text),
                              "Unknown operator '%s'; filter '%s' matches no rows",
                              query.filter.raw_operator, stage.text)

    def _lenient(self, error: Exception, message: str, *args: object) -> None:
        """Raise ``error`` in strict mode, otherwise log a warning."""
        if self.strict:
            raise error
        logger.warning(message, *args)
