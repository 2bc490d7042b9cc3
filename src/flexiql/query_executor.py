"""Query executor for FlexiQL pipelines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key

from flexiql.conditions import compare_values, evaluate_condition
from flexiql.errors import ColumnNotFoundError
from flexiql.parsing.pipeline_parser import Condition, Query, QueryParser
from flexiql.table_loader import CsvTableLoader, TableLoader

logger = logging.getLogger(__name__)

Row = list[str]


@dataclass
class QueryResult:
    """Result of a query execution."""

    columns: list[str]
    rows: list[Row] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        """Number of data rows (the header is not a row)."""
        return len(self.rows)

    def to_rows(self) -> list[Row]:
        """The result as a single list with the header row first."""
        return [list(self.columns)] + [list(row) for row in self.rows]


class QueryExecutor:
    """Executes parsed queries against tables from a loader.

    Stages always run in the same order: filter, sort, limit, projection.
    Each stage builds a new row list; loaded tables are never modified.
    """

    def __init__(self, loader: TableLoader | None = None) -> None:
        self.loader = loader if loader is not None else CsvTableLoader()

    def execute(self, query: Query) -> QueryResult:
        """Execute a query and return results."""
        table = self.loader.load(query.table)
        header_map = table.column_index()
        rows = table.rows

        if query.filter is not None:
            rows = self._apply_filter(rows, query.filter, header_map)

        if query.sort_column is not None:
            rows = self._apply_sort(rows, query.sort_column, query.sort_desc, header_map)

        if query.limit is not None:
            rows = rows[:query.limit]

        if query.columns is not None:
            return self._select_columns(rows, query.columns, header_map)
        return QueryResult(columns=list(table.headers), rows=list(rows))

    def execute_text(self, text: str, parser: QueryParser | None = None) -> QueryResult:
        """Parse a pipeline string and execute it."""
        parser = parser if parser is not None else QueryParser()
        return self.execute(parser.parse(text))

    @staticmethod
    def _lookup(header_map: dict[str, int], column: str, stage: str) -> int:
        try:
            return header_map[column]
        except KeyError:
            raise ColumnNotFoundError(column, stage) from None

    def _apply_filter(
        self, rows: list[Row], condition: Condition, header_map: dict[str, int]
    ) -> list[Row]:
        """Keep the rows whose cell satisfies the condition, in their original order."""
        index = self._lookup(header_map, condition.column, "filter")
        filtered = [
            row for row in rows
            if index < len(row) and evaluate_condition(row[index], condition)
        ]
        logger.debug("Filter %s kept %d of %d rows", condition, len(filtered), len(rows))
        return filtered

    def _apply_sort(
        self, rows: list[Row], sort_column: str, descending: bool, header_map: dict[str, int]
    ) -> list[Row]:
        """Stable sort on one column.

        Descending negates the comparison instead of reversing the output,
        so rows with equal keys keep their original order either way.
        """
        index = self._lookup(header_map, sort_column, "sort")
        sign = -1 if descending else 1

        def compare(a: Row, b: Row) -> int:
            val_a = a[index] if index < len(a) else ""
            val_b = b[index] if index < len(b) else ""
            return sign * compare_values(val_a, val_b)

        return sorted(rows, key=cmp_to_key(compare))

    def _select_columns(
        self, rows: list[Row], columns: list[str], header_map: dict[str, int]
    ) -> QueryResult:
        """Project rows onto the requested columns, in the requested order."""
        indices = [self._lookup(header_map, column, "show") for column in columns]
        selected = [
            [row[i] if i < len(row) else "" for i in indices]
            for row in rows
        ]
        return QueryResult(columns=list(columns), rows=selected)
