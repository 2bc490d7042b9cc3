"""Plain-text rendering of query results."""

from __future__ import annotations

from flexiql.query_executor import QueryResult

NO_RESULTS = "No results found."


def format_result(result: QueryResult) -> str:
    """Render a result as an aligned text table.

    Columns are padded to their widest cell and joined with `` | ``. The
    header is followed by a dashed separator, and the table by a row count.
    """
    if not result.rows:
        return NO_RESULTS

    table = result.to_rows()
    widths = [0] * len(result.columns)
    for row in table:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    lines = []
    for row_index, row in enumerate(table):
        lines.append(" | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)))
        if row_index == 0:
            lines.append("-|-".join("-" * w for w in widths))

    count = result.row_count
    lines.append("")
    lines.append(f"({count} row{'s' if count != 1 else ''})")
    return "\n".join(lines)


def print_result(result: QueryResult) -> None:
    """Print query results in a formatted table."""
    print(format_result(result))
