"""Loading tables from CSV files."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from flexiql.errors import ResourceLoadError

logger = logging.getLogger(__name__)


@dataclass
class Table:
    """Headers plus equal-width rows of string cells."""

    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)

    def column_index(self) -> dict[str, int]:
        """Map each header name to its position."""
        return {name: i for i, name in enumerate(self.headers)}


class TableLoader(Protocol):
    """Anything that can turn a table reference into a Table."""

    def load(self, table: str) -> Table: ...


class CsvTableLoader:
    """Loads ``<table>.csv`` from a data directory.

    The first record is the header. Every later record must have as many
    fields as the header.
    """

    extension = ".csv"

    def __init__(self, data_dir: Path | str = ".", encoding: str = "utf-8-sig") -> None:
        self.data_dir = Path(data_dir)
        self.encoding = encoding

    def resource_name(self, table: str) -> str:
        """The file name a table reference maps to."""
        return f"{table}{self.extension}"

    def resolve(self, table: str) -> Path:
        """The full path a table reference maps to."""
        return self.data_dir / self.resource_name(table)

    def load(self, table: str) -> Table:
        path = self.resolve(table)
        resource = self.resource_name(table)
        logger.debug("Loading table %s from %s", table, path)
        try:
            with open(path, newline="", encoding=self.encoding) as f:
                return self._read(csv.reader(f), resource)
        except ResourceLoadError:
            raise
        except FileNotFoundError:
            raise ResourceLoadError(resource, "No such file or directory") from None
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ResourceLoadError(resource, str(e)) from e

    def _read(self, reader: Any, resource: str) -> Table:
        try:
            headers = next(reader)
        except StopIteration:
            raise ResourceLoadError(resource, "empty file, no header record") from None

        seen: set[str] = set()
        for name in headers:
            if name in seen:
                raise ResourceLoadError(resource, f"duplicate header '{name}'")
            seen.add(name)

        rows = []
        for row in reader:
            if not row:
                # csv yields [] for blank lines
                continue
            if len(row) != len(headers):
                raise ResourceLoadError(
                    resource,
                    f"malformed record on line {reader.line_num}: "
                    f"expected {len(headers)} fields, found {len(row)}",
                )
            rows.append(row)

        logger.debug("Loaded %d rows with columns %s", len(rows), headers)
        return Table(headers=headers, rows=rows)
