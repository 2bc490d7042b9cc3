"""Tests for the flexiql command line."""

from pathlib import Path

import pytest

from flexiql.cli import main
from flexiql.formatter import NO_RESULTS, format_result
from flexiql.query_executor import QueryResult


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "t.csv").write_text("name,age\nAnn,30\nBob,25\n", encoding="utf-8")
    return tmp_path


class TestFormatResult:
    """Tests for the text table formatter."""

    def test_format(self):
        """Test column padding, separator and row count."""
        result = QueryResult(columns=["name", "age"], rows=[["Ann", "30"], ["Roberta", "5"]])

        assert format_result(result) == "\n".join([
            "name    | age",
            "--------|----",
            "Ann     | 30 ",
            "Roberta | 5  ",
            "",
            "(2 rows)",
        ])

    def test_single_row(self):
        """Test the singular row count."""
        result = QueryResult(columns=["a"], rows=[["x"]])

        assert format_result(result).endswith("(1 row)")

    def test_no_rows(self):
        """Test that an empty result prints the no results message."""
        assert format_result(QueryResult(columns=["a"], rows=[])) == NO_RESULTS


class TestMain:
    """Tests for the main entry point."""

    def test_query(self, data_dir: Path, capsys):
        """Test running a query prints the table and exits 0."""
        code = main(["-d", str(data_dir), "t >> age greater than 26 >> show name"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Ann" in out
        assert "Bob" not in out
        assert "(1 row)" in out

    def test_no_results(self, data_dir: Path, capsys):
        """Test that an empty result still exits 0."""
        code = main(["--data-dir", str(data_dir), "t >> name equals zed"])

        assert code == 0
        assert NO_RESULTS in capsys.readouterr().out

    def test_syntax_error(self, data_dir: Path, capsys):
        """Test that parse errors exit non-zero with a message."""
        code = main(["-d", str(data_dir), "t >> age 30"])

        assert code == 1
        assert "Invalid filter: age 30" in capsys.readouterr().err

    def test_empty_query(self, data_dir: Path, capsys):
        """Test that an empty query is an error."""
        assert main(["-d", str(data_dir), ""]) == 1
        assert "Empty query" in capsys.readouterr().err

    def test_missing_column(self, data_dir: Path, capsys):
        """Test that execution errors exit non-zero with a message."""
        code = main(["-d", str(data_dir), "t >> sort salary"])

        assert code == 1
        assert "Error: Column 'salary' not found" in capsys.readouterr().err

    def test_missing_table(self, data_dir: Path, capsys):
        """Test that a missing CSV file is reported."""
        code = main(["-d", str(data_dir), "nope"])

        assert code == 1
        assert "nope.csv" in capsys.readouterr().err

    def test_strict(self, data_dir: Path, capsys):
        """Test that --strict turns leniency into errors."""
        assert main(["-d", str(data_dir), "t >> take many"]) == 0
        capsys.readouterr()

        assert main(["-d", str(data_dir), "--strict", "t >> take many"]) == 1
        assert "Invalid limit" in capsys.readouterr().err

    def test_requires_query(self, capsys):
        """Test that the query argument is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2

    def test_byte_order_mark(self, tmp_path: Path, capsys):
        """Test querying the first column of a CSV saved with a BOM."""
        (tmp_path / "t.csv").write_bytes(b"\xef\xbb\xbfname,age\nAnn,30\n")

        code = main(["-d", str(tmp_path), "t >> show name"])

        assert code == 0
        assert "Ann" in capsys.readouterr().out
