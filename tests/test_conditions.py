"""Tests for condition evaluation and value comparison."""

import pytest

from flexiql.conditions import check_condition, compare_values, evaluate_condition, parse_number
from flexiql.parsing.pipeline_parser import Operator, parse_filter


class TestParseNumber:
    """Tests for numeric detection of cells."""

    @pytest.mark.parametrize("text,expected", [
        ("30", 30.0),
        ("-2.5", -2.5),
        ("+4", 4.0),
        ("1e3", 1000.0),
        ("1.", 1.0),
        (".5", 0.5),
        ("inf", float("inf")),
        ("-Infinity", float("-inf")),
    ])
    def test_numbers(self, text, expected):
        """Test strings that parse as numbers."""
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", " 3", "3 ", "1_000", "1,000", "0x10", ".", "e5"])
    def test_not_numbers(self, text):
        """Test strings that are not numbers."""
        assert parse_number(text) is None

    def test_nan(self):
        """Test that nan parses (and compares as text when sorting)."""
        value = parse_number("NaN")
        assert value is not None and value != value


class TestCheckCondition:
    """Tests for the condition evaluator."""

    def test_equals_is_case_insensitive(self):
        """Test equality ignores case."""
        assert check_condition("Ann", Operator.EQUALS, "ann")
        assert not check_condition("Ann", Operator.EQUALS, "an")

    def test_equals_is_textual(self):
        """Test that equality compares text, not numbers."""
        assert not check_condition("30.0", Operator.EQUALS, "30")

    def test_contains_is_case_insensitive(self):
        """Test substring matching ignores case."""
        assert check_condition("Ann", Operator.CONTAINS, "AN")
        assert check_condition("Ann", Operator.CONTAINS, "")
        assert not check_condition("Bob", Operator.CONTAINS, "an")

    def test_greater_than_numeric(self):
        """Test numeric comparison when both sides are numbers."""
        assert check_condition("30", Operator.GREATER_THAN, "26")
        assert not check_condition("9", Operator.GREATER_THAN, "10")

    def test_greater_than_falls_back_to_text(self):
        """Test lexicographic comparison when either side is not a number."""
        assert check_condition("b", Operator.GREATER_THAN, "a")
        assert check_condition("9", Operator.GREATER_THAN, "10x")
        # case sensitive: uppercase sorts before lowercase
        assert not check_condition("B", Operator.GREATER_THAN, "a")

    def test_less_than(self):
        """Test less than is symmetric to greater than."""
        assert check_condition("9", Operator.LESS_THAN, "10")
        assert check_condition("apple", Operator.LESS_THAN, "banana")
        assert not check_condition("10", Operator.LESS_THAN, "10")

    def test_unknown_operator_never_matches(self):
        """Test that an unresolved operator is always false."""
        assert not check_condition("x", None, "x")


class TestEvaluateCondition:
    """Tests for evaluating parsed conditions."""

    @pytest.mark.parametrize("text,cell,expected", [
        ("c = ann", "Ann", True),
        ("c == ann", "Ann", True),
        ("c > 5", "6", True),
        ("c < 5", "6", False),
        ("c != 5", "6", False),
        ("c like ann", "Ann", False),
        ("c greater than 5", "6", True),
        ("c contains nn", "Ann", True),
    ])
    def test_operators(self, text, cell, expected):
        """Test symbolic and word operators end to end."""
        assert evaluate_condition(cell, parse_filter(text)) is expected


class TestCompareValues:
    """Tests for sort ordering."""

    def test_numeric(self):
        """Test numeric ordering when both are numbers."""
        assert compare_values("9", "10") < 0
        assert compare_values("10", "9") > 0
        assert compare_values("1.0", "1") == 0

    def test_text(self):
        """Test codepoint ordering otherwise."""
        assert compare_values("9", "10a") > 0
        assert compare_values("Zed", "abe") < 0
        assert compare_values("a", "a") == 0

    def test_nan_compares_as_text(self):
        """Test that NaN cells fall back to text ordering."""
        assert compare_values("nan", "1") > 0
        assert compare_values("nan", "nan") == 0
