"""Evaluation of filter conditions and ordering of cell values."""

from __future__ import annotations

import math
import re

from flexiql.parsing.pipeline_parser import Condition, Operator

# Optional sign, then digits with optional fraction and exponent, or inf/nan.
# float() alone would also accept padding whitespace and "1_000".
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_number(value: str) -> float | None:
    """Parse a cell as a float, or return None if it is not numeric."""
    if _FLOAT_PATTERN.fullmatch(value) is None:
        return None
    return float(value)


def compare_values(a: str, b: str) -> int:
    """Three-way compare two cells: numerically if both are numbers, else by codepoint."""
    num_a, num_b = parse_number(a), parse_number(b)
    if num_a is not None and num_b is not None and not (math.isnan(num_a) or math.isnan(num_b)):
        return (num_a > num_b) - (num_a < num_b)
    return (a > b) - (a < b)


def check_condition(cell_value: str, operator: Operator | None, filter_value: str) -> bool:
    """Decide whether a cell satisfies ``operator filter_value``.

    ``None`` stands for an operator nobody recognized; it never matches.
    """
    if operator is Operator.EQUALS:
        return cell_value.lower() == filter_value.lower()
    if operator is Operator.CONTAINS:
        return filter_value.lower() in cell_value.lower()
    if operator is Operator.GREATER_THAN or operator is Operator.LESS_THAN:
        num_cell, num_filter = parse_number(cell_value), parse_number(filter_value)
        if num_cell is not None and num_filter is not None:
            a, b = num_cell, num_filter
        else:
            a, b = cell_value, filter_value
        return a > b if operator is Operator.GREATER_THAN else a < b
    return False


def evaluate_condition(cell_value: str, condition: Condition) -> bool:
    """Evaluate a parsed condition against one cell."""
    return check_condition(cell_value, condition.effective_operator, condition.value)
