# =============================================================================
# lib/validation.py - Hint Generation Helpers
# =============================================================================
# Pure helpers for building corrective hints on failed submissions:
# - generate_hints: compare an expected JSON shape with what was received
# - calculate_similarity: normalized edit-distance score between strings
#
# No challenge uses these yet; they are meant for challenge types that
# compare free-form answers against an expected value.
# =============================================================================

from typing import Any


def json_type_name(value: Any) -> str:
    """
    Name a value's type using JSON vocabulary.

    Example:
        json_type_name({"a": 1})  # "object"
        json_type_name(3.5)       # "number"
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def generate_hints(expected: Any, actual: Any) -> list[str]:
    """
    Describe how `actual` differs structurally from `expected`.

    Reports a type mismatch, and when both are objects, keys that are
    missing from `actual` and keys that `expected` doesn't have.

    Args:
        expected: Reference value (e.g. an example payload)
        actual: Value received from the candidate

    Returns:
        List of hints, empty when the shapes agree

    Example:
        generate_hints({"a": 1, "b": 2}, {"a": 1, "c": 3})
        # ["Missing keys: b", "Unexpected keys: c"]
    """
    hints = []

    expected_type = json_type_name(expected)
    actual_type = json_type_name(actual)
    if expected_type != actual_type:
        hints.append(f"Expected type: {expected_type}, but got: {actual_type}")

    if isinstance(expected, dict) and isinstance(actual, dict):
        missing = [key for key in expected if key not in actual]
        extra = [key for key in actual if key not in expected]

        if missing:
            hints.append(f"Missing keys: {', '.join(map(str, missing))}")
        if extra:
            hints.append(f"Unexpected keys: {', '.join(map(str, extra))}")

    return hints


def levenshtein_distance(a: str, b: str) -> int:
    """
    Edit distance between two strings.

    Fills a (len(a)+1) x (len(b)+1) table where each insert, delete or
    substitute costs 1.
    """
    rows, cols = len(a) + 1, len(b) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitute
                    table[i][j - 1],      # insert
                    table[i - 1][j],      # delete
                )

    return table[-1][-1]


def calculate_similarity(a: str, b: str) -> float:
    """
    Similarity between two strings, from 0.0 (nothing shared) to 1.0 (equal).

    Computed as 1 - distance / length of the longer string. Two empty
    strings are identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest
