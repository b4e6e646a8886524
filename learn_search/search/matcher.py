"""
Line-scoped pattern matcher.

Keywords are Python regular expressions. Matching is done one line at a
time without MULTILINE/DOTALL, so a match spanning two lines is never
counted.
"""

import re

from ..errors import InvalidPatternError


def compile_pattern(source: str) -> re.Pattern:
    """
    Compile a keyword pattern.

    Raises:
        InvalidPatternError: If the expression is empty or malformed
    """
    if not source:
        raise InvalidPatternError(source, "empty pattern")
    try:
        return re.compile(source)
    except re.error as e:
        raise InvalidPatternError(source, str(e)) from e


def count_matches(pattern: re.Pattern, line: str) -> int:
    """
    Count non-overlapping matches of pattern in a single line.

    Examples:
        >>> count_matches(compile_pattern("error"), "error: another error")
        2
        >>> count_matches(compile_pattern("^warn"), "no warning here")
        0
    """
    return sum(1 for _ in pattern.finditer(line))
