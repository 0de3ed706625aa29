"""
passmeter.detectors

Structural checks used by the evaluator criteria:
- character classes: ASCII uppercase, lowercase, digits, and "special"
  (any code point outside ASCII A-Z a-z 0-9, so emoji count as special)
- repeated runs: 3 or more identical consecutive characters
- common patterns: denylisted substrings, case-insensitive
"""

import re
from typing import Iterable, List

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
# \d would also match non-ASCII digits
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"[^A-Za-z0-9]")
# DOTALL so a run of newlines is a repeat as well
_REPEAT_RE = re.compile(r"(.)\1{2,}", re.DOTALL)


def has_uppercase(password: str) -> bool:
    return _UPPER_RE.search(password) is not None


def has_lowercase(password: str) -> bool:
    return _LOWER_RE.search(password) is not None


def has_digit(password: str) -> bool:
    return _DIGIT_RE.search(password) is not None


def has_special(password: str) -> bool:
    return _SPECIAL_RE.search(password) is not None


def find_repeated_runs(password: str) -> List[str]:
    """
    Return every run of 3+ identical consecutive characters, in order.
    E.g., 'aaab111' -> ['aaa', '111']
    """
    return [m.group(0) for m in _REPEAT_RE.finditer(password)]


def find_common_patterns(password: str, patterns: Iterable[str]) -> List[str]:
    """
    Return the patterns that occur anywhere in the password (case-insensitive).
    Empty patterns are skipped.
    """
    lower = password.lower()
    found = []
    for pattern in patterns:
        if pattern and pattern.lower() in lower:
            found.append(pattern)
    return found
