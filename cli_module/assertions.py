"""
Assertion helpers used by the cli plugin.

Checks raise ``AssertionError`` so pytest reports them as ordinary test
failures. ``fail`` aborts the test through ``pytest.fail``.
"""

import re
from typing import Any, Pattern

import pytest

PATTERN_DELIMITERS = "/#~!@%;,`"

PATTERN_FLAGS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
    'u': 0,
}


def fail(message: str):
    """Abort the current test with message."""
    pytest.fail(message, pytrace=False)


def compile_pattern(regex: str) -> Pattern:
    """
    Compile a pattern written either as plain Python regex or delimited.

    Delimited patterns look like ``/^hello/`` or ``#world#im``: the first
    character is one of ``PATTERN_DELIMITERS``, the pattern ends at the last
    occurrence of the same character and any letters after it are flags.
    Bracket-style delimiters such as ``{^hello}i`` are not supported; such
    patterns are compiled as plain regex.
    """
    if len(regex) >= 2 and regex[0] in PATTERN_DELIMITERS:
        end = regex.rfind(regex[0])
        modifiers = regex[end + 1:]
        if end > 0 and all(m in PATTERN_FLAGS for m in modifiers):
            flags = 0
            for modifier in modifiers:
                flags |= PATTERN_FLAGS[modifier]
            return re.compile(regex[1:end], flags)
    return re.compile(regex)


def assert_equals(expected: Any, actual: Any, message: str = ""):
    if actual != expected:
        raise AssertionError(f"{message}\nFailed asserting that {actual!r} equals {expected!r}.".lstrip())


def assert_not_equals(expected: Any, actual: Any, message: str = ""):
    if actual == expected:
        raise AssertionError(f"{message}\nFailed asserting that {actual!r} is not equal to {expected!r}.".lstrip())


def assert_contains(needle: str, haystack: str):
    if needle not in haystack:
        raise AssertionError(f"Failed asserting that {haystack!r} contains {needle!r}.")


def assert_not_contains(needle: str, haystack: str):
    if needle in haystack:
        raise AssertionError(f"Failed asserting that {haystack!r} does not contain {needle!r}.")


def assert_matches(regex: str, text: str):
    if compile_pattern(regex).search(text) is None:
        raise AssertionError(f"Failed asserting that {text!r} matches pattern {regex!r}.")
