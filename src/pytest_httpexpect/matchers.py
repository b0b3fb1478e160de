"""Composable predicates over header values.

Every expectation accepted by the assertion engine goes through
:func:`as_matcher`, so callers can pass a literal, ``None``, a plain callable,
one of the matchers below, or any third-party matcher object that exposes
``matches()`` and ``describe_to()`` (PyHamcrest matchers qualify).
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any


def describe_value(value: Any) -> str:
    return repr(value)


class Matcher(ABC):
    @abstractmethod
    def matches(self, actual: Any) -> bool: ...

    @abstractmethod
    def describe(self) -> str: ...

    def describe_mismatch(self, actual: Any) -> str:
        return f"was {describe_value(actual)}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class IsEqual(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def matches(self, actual: Any) -> bool:
        return actual == self.expected

    def describe(self) -> str:
        return describe_value(self.expected)


class IsNone(Matcher):
    def matches(self, actual: Any) -> bool:
        return actual is None

    def describe(self) -> str:
        return "None"


class IsNot(Matcher):
    def __init__(self, matcher: Matcher):
        self.matcher = matcher

    def matches(self, actual: Any) -> bool:
        return not self.matcher.matches(actual)

    def describe(self) -> str:
        return f"not {self.matcher.describe()}"


class _StringMatcher(Matcher):
    relation = ""

    def __init__(self, substring: str):
        self.substring = substring

    def matches(self, actual: Any) -> bool:
        return isinstance(actual, str) and self._matches_string(actual)

    def _matches_string(self, actual: str) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        return f"a string {self.relation} {describe_value(self.substring)}"


class StringContains(_StringMatcher):
    relation = "containing"

    def _matches_string(self, actual: str) -> bool:
        return self.substring in actual


class StringStartsWith(_StringMatcher):
    relation = "starting with"

    def _matches_string(self, actual: str) -> bool:
        return actual.startswith(self.substring)


class StringEndsWith(_StringMatcher):
    relation = "ending with"

    def _matches_string(self, actual: str) -> bool:
        return actual.endswith(self.substring)


class StringMatchesPattern(Matcher):
    def __init__(self, pattern: str | re.Pattern[str]):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def matches(self, actual: Any) -> bool:
        return isinstance(actual, str) and self.pattern.search(actual) is not None

    def describe(self) -> str:
        return f"a string matching {describe_value(self.pattern.pattern)}"


class AllOf(Matcher):
    def __init__(self, *matchers: Matcher):
        self.matchers = matchers

    def matches(self, actual: Any) -> bool:
        return all(matcher.matches(actual) for matcher in self.matchers)

    def describe(self) -> str:
        return "(" + " and ".join(matcher.describe() for matcher in self.matchers) + ")"


class AnyOf(Matcher):
    def __init__(self, *matchers: Matcher):
        self.matchers = matchers

    def matches(self, actual: Any) -> bool:
        return any(matcher.matches(actual) for matcher in self.matchers)

    def describe(self) -> str:
        return "(" + " or ".join(matcher.describe() for matcher in self.matchers) + ")"


class HasItems(Matcher):
    """Every sub-matcher is satisfied by at least one item."""

    def __init__(self, *matchers: Matcher):
        self.matchers = matchers

    def matches(self, actual: Any) -> bool:
        if actual is None or isinstance(actual, str) or not isinstance(actual, Iterable):
            return False
        items = list(actual)
        return all(any(matcher.matches(item) for item in items) for matcher in self.matchers)

    def describe(self) -> str:
        return "a sequence containing " + ", ".join(matcher.describe() for matcher in self.matchers)


class ContainsExactly(Matcher):
    """Items match the sub-matchers one to one, in order."""

    def __init__(self, *matchers: Matcher):
        self.matchers = matchers

    def matches(self, actual: Any) -> bool:
        if actual is None or isinstance(actual, str) or not isinstance(actual, Iterable):
            return False
        items = list(actual)
        if len(items) != len(self.matchers):
            return False
        return all(matcher.matches(item) for matcher, item in zip(self.matchers, items, strict=True))

    def describe(self) -> str:
        return "[" + ", ".join(matcher.describe() for matcher in self.matchers) + "]"


class Predicate(Matcher):
    def __init__(self, function: Callable[[Any], Any], description: str | None = None):
        self.function = function
        self.description = description or getattr(function, "__name__", repr(function))

    def matches(self, actual: Any) -> bool:
        return bool(self.function(actual))

    def describe(self) -> str:
        return self.description


class ForeignMatcher(Matcher):
    """Adapts a matcher from another library without importing it."""

    def __init__(self, matcher: Any):
        self.matcher = matcher

    def matches(self, actual: Any) -> bool:
        return bool(self.matcher.matches(actual))

    def describe(self) -> str:
        return str(self.matcher)


def is_foreign_matcher(value: Any) -> bool:
    return callable(getattr(value, "matches", None)) and callable(getattr(value, "describe_to", None))


def as_matcher(value: Any) -> Matcher:
    """Turn a literal, ``None``, a callable or a matcher object into a :class:`Matcher`."""
    match value:
        case Matcher():
            return value
        case None:
            return IsNone()
        case _ if is_foreign_matcher(value):
            return ForeignMatcher(value)
        case _ if callable(value) and not isinstance(value, type):
            return Predicate(value)
        case _:
            return IsEqual(value)


def is_matcher(value: Any) -> bool:
    return isinstance(value, Matcher) or is_foreign_matcher(value)


def equal_to(expected: Any) -> Matcher:
    return IsEqual(expected)


def null_value() -> Matcher:
    return IsNone()


def not_null_value() -> Matcher:
    return IsNot(IsNone())


def is_not(value: Any) -> Matcher:
    return IsNot(as_matcher(value))


def contains_string(substring: str) -> Matcher:
    return StringContains(substring)


def starts_with(prefix: str) -> Matcher:
    return StringStartsWith(prefix)


def ends_with(suffix: str) -> Matcher:
    return StringEndsWith(suffix)


def matches_regex(pattern: str | re.Pattern[str]) -> Matcher:
    return StringMatchesPattern(pattern)


def all_of(*values: Any) -> Matcher:
    return AllOf(*(as_matcher(value) for value in values))


def any_of(*values: Any) -> Matcher:
    return AnyOf(*(as_matcher(value) for value in values))


def has_items(*values: Any) -> Matcher:
    return HasItems(*(as_matcher(value) for value in values))


def contains_exactly(*values: Any) -> Matcher:
    return ContainsExactly(*(as_matcher(value) for value in values))


def predicate(function: Callable[[Any], Any], description: str | None = None) -> Matcher:
    return Predicate(function, description)
