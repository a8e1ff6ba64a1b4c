"""
Verdicts and value checks.
Provides the pass/fail outcome of an assertion step and small helpers for
building the predicates that assertion builders accept.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sized

@dataclass(frozen=True)
class Verdict:
    """Outcome of a single assertion"""
    passed: bool
    message: Optional[str] = None

    @classmethod
    def pass_(cls) -> 'Verdict':
        return cls(passed=True)

    @classmethod
    def fail(cls, message: str) -> 'Verdict':
        return cls(passed=False, message=message)

    @property
    def failed(self) -> bool:
        return not self.passed

Predicate = Callable[[Any], Verdict]

def check(condition: bool, message: str) -> Verdict:
    """Turn a boolean into a verdict, failing with the given message."""
    return Verdict.pass_() if condition else Verdict.fail(message)

def equal(expected: Any) -> Predicate:
    """Predicate passing when the actual value equals ``expected``.

    Args:
        expected: Value the actual value is compared to

    Returns:
        Predicate: Callable producing a verdict for an actual value
    """
    def predicate(actual: Any) -> Verdict:
        return check(actual == expected, f"Expected {expected!r} but got {actual!r}")
    return predicate

def not_equal(unexpected: Any) -> Predicate:
    def predicate(actual: Any) -> Verdict:
        return check(actual != unexpected, f"Expected anything but {unexpected!r}")
    return predicate

def at_least(minimum: Any) -> Predicate:
    def predicate(actual: Any) -> Verdict:
        return check(actual >= minimum, f"Expected at least {minimum!r} but got {actual!r}")
    return predicate

def at_most(maximum: Any) -> Predicate:
    def predicate(actual: Any) -> Verdict:
        return check(actual <= maximum, f"Expected at most {maximum!r} but got {actual!r}")
    return predicate

def greater_than(bound: Any) -> Predicate:
    def predicate(actual: Any) -> Verdict:
        return check(actual > bound, f"Expected a value greater than {bound!r} but got {actual!r}")
    return predicate

def less_than(bound: Any) -> Predicate:
    def predicate(actual: Any) -> Verdict:
        return check(actual < bound, f"Expected a value less than {bound!r} but got {actual!r}")
    return predicate

def contains(fragment: Any) -> Predicate:
    """Predicate passing when ``fragment`` is contained in the actual value.

    Works for substrings as well as for membership in lists of values.
    """
    def predicate(actual: Any) -> Verdict:
        return check(fragment in actual, f"Expected {actual!r} to contain {fragment!r}")
    return predicate

def has_length(length: int) -> Predicate:
    def predicate(actual: Sized) -> Verdict:
        return check(len(actual) == length, f"Expected length {length} but got {len(actual)}")
    return predicate

def all_of(*predicates: Predicate) -> Predicate:
    """Combine predicates; the first failing verdict is returned.

    Args:
        *predicates: Predicates applied in order to the same value

    Returns:
        Predicate: Combined predicate
    """
    def predicate(actual: Any) -> Verdict:
        for single in predicates:
            verdict = single(actual)
            if verdict.failed:
                return verdict
        return Verdict.pass_()
    return predicate
