"""
Collection helpers for dev_tools.

Lookups take an explicit condition: either ``ExactValue`` (match by
equality) or ``Predicate`` (match when the function returns true).
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class ExactValue(Generic[T]):
    """Condition that matches values equal to ``value``."""

    value: T

    def matches(self, candidate: T) -> bool:
        return candidate == self.value


@dataclass(frozen=True)
class Predicate(Generic[T]):
    """Condition that matches values accepted by ``function``."""

    function: Callable[[T], Any]

    def matches(self, candidate: T) -> bool:
        return bool(self.function(candidate))


Condition = Union[ExactValue[T], Predicate[T]]


def any_values(values: Optional[List[T]]) -> bool:
    """Check whether the list exists and holds at least one value."""
    return bool(values)


def first(values: Optional[List[T]], condition: Optional[Condition] = None) -> Optional[T]:
    """
    Get the first value that matches the condition.

    Args:
        values: Values to search through.
        condition: Condition to match. Without one, the first value is returned.

    Returns:
        The matching value, or None if there is none.
    """
    if not values:
        return None
    if condition is None:
        return values[0]
    for value in values:
        if condition.matches(value):
            return value
    return None


def last(values: Optional[List[T]], condition: Optional[Condition] = None) -> Optional[T]:
    """
    Get the last value that matches the condition.

    Args:
        values: Values to search through.
        condition: Condition to match. Without one, the last value is returned.

    Returns:
        The matching value, or None if there is none.
    """
    if not values:
        return None
    if condition is None:
        return values[-1]
    for value in reversed(values):
        if condition.matches(value):
            return value
    return None


def contains(values: Optional[List[T]], condition: Condition) -> bool:
    """Check whether any value matches the condition."""
    if not values:
        return False
    return any(condition.matches(value) for value in values)


def where(values: List[T], predicate: Callable[[T], Any]) -> List[T]:
    """Get all values accepted by the predicate, in their original order."""
    return [value for value in values if predicate(value)]


def map_values(values: Optional[List[T]], conversion: Callable[[T], U]) -> List[U]:
    """Convert every value. A missing list maps to an empty one."""
    if not values:
        return []
    return [conversion(value) for value in values]


def wrap_value(value: T) -> List[T]:
    """Default conversion for ``to_array``."""
    return [value]


def to_array(value: Union[T, List[T]],
             conversion: Callable[[T], List[T]] = wrap_value) -> List[T]:
    """
    Ensure a value is a list.

    Lists are returned unchanged; anything else goes through ``conversion``,
    which wraps the value in a single-element list by default.
    """
    if isinstance(value, list):
        return value
    return conversion(value)


def index_of(values: Optional[List[T]], condition: Callable[[T, int], Any]) -> int:
    """
    Get the index of the first value that matches.

    Args:
        values: Values to look through.
        condition: Called with each value and its index.

    Returns:
        The first matching index, or -1 if nothing matches.
    """
    if values:
        for index, value in enumerate(values):
            if condition(value, index):
                return index
    return -1


def remove_first(values: Optional[List[T]], condition: Callable[[T, int], Any]) -> Optional[T]:
    """Remove and return the first matching value, or None if nothing matches."""
    index = index_of(values, condition)
    if index == -1:
        return None
    return values.pop(index)
