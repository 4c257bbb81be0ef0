"""
Additional assertion checks on top of plain ``assert``.

Every check raises ``AssertionError`` explicitly so that it keeps working
when Python runs with ``-O``.
"""

import inspect
import json
from typing import Any, Awaitable, Callable, Iterable, List, Optional, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


def _fail(message: str) -> None:
    raise AssertionError(message)


def _describe(value: Union[str, List[str], None], verb: str, substring: str) -> str:
    if isinstance(value, list):
        return f"Expected {json.dumps(value, indent=2)} {verb}\n  {json.dumps(substring)}."
    return f"Expected\n  {json.dumps(value)}\n{verb}\n  {json.dumps(substring)}."


def contains(value: Union[str, List[str], None], substring: str) -> None:
    """
    Check that the text (or list of strings) contains the substring.

    For a list, the substring must be one of its elements.
    """
    if not (value and substring and substring in value):
        _fail(_describe(value, "to contain", substring))


def contains_all(value: Union[str, List[str], None], substrings: Optional[Iterable[str]]) -> None:
    """Check that the text contains every one of the substrings."""
    for substring in substrings or []:
        contains(value, substring)


def does_not_contain(value: Union[str, List[str], None], substring: str) -> None:
    """Check that the text (or list of strings) does not contain the substring."""
    if not (value and substring and substring not in value):
        _fail(_describe(value, "to not contain", substring))


def does_not_contain_any(value: Union[str, List[str], None], substrings: Optional[Iterable[str]]) -> None:
    """Check that the text contains none of the substrings."""
    for substring in substrings or []:
        does_not_contain(value, substring)


def equal_errors(actual_error: BaseException, expected_error: BaseException,
                 message: Optional[str] = None) -> None:
    """
    Check that two exceptions are equal.

    Only the exception type and its message are compared. Tracebacks,
    causes, context and any other attributes are ignored.

    Args:
        actual_error: The exception that was raised.
        expected_error: The exception that was expected.
        message: Optional message to use if the check fails.
    """
    actual = (type(actual_error), str(actual_error))
    expected = (type(expected_error), str(expected_error))
    if actual != expected:
        _fail(message or (
            f"Expected {expected[0].__name__}({expected[1]!r}) "
            f"but got {actual[0].__name__}({actual[1]!r})."
        ))


def _validate_thrown_error(thrown_error: Optional[E],
                           expected_error: Optional[BaseException],
                           check: Optional[Callable[[E], None]]) -> E:
    if thrown_error is None:
        _fail("Missing expected exception.")
    if expected_error is not None:
        equal_errors(thrown_error, expected_error)
    if check is not None:
        check(thrown_error)
    return thrown_error


def throws(func: Callable[[], Any],
           expected_error: Optional[BaseException] = None,
           check: Optional[Callable[[BaseException], None]] = None) -> BaseException:
    """
    Assert that calling ``func`` raises an exception.

    Args:
        func: Function expected to raise.
        expected_error: If given, the raised exception must equal it
            (see ``equal_errors``).
        check: If given, called with the raised exception for further checks.

    Returns:
        The raised exception.
    """
    thrown_error = None
    try:
        func()
    except Exception as e:
        thrown_error = e
    return _validate_thrown_error(thrown_error, expected_error, check)


async def throws_async(awaitable: Union[Awaitable[Any], Callable[[], Awaitable[Any]]],
                       expected_error: Optional[BaseException] = None,
                       check: Optional[Callable[[BaseException], None]] = None) -> BaseException:
    """
    Assert that awaiting ``awaitable`` raises an exception.

    ``awaitable`` may be an awaitable object or a function returning one.
    Otherwise behaves like ``throws``.
    """
    thrown_error = None
    try:
        if not inspect.isawaitable(awaitable):
            awaitable = awaitable()
        await awaitable
    except Exception as e:
        thrown_error = e
    return _validate_thrown_error(thrown_error, expected_error, check)


def defined(value: Optional[T], expression_name: Optional[str] = None) -> T:
    """Assert that the value is not None and return it."""
    if value is None:
        _fail(f"{expression_name or 'value'} must be defined.")
    return value


def defined_and_not_empty(value: Optional[str], expression_name: Optional[str] = None) -> None:
    expression_name = expression_name or "value"
    defined(value, expression_name)
    if not value:
        _fail(f"{expression_name} cannot be empty.")


def defined_and_not_strict_equal(actual_value: Optional[T], expected_value: T,
                                 expression_name: Optional[str] = None) -> None:
    expression_name = expression_name or "actual_value"
    defined(actual_value, expression_name)
    # Equal values of different types (1 and True, 1 and 1.0) are not strictly equal
    if type(actual_value) is type(expected_value) and actual_value == expected_value:
        _fail(f"{expression_name} ({actual_value}) cannot be strictly equal to {expected_value}.")


def starts_with(value: str, prefix: str, expression_name: Optional[str] = None) -> None:
    """Assert that the value starts with the prefix."""
    defined(value, expression_name)
    defined(prefix, "prefix")
    if not value.startswith(prefix):
        _fail(f"{expression_name or 'value'} ({value}) must start with the provided prefix ({prefix}).")


def greater_than(value: float, expected_lower_bound: float, expression_name: Optional[str] = None) -> None:
    defined(value, expression_name)
    defined(expected_lower_bound, "expected_lower_bound")
    if not value > expected_lower_bound:
        _fail(f"{expression_name or 'value'} ({value}) must be greater than {expected_lower_bound}.")


def one_of(value: T, expected_values: Iterable[T]) -> None:
    """Assert that the value equals one of the expected values."""
    expected_values = list(expected_values)
    if value not in expected_values:
        _fail(f"Expected {value} to be one of the following values: {json.dumps(expected_values, default=str)}")
