"""Combinators over values that may be absent.

A value is absent when it is ``None`` or the ``missing`` sentinel, and present
otherwise. Presence is decided by identity only: ``0``, ``False``, ``""`` and
empty containers are present values.

Example:
    flag = resolve(command_line.get("flag"), environment_flag, file_flag)
"""

from collections.abc import Callable
from typing import Any, NoReturn, TypeGuard, overload

from presence.logger import get_presence_logger
from presence.sentinels import _Missing, missing

presence_logger = get_presence_logger()

type Absent = None | _Missing
type Indeterminate[T] = T | Absent


class AbsentValueError(ValueError):
    """Raised when a value was required but was absent."""

    def __init__(self, message: str = "Absent value passed") -> None:
        super().__init__(message)


class NoPresentValueError(AbsentValueError):
    """Raised when none of the resolved arguments holds a present value."""

    def __init__(self, argument_count: int) -> None:
        """Initialize the error with the number of inspected arguments."""
        self.argument_count = argument_count
        super().__init__(
            "Provided argument list doesn't have any non-absent values"
            f" ({argument_count} inspected)"
        )


def is_absent(value: Any) -> TypeGuard[Absent]:
    """Return True if value is None or the missing sentinel.

    Args:
        value: Subject tested for presence.
    """
    return value is None or value is missing


def is_present[T](value: Indeterminate[T]) -> TypeGuard[T]:
    """Return True if value is neither None nor the missing sentinel.

    Args:
        value: Subject tested for presence.
    """
    return not is_absent(value)


def if_present[T](
    value: Indeterminate[T], consumer: Callable[[T], Any]
) -> Indeterminate[T]:
    """Call consumer with value as argument if value is present.

    Args:
        value: Argument passed to consumer.
        consumer: Function that is called if value is present.

    Returns:
        The value that was passed, unmodified.
    """
    if is_present(value):
        consumer(value)

    return value


def if_absent[T](value: Indeterminate[T], action: Callable[[], Any]) -> Indeterminate[T]:
    """Call action if value is absent.

    Args:
        value: Value to be tested for presence.
        action: Function to be called if value is absent.

    Returns:
        The value that was passed, unmodified.
    """
    if is_absent(value):
        action()

    return value


def inspect[T](
    value: Indeterminate[T],
    on_present: Callable[[T], Any],
    on_absent: Callable[[], Any],
) -> Indeterminate[T]:
    """Combination of `if_present` and `if_absent`.

    Exactly one of the two callbacks is called.

    Args:
        value: Value tested for presence.
        on_present: Function called with value as argument if it is present.
        on_absent: Function called without arguments if value is absent.

    Returns:
        The value that was passed, unmodified.
    """
    if is_present(value):
        on_present(value)
    else:
        on_absent()

    return value


def or_else[T, V](value: Indeterminate[T], fallback: V) -> T | V:
    """Return value if it is present, fallback otherwise.

    The fallback is returned as is, even when it is callable. Use
    `or_else_supply` to compute it lazily.
    """
    if is_present(value):
        return value

    return fallback


@overload
def or_else_null(value: Absent) -> None: ...


@overload
def or_else_null[T](value: Indeterminate[T]) -> T | None: ...


def or_else_null[T](value: Indeterminate[T]) -> T | None:
    """Return value if it is present, None otherwise."""
    return value if is_present(value) else None


def or_else_supply[T, V](value: Indeterminate[T], factory: Callable[[], V]) -> T | V:
    """Same as `or_else`, but the fallback comes from a factory.

    The factory is only called if value is absent, which is useful when the
    fallback is expensive to build.

    Args:
        value: Value that is returned if it is present.
        factory: Fallback factory called if value is absent.
    """
    return value if is_present(value) else factory()


@overload
def or_else_throw(
    value: Absent, factory: Callable[[], BaseException] | None = None
) -> NoReturn: ...


@overload
def or_else_throw[T](
    value: Indeterminate[T], factory: Callable[[], BaseException] | None = None
) -> T: ...


def or_else_throw[T](
    value: Indeterminate[T], factory: Callable[[], BaseException] | None = None
) -> T:
    """Return value if it is present, raise otherwise.

    Args:
        value: Value to be checked and returned if present.
        factory: Error factory called if value is absent. Its result is
            raised as is. Without a factory, `AbsentValueError` is raised.

    Raises:
        AbsentValueError: If value is absent and no factory was given.
    """
    if is_present(value):
        return value

    presence_logger.debug("Absent value %r where a present one was required", value)
    raise factory() if is_present(factory) else AbsentValueError()


def first[T](*values: Indeterminate[T]) -> T | None:
    """Return the first present value, None if there is no such value."""
    for value in values:
        if is_present(value):
            return value

    return None


def last[T](*values: Indeterminate[T]) -> T | None:
    """Return the last present value, None if there is no such value."""
    for value in reversed(values):
        if is_present(value):
            return value

    return None


def resolve[T](*values: Indeterminate[T]) -> T:
    """Return the first present value or raise.

    This is handy when an option may come from several sources, ordered by
    priority::

        flag = resolve(cli_flag, environment_flag, file_flag)

    Raises:
        NoPresentValueError: If no value is present, including when no
            value is given at all.
    """
    return or_else_throw(first(*values), lambda: NoPresentValueError(len(values)))


@overload
def map(value: Absent, transformer: Callable[[Any], Any]) -> None: ...


@overload
def map[T, V](value: Indeterminate[T], transformer: Callable[[T], V]) -> V | None: ...


def map[T, V](value: Indeterminate[T], transformer: Callable[[T], V]) -> V | None:
    """Return transformer(value) if value is present, None otherwise.

    Args:
        value: Possibly absent value.
        transformer: Function called on the present value.
    """
    return transformer(value) if is_present(value) else None


def filter[T](*values: Indeterminate[T]) -> list[T]:
    """Return a new list holding only the present values, in their original order."""
    return [value for value in values if is_present(value)]
