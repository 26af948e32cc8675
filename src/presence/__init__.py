"""Presence checks and combinators treating None and missing as one absent value."""

from presence.combinators import (
    Absent,
    AbsentValueError,
    Indeterminate,
    NoPresentValueError,
    filter,
    first,
    if_absent,
    if_present,
    inspect,
    is_absent,
    is_present,
    last,
    map,
    or_else,
    or_else_null,
    or_else_supply,
    or_else_throw,
    resolve,
)
from presence.logger import get_presence_logger, set_presence_logger, set_verbosity
from presence.sentinels import is_missing, missing

__all__ = [
    "Absent",
    "AbsentValueError",
    "Indeterminate",
    "NoPresentValueError",
    "filter",
    "first",
    "get_presence_logger",
    "if_absent",
    "if_present",
    "inspect",
    "is_absent",
    "is_missing",
    "is_present",
    "last",
    "map",
    "missing",
    "or_else",
    "or_else_null",
    "or_else_supply",
    "or_else_throw",
    "resolve",
    "set_presence_logger",
    "set_verbosity",
]
