"""Sentinel value for indicating a missing value, as opposed to an explicit None."""

# sentinels.py


from typing import Any


class _Missing:
    """A sentinel object to indicate that a value is missing.

    Only one instance exists. Copying or unpickling it gives back that same
    instance, so identity checks keep working.
    """

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        """Return a string representation of the sentinel."""
        return "<missing>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "missing"


def is_missing(value: Any) -> bool:
    """Check if the value is the sentinel indicating a missing value."""
    return value is missing


missing = _Missing()
