"""Shared type aliases and the absent-value sentinel used across querykit modules."""

from collections.abc import Iterable, Mapping
from typing import Any, Final, TypeAlias


class _Undefined:
    """The absent-value marker.

    Distinct from ``None``: ``None`` is a parameter that is present with a
    null value, ``UNDEFINED`` means there is no value at all (a lookup that
    found nothing, or a builder value that should normally be skipped).
    """

    __slots__ = ()
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()
"""Singleton returned by lookups that find nothing."""

# A parsed parameter value: the raw string, or a coerced 0 / bool / null
ParamValue: TypeAlias = str | int | bool | None

# Anything the lookup functions can hand back
LookupResult: TypeAlias = ParamValue | _Undefined

# Ordered (name, value) pairs
Pairs: TypeAlias = list[tuple[str, ParamValue]]

# Input accepted by the query builder
ParamsLike: TypeAlias = Mapping[str, Any] | Iterable[tuple[str, Any]]

# One-shot option overrides, keyed by snake_case or camelCase option name
Overrides: TypeAlias = Mapping[str, Any]
