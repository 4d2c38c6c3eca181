"""Module-level query functions.

Each function runs against the active ``QueryState`` (see
``querykit.state.get_state``), so setting options here affects every later
call in the same context::

    from querykit import get_query_param, set_options

    url = "http://example.com/?firstParam=10&otherOne=6.5&theLast=someValue"
    get_query_param("firstparam", url)                 # -> "10"
    get_query_param(["missing", "theLast"], url)       # -> "someValue"
    get_query_param("unexistantParam", url)            # -> UNDEFINED

    set_options(param_separator=";")
    list_query_params("a=1;b=true")                    # -> {"a": "1", "b": True}
"""

from typing import Any

from querykit._internal.types import LookupResult, Pairs, ParamsLike, ParamValue
from querykit.cache import QueryCache
from querykit.options import QueryOptions
from querykit.parser import ParsedQuery
from querykit.state import OverridesLike, get_state


def get_query_param(
    name: str | list[str] | tuple[str, ...],
    url: str | None = None,
    overrides: OverridesLike = None,
) -> LookupResult:
    """Value of parameter *name* (or the first present alternative), or ``UNDEFINED``."""
    return get_state().get_query_param(name, url, overrides)


def list_query_params(
    url: str | None = None,
    overrides: OverridesLike = None,
    extended: bool = False,
) -> ParsedQuery | Pairs | dict[str, ParamValue]:
    """Every parameter in the query of *url*."""
    return get_state().list_query_params(url, overrides, extended)


def parse_query_content(
    content: str | None,
    overrides: OverridesLike = None,
    extended: bool = False,
) -> ParsedQuery | Pairs | dict[str, ParamValue]:
    """Every parameter in query *content* (the text after ``?``)."""
    return get_state().parse_query_content(content, overrides, extended)


def get_query_content(url: str | None = None, overrides: OverridesLike = None) -> str:
    """The text between ``?`` and ``#`` in *url*."""
    return get_state().get_query_content(url, overrides)


def build_query(params: ParamsLike, overrides: OverridesLike = None) -> str:
    """Query string for a mapping or a sequence of ``(name, value)`` pairs."""
    return get_state().build_query(params, overrides)


def init_options() -> None:
    get_state().init_options()


reset_options = init_options


def set_options(overrides: OverridesLike = None, /, **kwargs: Any) -> None:
    get_state().set_options(overrides, **kwargs)


def list_options() -> QueryOptions:
    return get_state().list_options()


get_options = list_options


def combine_options_with(overrides: OverridesLike = None, /, **kwargs: Any) -> QueryOptions:
    return get_state().combine_options_with(overrides, **kwargs)


def get_cache() -> QueryCache:
    return get_state().get_cache()


def init_cache() -> None:
    get_state().init_cache()


purge_cache = init_cache
