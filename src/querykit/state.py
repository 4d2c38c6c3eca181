"""Options, cache and the operations that use them.

A ``QueryState`` owns one options instance and one ``QueryCache``. The
module keeps a default state; ``state_var`` lets a task, thread or test
swap in its own::

    state = QueryState(QueryOptions(param_separator=";"))
    with use_state(state):
        list_query_params("a=1;b=2")  # -> {"a": "1", "b": "2"}

Every operation accepts one-shot ``overrides``. They never touch the
state's options, and they never write into the shared cache when they
change an option the cached results depend on.

Thread safety:
    Reads are safe. ``set_options()``, ``init_options()`` and
    ``purge_cache()`` replace shared attributes in place; embedders that
    call them while other threads read must serialize those calls.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, TypeAlias, cast

from querykit._internal.types import (
    UNDEFINED,
    LookupResult,
    Overrides,
    Pairs,
    ParamsLike,
    ParamValue,
)
from querykit.builder import build_query
from querykit.cache import CacheView, QueryCache
from querykit.content import extract_query_content
from querykit.context import get_current_url
from querykit.options import DEFAULT_OPTIONS, PARSE_OPTIONS, SEPARATOR_OPTIONS, QueryOptions
from querykit.parser import ParsedQuery, normalize_name, parse_query

logger = logging.getLogger("querykit.options")

OverridesLike: TypeAlias = Overrides | QueryOptions | None


class QueryState:
    """Process-wide options and parse cache, plus every query operation.

    Args:
        options: Initial options. Defaults to the library defaults.
        location: Returns the URL to use when an operation is given none.
            Defaults to ``querykit.context.get_current_url``.
    """

    __slots__ = ("_cache", "_location", "_options")

    def __init__(
        self,
        options: QueryOptions | None = None,
        *,
        location: Callable[[], str] | None = None,
    ) -> None:
        self._options = options or DEFAULT_OPTIONS
        self._cache = QueryCache()
        self._location = location or get_current_url

    def __repr__(self) -> str:
        return f"QueryState(options={self._options!r}, cached={len(self._cache)})"

    # -- Options --

    def init_options(self) -> None:
        """Reset options to the library defaults.

        Cache sections are invalidated exactly as ``set_options()`` would
        for the same change.
        """
        self.set_options(DEFAULT_OPTIONS)

    reset_options = init_options

    def set_options(self, overrides: OverridesLike = None, /, **kwargs: Any) -> None:
        """Change options for every later call.

        Cache sections whose results depend on a changed option are cleared
        before the new options are committed. Setting an option to the
        value it already has changes nothing, cache included.
        """
        new_options = self._options.merge(overrides, **kwargs)
        changed = self._options.changed_by(overrides, **kwargs)
        if not changed:
            return
        content_obsolete, params_obsolete = self._obsolete_sections(new_options, changed)
        if content_obsolete:
            self._cache.clear_content()
        if params_obsolete:
            self._cache.clear_params()
        logger.debug("Options changed: %s", ", ".join(sorted(changed)))
        self._options = new_options

    def list_options(self) -> QueryOptions:
        """Return the current options (immutable)."""
        return self._options

    get_options = list_options

    def combine_options_with(
        self, overrides: OverridesLike = None, /, **kwargs: Any
    ) -> QueryOptions:
        """Return the effective options for one call; nothing is stored."""
        return self._options.merge(overrides, **kwargs)

    # -- Cache --

    def get_cache(self) -> QueryCache:
        return self._cache

    def init_cache(self) -> None:
        """Empty both cache sections."""
        self._cache.purge()

    purge_cache = init_cache

    def _obsolete_sections(
        self, options: QueryOptions, changed: frozenset[str]
    ) -> tuple[bool, bool]:
        # Extracted content only depends on whether a separator holds "?" or "#"
        content_obsolete = bool(changed & SEPARATOR_OPTIONS) and (
            options.separators_contain_boundary_chars
            != self._options.separators_contain_boundary_chars
        )
        params_obsolete = bool(changed & PARSE_OPTIONS)
        return content_obsolete, params_obsolete

    def _usable_cache(self, options: QueryOptions, overrides: OverridesLike) -> CacheView:
        cache = self._cache
        if not overrides:
            return CacheView(cache.content, cache.params)
        changed = self._options.changed_by(overrides)
        content_obsolete, params_obsolete = self._obsolete_sections(options, changed)
        return CacheView(
            content={} if content_obsolete else cache.content,
            params={} if params_obsolete else cache.params,
        )

    # -- Operations --

    def get_query_content(self, url: str | None = None, overrides: OverridesLike = None) -> str:
        """Return the query content of *url* (text between ``?`` and ``#``).

        Without a string *url*, the ambient URL from ``location`` is used.
        """
        if not isinstance(url, str):
            url = self._location()
        options = self.combine_options_with(overrides)
        cache = self._usable_cache(options, overrides)
        content = cache.content.get(url)
        if content is None:
            content = extract_query_content(url, options)
            cache.content[url] = content
        return content

    def parse_query_content(
        self,
        content: str | None,
        overrides: OverridesLike = None,
        extended: bool = False,
    ) -> ParsedQuery | Pairs | dict[str, ParamValue]:
        """Parse query *content* and return one view of the result.

        Returns the whole ``ParsedQuery`` when *extended* is true, a list of
        ``(name, value)`` pairs when ``list_params_as_pairs`` is set, and a
        name -> value dict otherwise. The lists and dicts are fresh copies.
        """
        content = content or ""
        options = self.combine_options_with(overrides)
        cache = self._usable_cache(options, overrides)
        result = cache.params.get(content)
        if result is None:
            result = parse_query(content, options)
            cache.params[content] = result

        if extended:
            return result
        if options.list_params_as_pairs:
            return list(result.pairs)
        return dict(result.params)

    def list_query_params(
        self,
        url: str | None = None,
        overrides: OverridesLike = None,
        extended: bool = False,
    ) -> ParsedQuery | Pairs | dict[str, ParamValue]:
        """Parse the query of *url*; see ``parse_query_content`` for the result."""
        content = self.get_query_content(url, overrides)
        return self.parse_query_content(content, overrides, extended)

    def get_query_param(
        self,
        name: str | list[str] | tuple[str, ...],
        url: str | None = None,
        overrides: OverridesLike = None,
    ) -> LookupResult:
        """Return the value of parameter *name* in *url*.

        *name* may be a list of alternatives; the first one present wins.
        Returns ``UNDEFINED`` when nothing matches. A parameter whose value
        parsed to ``None`` is present and is returned as ``None``.
        """
        if isinstance(name, list | tuple):
            for alternative in name:
                value = self.get_query_param(alternative, url, overrides)
                if value is not UNDEFINED:
                    return value
            return UNDEFINED

        options = self.combine_options_with(overrides)
        wanted = normalize_name(str(name), options)
        if options.param_name_case_ignore:
            wanted = wanted.lower()

        result = cast(ParsedQuery, self.list_query_params(url, overrides, extended=True))
        names = result.names_lc if options.param_name_case_ignore else result.names
        try:
            index = names.index(wanted)
        except ValueError:
            return UNDEFINED
        return result.values[index]

    def build_query(self, params: ParamsLike, overrides: OverridesLike = None) -> str:
        """Serialize *params* (mapping or pairs) into a query string."""
        return build_query(params, self.combine_options_with(overrides))


# -- Active state --

_default_state = QueryState()

state_var: ContextVar[QueryState] = ContextVar("querykit_state")
"""The state module-level functions use. Unset means the default state."""


def get_state() -> QueryState:
    """Return the active ``QueryState``."""
    return state_var.get(_default_state)


@contextmanager
def use_state(state: QueryState | None = None) -> Iterator[QueryState]:
    """Activate *state* (or a fresh default one) for the duration of the block."""
    state = state or QueryState()
    token = state_var.set(state)
    try:
        yield state
    finally:
        state_var.reset(token)
