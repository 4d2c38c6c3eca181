"""Ambient current URL via ContextVar.

Provides ``current_url_var``: the URL of the page or request being handled.
Lookups that are given no URL read it. It is opt-in; with nothing set the
current URL is ``""``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

# -- Current URL --

current_url_var: ContextVar[str] = ContextVar("querykit_current_url")
"""The ambient URL. Typically set by request-handling middleware."""


def get_current_url() -> str:
    """Return the ambient URL, or ``""`` when none is set."""
    return current_url_var.get("")


@contextmanager
def use_url(url: str) -> Iterator[str]:
    """Make *url* the ambient URL for the duration of the block.

    Usage::

        with use_url("https://example.com/?page=2"):
            get_query_param("page")  # -> "2"
    """
    token = current_url_var.set(url)
    try:
        yield url
    finally:
        current_url_var.reset(token)
