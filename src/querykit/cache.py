"""Memoization of content extraction and query parsing.

Two sections, each a plain dict keyed by the raw input string:

- ``content``: URL-like input -> query content
- ``params``: query content -> ``ParsedQuery``

Entries are never evicted one by one. When an option that shapes a
section's output changes, the whole section is replaced with a new empty
dict and its epoch goes up. Code that kept a reference to the old dict
still sees the old entries, which is how one-shot overrides stay isolated.
"""

import logging
from dataclasses import dataclass, field

from querykit.parser import ParsedQuery

logger = logging.getLogger("querykit.cache")


@dataclass(slots=True)
class QueryCache:
    """Process-wide parse cache.

    Attributes:
        content: Raw URL-like input -> extracted query content.
        params: Raw query content -> parsed result.
        content_epoch: Bumped each time ``content`` is cleared.
        params_epoch: Bumped each time ``params`` is cleared.
    """

    content: dict[str, str] = field(default_factory=dict)
    params: dict[str, ParsedQuery] = field(default_factory=dict)
    content_epoch: int = 0
    params_epoch: int = 0

    def clear_content(self) -> None:
        self.content = {}
        self.content_epoch += 1
        logger.debug("Content cache cleared (epoch %d)", self.content_epoch)

    def clear_params(self) -> None:
        self.params = {}
        self.params_epoch += 1
        logger.debug("Params cache cleared (epoch %d)", self.params_epoch)

    def purge(self) -> None:
        """Clear both sections."""
        self.clear_content()
        self.clear_params()

    def __len__(self) -> int:
        return len(self.content) + len(self.params)


@dataclass(frozen=True, slots=True)
class CacheView:
    """The sections one call reads from and writes to.

    Either section is the shared dict from ``QueryCache`` or a scratch dict
    that is discarded with the view.
    """

    content: dict[str, str]
    params: dict[str, ParsedQuery]
