"""Query content extraction.

The query content of a URL is the text between (not including) the first
``?`` and the following ``#``::

    >>> extract_query_content("http://example.com/?a=1&b=2#top", QueryOptions())
    'a=1&b=2'
    >>> extract_query_content("a=1&b=2", QueryOptions())
    'a=1&b=2'

No structural URL validation happens here; any string is accepted.
"""

from querykit.options import QueryOptions


def extract_query_content(url: str, options: QueryOptions) -> str:
    """Return the query content of *url*.

    When a separator itself contains ``?`` or ``#`` the boundaries cannot
    be found safely and *url* is returned unchanged.
    """
    if options.separators_contain_boundary_chars:
        return url
    _, mark, rest = url.partition("?")
    if not mark:
        rest = url
    content, _, _ = rest.partition("#")
    return content
