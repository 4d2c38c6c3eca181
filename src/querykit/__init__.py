"""querykit — URL query string parsing, building and lookup.

Typed values out of query strings, with the coercion rules you choose.

Basic usage::

    from querykit import build_query, get_query_param, list_query_params

    url = "http://example.com/?page=2&debug=true&q=hello%20world"
    get_query_param("page", url)     # -> "2"
    get_query_param("DEBUG", url)    # -> True
    list_query_params(url)           # -> {"page": "2", "debug": True, "q": "hello world"}

    build_query({"page": 3, "q": "hello world"})  # -> "?page=3&q=hello%20world"

Missing parameters come back as ``UNDEFINED``, never as ``None``; ``None``
is what ``a=null`` parses to.
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    # Operations
    "build_query": "querykit.api",
    "combine_options_with": "querykit.api",
    "get_cache": "querykit.api",
    "get_options": "querykit.api",
    "get_query_content": "querykit.api",
    "get_query_param": "querykit.api",
    "init_cache": "querykit.api",
    "init_options": "querykit.api",
    "list_options": "querykit.api",
    "list_query_params": "querykit.api",
    "parse_query_content": "querykit.api",
    "purge_cache": "querykit.api",
    "reset_options": "querykit.api",
    "set_options": "querykit.api",
    # Types
    "UNDEFINED": "querykit._internal.types",
    "ParsedQuery": "querykit.parser",
    "QueryCache": "querykit.cache",
    "QueryOptions": "querykit.options",
    # State and context
    "QueryState": "querykit.state",
    "get_state": "querykit.state",
    "use_state": "querykit.state",
    "get_current_url": "querykit.context",
    "use_url": "querykit.context",
    # Errors
    "ConfigurationError": "querykit.errors",
    "QueryKitError": "querykit.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import querykit`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
