"""querykit exception hierarchy.

Parsing, lookup and building never raise for malformed query text; the
only failure path is an option value that cannot work at all.
"""


class QueryKitError(Exception):
    """Base for all querykit-specific errors."""


class ConfigurationError(QueryKitError):
    """Raised when an option value is invalid.

    Typically raised while building a ``QueryOptions``, either from
    ``set_options()`` or from a one-shot override.
    """
