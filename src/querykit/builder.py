"""Query string building, the inverse of parsing.

Usage::

    >>> build_query({"someParam": 10, "otherOne": 6.5, "foo": "bar"}, QueryOptions())
    '?someParam=10&otherOne=6.5&foo=bar'
    >>> build_query([("a", True), ("b", None)], QueryOptions(build_skip_null=True))
    '?a=true'
    >>> build_query({}, QueryOptions())
    ''

Values are written the way the parser reads them back: booleans as
``true``/``false``, ``None`` as ``null``, ``UNDEFINED`` as ``undefined``.
"""

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from querykit._internal.types import UNDEFINED, ParamsLike
from querykit.options import QueryOptions

# Characters encodeURIComponent-style escaping leaves alone, beyond [A-Za-z0-9_.-~]
_SAFE = "!~*'()"


def to_pairs(params: ParamsLike) -> list[tuple[str, Any]]:
    """Ordered ``(name, value)`` pairs from a mapping or a pair iterable."""
    if isinstance(params, Mapping):
        return list(params.items())
    return [(name, value) for name, value in params]


def serialize_value(value: Any) -> str:
    """Render a parameter value as query text."""
    if isinstance(value, str):
        return value
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_component(text: str) -> str:
    """Percent-encode everything outside the unreserved set (UTF-8)."""
    return quote(text, safe=_SAFE)


def build_query(params: ParamsLike, options: QueryOptions) -> str:
    """Serialize *params* into a query string under *options*."""
    parts: list[str] = []
    for raw_name, value in to_pairs(params):
        name = str(raw_name)
        if options.trim_whitespaces:
            name = name.strip()
            if isinstance(value, str):
                value = value.strip()

        if options.skip_empty_param_names and name == "":
            continue
        if options.build_skip_undefined and value is UNDEFINED:
            continue
        if options.build_skip_null and value is None:
            continue
        if options.build_convert_bool_to_num and isinstance(value, bool):
            value = int(value)

        text = serialize_value(value)
        if options.url_encode_and_decode:
            name = encode_component(name)
            text = encode_component(text)

        if text == "" and not options.separate_empty_values:
            parts.append(name)
        else:
            parts.append(f"{name}{options.value_separator}{text}")

    query = options.param_separator.join(parts)

    # anything but a bool behaves as "auto"
    mark = options.query_question_mark
    if mark is True or (query and mark is not False):
        query = f"?{query}"
    return query
