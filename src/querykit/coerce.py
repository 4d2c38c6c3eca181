"""Value coercion for parsed parameters.

Turns a decoded (and possibly trimmed) string into its typed value.
The tests run in a fixed order and the first match wins:

1. ``true``/``false``  -> bool   (``parse_convert_bool``)
2. ``yes``/``no``      -> bool   (``parse_convert_yes_no``)
3. ``null``            -> None   (``parse_convert_null``)
4. ``undefined``       -> None   (``parse_convert_undefined``)
5. ``0``               -> 0      (``parse_convert_zero``)
6. anything else stays a string

Tests 1-4 compare case-insensitively when ``special_value_case_ignore`` is
set. Test 5 always compares the exact string.

``undefined`` becomes ``None`` rather than ``UNDEFINED`` so that a present
parameter never looks like a missing one to lookups.
"""

from querykit._internal.types import ParamValue
from querykit.options import QueryOptions

_BOOLS = {"true": True, "false": False}
_YES_NO = {"yes": True, "no": False}


def coerce_value(raw: str, options: QueryOptions) -> ParamValue:
    """Return the typed value of *raw* under *options*."""
    normalized = raw.lower() if options.special_value_case_ignore else raw

    if options.parse_convert_bool and normalized in _BOOLS:
        return _BOOLS[normalized]
    if options.parse_convert_yes_no and normalized in _YES_NO:
        return _YES_NO[normalized]
    if options.parse_convert_null and normalized == "null":
        return None
    if options.parse_convert_undefined and normalized == "undefined":
        return None
    if options.parse_convert_zero and raw == "0":
        return 0
    return raw
