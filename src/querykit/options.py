"""Query options.

QueryOptions is a frozen dataclass: immutable after creation, one field per
option, no string-key dict lookups inside the parser or builder.

Overrides arrive as plain mappings (or keyword arguments) so callers can
write either spelling::

    options.merge({"param_separator": ";"})
    options.merge({"paramSeparator": ";"})

Keys that name no option are ignored. A key whose value is ``None`` or
``UNDEFINED`` is treated as absent.
"""

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Literal

from querykit._internal.types import UNDEFINED, Overrides
from querykit.errors import ConfigurationError

logger = logging.getLogger("querykit.options")


@dataclass(frozen=True, slots=True)
class QueryOptions:
    """Parsing and building options. Immutable after creation.

    All fields have the library defaults. Override what you need::

        opts = QueryOptions(param_separator=";", parse_convert_yes_no=True)
    """

    # Parsing and building
    param_separator: str = "&"
    value_separator: str = "="
    url_encode_and_decode: bool = True
    trim_whitespaces: bool = False
    skip_empty_param_names: bool = True  # drops "&&", "&=&" and "&=value&" when parsing

    # Parsing and lookup
    param_name_case_ignore: bool = True
    parse_convert_zero: bool = True  # a=0       -> {"a": 0}
    parse_convert_bool: bool = True  # a=true    -> {"a": True}
    parse_convert_yes_no: bool = False  # a=yes  -> {"a": True}
    parse_convert_null: bool = True  # a=null    -> {"a": None}
    parse_convert_undefined: bool = True  # a=undefined -> {"a": None}
    special_value_case_ignore: bool = False  # a=TRUE -> {"a": True}
    list_params_as_pairs: bool = False

    # Building
    build_skip_null: bool = False
    build_skip_undefined: bool = True
    build_convert_bool_to_num: bool = False  # {"a": True} -> a=1
    separate_empty_values: bool = True  # {"a": ""} -> a= (not a)
    query_question_mark: bool | Literal["auto"] = "auto"

    def __post_init__(self) -> None:
        for name in ("param_separator", "value_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                msg = f"{name} must be a non-empty string, got {value!r}"
                raise ConfigurationError(msg)

    def merge(
        self, overrides: "Overrides | QueryOptions | None" = None, /, **kwargs: Any
    ) -> "QueryOptions":
        """Return a new ``QueryOptions`` with *overrides* applied.

        ``self`` is never modified. Returns ``self`` when nothing is
        overridden.
        """
        changes = resolve_overrides(overrides, **kwargs)
        if not changes:
            return self
        return replace(self, **changes)

    def changed_by(
        self, overrides: "Overrides | QueryOptions | None" = None, /, **kwargs: Any
    ) -> frozenset[str]:
        """Option names whose override value differs from the value held here."""
        changes = resolve_overrides(overrides, **kwargs)
        return frozenset(
            name for name, value in changes.items() if _differs(getattr(self, name), value)
        )

    @property
    def separators_contain_boundary_chars(self) -> bool:
        """True when a separator contains ``?`` or ``#``.

        The query part of a URL cannot be delimited then, so the whole
        input is treated as query content.
        """
        return _has_boundary_char(self.param_separator) or _has_boundary_char(
            self.value_separator
        )

    def as_dict(self) -> dict[str, Any]:
        """Snake_case option names mapped to their values."""
        return asdict(self)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


OPTION_NAMES: tuple[str, ...] = tuple(f.name for f in fields(QueryOptions))
"""Every option name, in declaration order."""

OPTION_ALIASES: dict[str, str] = {_camel(name): name for name in OPTION_NAMES}
"""camelCase spelling -> field name."""

SEPARATOR_OPTIONS: frozenset[str] = frozenset({"param_separator", "value_separator"})

PARSE_OPTIONS: frozenset[str] = SEPARATOR_OPTIONS | {
    "url_encode_and_decode",
    "trim_whitespaces",
    "skip_empty_param_names",
    "parse_convert_zero",
    "parse_convert_bool",
    "parse_convert_yes_no",
    "parse_convert_null",
    "parse_convert_undefined",
    "special_value_case_ignore",
}
"""Options that change parser output; changing one obsoletes cached results."""

DEFAULT_OPTIONS = QueryOptions()


def resolve_overrides(
    overrides: "Overrides | QueryOptions | None" = None, /, **kwargs: Any
) -> dict[str, Any]:
    """Normalize an override mapping to ``{field_name: value}``.

    Unknown keys and absent values (``None``/``UNDEFINED``) are dropped.
    Keyword arguments win over the mapping. A ``QueryOptions`` instance is
    accepted too and overrides every option.
    """
    if isinstance(overrides, QueryOptions):
        overrides = overrides.as_dict()
    merged: dict[str, Any] = {}
    sources: list[Mapping[str, Any]] = [overrides or {}, kwargs]
    for source in sources:
        for key, value in source.items():
            name = key if key in OPTION_NAMES else OPTION_ALIASES.get(key)
            if name is None:
                logger.debug("Ignoring unknown option %r", key)
                continue
            if value is None or value is UNDEFINED:
                continue
            merged[name] = value
    return merged


def _differs(current: object, new: object) -> bool:
    # 1 and True are different option values
    return type(current) is not type(new) or current != new


def _has_boundary_char(separator: str) -> bool:
    return "?" in separator or "#" in separator
