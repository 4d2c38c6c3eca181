"""Query content parsing.

``parse_query`` turns query content into a ``ParsedQuery`` carrying several
index-aligned views of the same parameters::

    >>> result = parse_query("lowercase=aBc12&camelCase=dEf34", QueryOptions())
    >>> result.names
    ('lowercase', 'camelCase')
    >>> result.names_lc
    ('lowercase', 'camelcase')
    >>> result.params_lc["camelcase"]
    'dEf34'

The result is immutable, which is what makes it safe to share through the
params cache.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import unquote

from querykit._internal.types import Pairs, ParamValue
from querykit.coerce import coerce_value
from querykit.options import QueryOptions

_EMPTY: Mapping[str, ParamValue] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Every view of one parsed query content, in parse order.

    Attributes:
        names: Parameter names as decoded/trimmed, original case.
        names_lc: ``names`` lower-cased.
        values: Typed values.
        pairs: ``(name, value)`` tuples.
        pairs_lc: ``(lower-cased name, value)`` tuples.
        params: Name -> value. A later duplicate name overwrites an earlier one.
        params_lc: Lower-cased name -> value, same overwrite rule.

    The five sequences always have the same length. The two mappings are
    derived from ``pairs`` and ``pairs_lc`` and are read-only.
    """

    names: tuple[str, ...] = ()
    names_lc: tuple[str, ...] = ()
    values: tuple[ParamValue, ...] = ()
    pairs: tuple[tuple[str, ParamValue], ...] = ()
    pairs_lc: tuple[tuple[str, ParamValue], ...] = ()
    params: Mapping[str, ParamValue] = field(default_factory=lambda: _EMPTY)
    params_lc: Mapping[str, ParamValue] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_pairs(cls, pairs: Pairs) -> "ParsedQuery":
        """Build every view from ordered ``(name, value)`` pairs."""
        names = tuple(name for name, _ in pairs)
        names_lc = tuple(name.lower() for name in names)
        values = tuple(value for _, value in pairs)
        pairs_lc = tuple(zip(names_lc, values, strict=True))
        return cls(
            names=names,
            names_lc=names_lc,
            values=values,
            pairs=tuple(pairs),
            pairs_lc=pairs_lc,
            params=MappingProxyType(dict(pairs)),
            params_lc=MappingProxyType(dict(pairs_lc)),
        )

    def __len__(self) -> int:
        return len(self.names)

    def get_list(self, name: str, *, ignore_case: bool = False) -> list[ParamValue]:
        """Return all values for *name*, in parse order."""
        if ignore_case:
            wanted = name.lower()
            return [value for key, value in self.pairs_lc if key == wanted]
        return [value for key, value in self.pairs if key == name]

    def as_dict(self) -> dict[str, object]:
        """Plain-container copy of every view, keyed by view name."""
        return {
            "names": list(self.names),
            "names_lc": list(self.names_lc),
            "values": list(self.values),
            "pairs": [list(pair) for pair in self.pairs],
            "pairs_lc": [list(pair) for pair in self.pairs_lc],
            "params": dict(self.params),
            "params_lc": dict(self.params_lc),
        }


def normalize_name(name: str, options: QueryOptions) -> str:
    """Decode and trim a parameter name the way the parser does."""
    if options.url_encode_and_decode:
        name = unquote(name)
    if options.trim_whitespaces:
        name = name.strip()
    return name


def parse_query(content: str, options: QueryOptions) -> ParsedQuery:
    """Parse query *content* (no leading ``?``) under *options*."""
    pairs: Pairs = []
    for segment in content.split(options.param_separator):
        # empty segments ("a=1&&b=2") never become parameters
        if not segment:
            continue
        name, _, raw_value = segment.partition(options.value_separator)
        name = normalize_name(name, options)
        if options.url_encode_and_decode:
            raw_value = unquote(raw_value)
        if options.trim_whitespaces:
            raw_value = raw_value.strip()
        if options.skip_empty_param_names and not name:
            continue
        pairs.append((name, coerce_value(raw_value, options)))
    return ParsedQuery.from_pairs(pairs)
