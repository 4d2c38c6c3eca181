"""Tests for querykit.coerce — special value conversion."""

import pytest

from querykit.coerce import coerce_value
from querykit.options import QueryOptions

ALL_OFF = QueryOptions(
    parse_convert_zero=False,
    parse_convert_bool=False,
    parse_convert_null=False,
    parse_convert_undefined=False,
)


class TestDefaults:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("false", False),
            ("null", None),
            ("undefined", None),
            ("0", 0),
            ("0.0", "0.0"),
            ("00", "00"),
            ("1", "1"),
            ("yes", "yes"),
            ("no", "no"),
            ("True", "True"),
            ("NULL", "NULL"),
            ("", ""),
        ],
    )
    def test_value(self, raw: str, expected: object) -> None:
        assert coerce_value(raw, QueryOptions()) == expected

    def test_bool_is_real_bool(self) -> None:
        assert coerce_value("true", QueryOptions()) is True
        assert coerce_value("false", QueryOptions()) is False

    def test_zero_is_int(self) -> None:
        value = coerce_value("0", QueryOptions())
        assert value == 0
        assert type(value) is int


class TestGating:
    @pytest.mark.parametrize("raw", ["0", "true", "false", "null", "undefined"])
    def test_all_flags_off(self, raw: str) -> None:
        assert coerce_value(raw, ALL_OFF) == raw

    def test_yes_no_enabled(self) -> None:
        opts = QueryOptions(parse_convert_yes_no=True)
        assert coerce_value("yes", opts) is True
        assert coerce_value("no", opts) is False

    def test_undefined_only(self) -> None:
        opts = QueryOptions(parse_convert_null=False)
        assert coerce_value("undefined", opts) is None
        assert coerce_value("null", opts) == "null"


class TestCaseIgnore:
    def test_specials_fold_case(self) -> None:
        opts = QueryOptions(special_value_case_ignore=True, parse_convert_yes_no=True)
        assert coerce_value("TRUE", opts) is True
        assert coerce_value("fAlSe", opts) is False
        assert coerce_value("YES", opts) is True
        assert coerce_value("NuLl", opts) is None
        assert coerce_value("Undefined", opts) is None

    def test_original_case_kept_for_plain_strings(self) -> None:
        opts = QueryOptions(special_value_case_ignore=True)
        assert coerce_value("MixedCase", opts) == "MixedCase"
