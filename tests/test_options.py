"""Tests for querykit.options — QueryOptions frozen dataclass and overrides."""

import pytest

from querykit._internal.types import UNDEFINED
from querykit.errors import ConfigurationError
from querykit.options import (
    DEFAULT_OPTIONS,
    OPTION_ALIASES,
    OPTION_NAMES,
    PARSE_OPTIONS,
    QueryOptions,
    resolve_overrides,
)


class TestQueryOptions:
    def test_defaults(self) -> None:
        opts = QueryOptions()

        assert opts.as_dict() == {
            "param_separator": "&",
            "value_separator": "=",
            "url_encode_and_decode": True,
            "trim_whitespaces": False,
            "skip_empty_param_names": True,
            "param_name_case_ignore": True,
            "parse_convert_zero": True,
            "parse_convert_bool": True,
            "parse_convert_yes_no": False,
            "parse_convert_null": True,
            "parse_convert_undefined": True,
            "special_value_case_ignore": False,
            "list_params_as_pairs": False,
            "build_skip_null": False,
            "build_skip_undefined": True,
            "build_convert_bool_to_num": False,
            "separate_empty_values": True,
            "query_question_mark": "auto",
        }

    def test_frozen(self) -> None:
        opts = QueryOptions()

        with pytest.raises(AttributeError):
            opts.param_separator = ";"  # type: ignore[misc]

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="param_separator"):
            QueryOptions(param_separator="")

    def test_non_string_separator_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="value_separator"):
            QueryOptions(value_separator=1)  # type: ignore[arg-type]

    def test_boundary_chars(self) -> None:
        assert QueryOptions().separators_contain_boundary_chars is False
        assert QueryOptions(param_separator="?").separators_contain_boundary_chars is True
        assert QueryOptions(value_separator="#=").separators_contain_boundary_chars is True


class TestAliases:
    def test_every_option_has_camel_alias(self) -> None:
        assert len(OPTION_ALIASES) == len(OPTION_NAMES) == 18
        assert OPTION_ALIASES["paramSeparator"] == "param_separator"
        assert OPTION_ALIASES["parseConvertYesNo"] == "parse_convert_yes_no"
        assert OPTION_ALIASES["buildConvertBoolToNum"] == "build_convert_bool_to_num"
        assert OPTION_ALIASES["queryQuestionMark"] == "query_question_mark"

    def test_parse_options_are_known(self) -> None:
        assert PARSE_OPTIONS <= set(OPTION_NAMES)
        assert "list_params_as_pairs" not in PARSE_OPTIONS
        assert "param_name_case_ignore" not in PARSE_OPTIONS


class TestResolveOverrides:
    def test_snake_and_camel(self) -> None:
        resolved = resolve_overrides({"paramSeparator": ";", "trim_whitespaces": True})
        assert resolved == {"param_separator": ";", "trim_whitespaces": True}

    def test_unknown_keys_ignored(self) -> None:
        assert resolve_overrides({"nonexistentOption": True}) == {}

    def test_absent_values_ignored(self) -> None:
        resolved = resolve_overrides({"param_separator": None, "trim_whitespaces": UNDEFINED})
        assert resolved == {}

    def test_kwargs_win(self) -> None:
        resolved = resolve_overrides({"param_separator": ";"}, param_separator="|")
        assert resolved == {"param_separator": "|"}

    def test_options_instance(self) -> None:
        resolved = resolve_overrides(QueryOptions(param_separator=";"))
        assert resolved["param_separator"] == ";"
        assert len(resolved) == 18


class TestMerge:
    def test_merge_returns_new_instance(self) -> None:
        base = QueryOptions()
        merged = base.merge({"paramSeparator": ";"})

        assert merged.param_separator == ";"
        assert base.param_separator == "&"

    def test_merge_without_overrides_is_identity(self) -> None:
        assert DEFAULT_OPTIONS.merge() is DEFAULT_OPTIONS
        assert DEFAULT_OPTIONS.merge({"unknown": 1}) is DEFAULT_OPTIONS

    def test_merge_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            DEFAULT_OPTIONS.merge(value_separator="")

    def test_changed_by(self) -> None:
        base = QueryOptions()
        changed = base.changed_by(
            {"url_encode_and_decode": True, "trim_whitespaces": True, "bogus": 1}
        )
        assert changed == frozenset({"trim_whitespaces"})

    def test_changed_by_is_type_strict(self) -> None:
        assert QueryOptions().changed_by(parse_convert_zero=1) == frozenset(
            {"parse_convert_zero"}
        )
