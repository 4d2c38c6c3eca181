"""Tests for querykit.context — ambient current URL."""

from querykit import api
from querykit.context import current_url_var, get_current_url, use_url


class TestCurrentUrl:
    def test_unset_is_empty(self) -> None:
        assert get_current_url() == ""

    def test_set_and_get(self) -> None:
        token = current_url_var.set("http://example.com/?a=1")
        try:
            assert get_current_url() == "http://example.com/?a=1"
        finally:
            current_url_var.reset(token)
        assert get_current_url() == ""

    def test_use_url(self) -> None:
        with use_url("http://example.com/?page=2") as url:
            assert url == "http://example.com/?page=2"
            assert api.get_query_param("page") == "2"
            assert api.list_query_params() == {"page": "2"}
        assert get_current_url() == ""

    def test_nested(self) -> None:
        with use_url("?a=outer"):
            with use_url("?a=inner"):
                assert api.get_query_param("a") == "inner"
            assert api.get_query_param("a") == "outer"

    def test_explicit_url_wins(self) -> None:
        with use_url("?a=ambient"):
            assert api.get_query_param("a", "?a=explicit") == "explicit"
