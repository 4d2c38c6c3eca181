"""Tests for querykit._internal.types — the UNDEFINED sentinel."""

import copy
import pickle

from querykit._internal.types import UNDEFINED, _Undefined


class TestUndefined:
    def test_singleton(self) -> None:
        assert _Undefined() is UNDEFINED

    def test_distinct_from_none(self) -> None:
        assert UNDEFINED is not None
        assert UNDEFINED != None  # noqa: E711

    def test_falsy(self) -> None:
        assert not UNDEFINED

    def test_repr(self) -> None:
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_copy_and_pickle_keep_identity(self) -> None:
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED
