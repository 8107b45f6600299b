from __future__ import annotations

import pytest

from tests.helpers import Boom, Spy, unwrap_tagged
from tryoption import TryOption, tagged, to_list, to_tuple

pytestmark = pytest.mark.unit


def test_present_yields_one_ok(present_five: Spy) -> None:
    assert [unwrap_tagged(item) for item in tagged(present_five)] == [("ok", 5)]


def test_failed_yields_one_error(failing: Spy, boom: Boom) -> None:
    assert [unwrap_tagged(item) for item in tagged(failing)] == [("error", boom)]


def test_absent_yields_nothing(nothing: Spy) -> None:
    assert to_list(nothing) == []
    assert to_tuple(nothing) == ()


def test_tagged_is_lazy(present_five: Spy) -> None:
    items = tagged(present_five)
    assert present_five.count == 0
    next(items)
    assert present_five.count == 1


def test_tagged_is_one_shot(present_five: Spy) -> None:
    items = tagged(present_five)
    assert len(list(items)) == 1
    assert list(items) == []
    assert present_five.count == 1


def test_drain_to_collections(present_five: Spy) -> None:
    c = TryOption(present_five)
    assert [unwrap_tagged(i) for i in c.to_list()] == [("ok", 5)]
    assert [unwrap_tagged(i) for i in c.to_tuple()] == [("ok", 5)]
    assert len(list(c.tagged())) == 1
