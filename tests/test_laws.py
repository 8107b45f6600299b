"""Property tests for composition laws across all three outcomes."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.helpers import Boom, Spy, unwrap_tagged
from tryoption import Absent, Failed, Outcome, Present, bind, count, fmap, fold, forall, tagged

pytestmark = pytest.mark.unit

outcomes = st.one_of(
    st.integers().map(Present),
    st.just(Absent()),
    st.text(max_size=8).map(lambda m: Failed(Boom(m))),
)

functions = st.sampled_from([lambda x: x + 1, lambda x: x * 2, lambda x: -x, str, repr])
int_functions = st.sampled_from([lambda x: x + 1, lambda x: x * 2, lambda x: -x, abs])


@given(outcome=outcomes, f=int_functions, g=functions)
def test_map_fusion(outcome: Outcome[int], f, g) -> None:
    c = lambda: outcome  # noqa: E731
    assert fmap(fmap(c, f), g)() == fmap(c, lambda x: g(f(x)))()


@given(outcome=outcomes)
def test_bind_calls_binder_only_when_present(outcome: Outcome[int]) -> None:
    binder = Spy(lambda x: lambda: Present(x + 1))
    result = bind(lambda: outcome, binder)()
    match outcome:
        case Present(value):
            assert binder.count == 1
            assert result == Present(value + 1)
        case _:
            assert binder.count == 0
            assert result == outcome


@given(outcome=outcomes, seed=st.integers())
def test_queries_treat_absent_and_failed_as_empty(outcome: Outcome[int], seed: int) -> None:
    c = lambda: outcome  # noqa: E731
    if isinstance(outcome, Present):
        assert count(c) == 1
        assert fold(c, seed, lambda s, x: s + x) == seed + outcome.value
    else:
        assert count(c) == 0
        assert forall(c, lambda _: True) is False
        assert fold(c, seed, lambda s, x: s + x) == seed


@given(outcome=outcomes)
def test_tagged_length_and_tag(outcome: Outcome[int]) -> None:
    items = [unwrap_tagged(item) for item in tagged(lambda: outcome)]
    match outcome:
        case Present(value):
            assert items == [("ok", value)]
        case Absent():
            assert items == []
        case Failed(error):
            assert items == [("error", error)]
