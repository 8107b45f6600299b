from __future__ import annotations

import pytest
from kungfu import Nothing, Some

from tests.helpers import Boom, Spy, raising
from tryoption import Absent, Failed, Present, TryOption, fmap, map_option

pytestmark = pytest.mark.unit


def test_map_present_value(present_five: Spy) -> None:
    assert fmap(present_five, lambda x: x * 2)() == Present(10)


def test_map_invokes_source_once_per_invocation(present_five: Spy) -> None:
    mapped = fmap(present_five, lambda x: x + 1)
    mapped()
    mapped()
    assert present_five.count == 2


def test_map_skips_mapper_on_absent(nothing: Spy) -> None:
    mapper = Spy(lambda x: x)
    assert fmap(nothing, mapper)() == Absent()
    assert mapper.count == 0


def test_map_propagates_same_failure(failing: Spy, boom: Boom) -> None:
    mapper = Spy(lambda x: x)
    assert fmap(failing, mapper)() == Failed(boom)
    assert mapper.count == 0


def test_map_captures_mapper_error() -> None:
    err = Boom("mapper")
    assert fmap(lambda: Some(3), raising(err))() == Failed(err)


def test_map_does_not_coerce_none_result() -> None:
    assert fmap(lambda: Some(3), lambda _: None)() == Present(None)


def test_failure_mid_pipeline_stops_later_stages() -> None:
    err = Boom("stage 2")
    late = Spy(lambda x: x)
    pipeline = TryOption(lambda: Some(1)).map(lambda x: x + 1).map(raising(err)).map(late)
    assert pipeline() == Failed(err)
    assert late.count == 0


def test_map_option_runs_on_absent(nothing: Spy) -> None:
    selector = Spy(lambda opt: Some("filled") if isinstance(opt, Nothing) else opt)
    assert map_option(nothing, selector)() == Present("filled")
    assert selector.count == 1


def test_map_option_can_empty_a_present_value() -> None:
    assert map_option(lambda: Some(1), lambda _: Nothing())() == Absent()


def test_map_option_skips_failed(failing: Spy, boom: Boom) -> None:
    selector = Spy(lambda opt: opt)
    assert map_option(failing, selector)() == Failed(boom)
    assert selector.count == 0


def test_map_option_captures_selector_error() -> None:
    err = Boom("select")
    assert map_option(lambda: Some(1), raising(err))() == Failed(err)


def test_method_and_function_agree(present_five: Spy) -> None:
    assert TryOption(present_five).map(str)() == fmap(present_five, str)()
