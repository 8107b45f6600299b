from __future__ import annotations

import logging

import pytest
from kungfu import Nothing, Some

from tests.helpers import Boom, Spy, raising, unwrap_tagged
from tryoption import Absent, Failed, InvalidOutcomeError, Present, TryOption, guard, invoke

pytestmark = pytest.mark.unit


def test_invoke_some_is_present() -> None:
    assert invoke(lambda: Some(5)) == Present(5)


def test_invoke_nothing_is_absent() -> None:
    assert invoke(lambda: Nothing()) == Absent()


def test_invoke_captures_raised_error(boom: Boom) -> None:
    assert invoke(raising(boom)) == Failed(boom)


def test_invoke_passes_nested_outcome_through(boom: Boom) -> None:
    assert invoke(lambda: Failed(boom)) == Failed(boom)
    assert invoke(lambda: Present(1)) == Present(1)
    assert invoke(lambda: Absent()) == Absent()


@pytest.mark.parametrize("returned", [5, None, "text", [1]])
def test_invoke_rejects_bare_values_as_failure(returned: object) -> None:
    outcome = invoke(lambda: returned)
    assert isinstance(outcome, Failed)
    assert isinstance(outcome.error, InvalidOutcomeError)
    assert outcome.error.returned is returned


def test_invoke_non_callable_is_failure() -> None:
    outcome = invoke(42)  # type: ignore[arg-type]
    assert isinstance(outcome, Failed)
    assert isinstance(outcome.error, TypeError)


def test_invoke_lets_keyboard_interrupt_through() -> None:
    with pytest.raises(KeyboardInterrupt):
        invoke(raising(KeyboardInterrupt()))  # type: ignore[arg-type]


def test_computation_is_not_memoized() -> None:
    counter = iter(range(10))
    c = TryOption(lambda: Some(next(counter)))
    assert c() == Present(0)
    assert c() == Present(1)


def test_definition_does_not_run_computation() -> None:
    spy = Spy(lambda: Some(1))
    TryOption(spy).map(lambda x: x + 1)
    assert spy.count == 0


def test_guard_ok_and_error(boom: Boom) -> None:
    assert unwrap_tagged(guard(lambda a, b: a + b, 1, 2)) == ("ok", 3)
    assert unwrap_tagged(guard(raising(boom), 1)) == ("error", boom)


def test_boundary_logs_captures_at_debug(caplog: pytest.LogCaptureFixture, boom: Boom) -> None:
    with caplog.at_level(logging.DEBUG, logger="tryoption.boundary"):
        invoke(raising(boom))
    assert any("Boom" in record.getMessage() for record in caplog.records)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
