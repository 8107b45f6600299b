"""Pytest configuration and fixtures.

Canned computations for the three outcomes. Test doubles live in helpers.
"""

from __future__ import annotations

import pytest
from kungfu import Nothing, Some

from tests.helpers import Boom, Spy, raising
from tryoption import Absent, Failed, Outcome, Present


@pytest.fixture
def boom() -> Boom:
    return Boom("boom")


@pytest.fixture
def present_five() -> Spy:
    return Spy(lambda: Some(5))


@pytest.fixture
def nothing() -> Spy:
    return Spy(lambda: Nothing())


@pytest.fixture
def failing(boom: Boom) -> Spy:
    return Spy(raising(boom))


@pytest.fixture(params=["present", "absent", "failed"])
def any_outcome(request: pytest.FixtureRequest, boom: Boom) -> Outcome[int]:
    match request.param:
        case "present":
            return Present(3)
        case "absent":
            return Absent()
        case _:
            return Failed(boom)
