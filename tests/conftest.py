"""Shared test fixtures."""

import pytest

from pyduration import Duration


@pytest.fixture
def zero_duration():
    return Duration()


@pytest.fixture
def day_and_a_half():
    return Duration(days=1, hours=12)
