# tests/conftest.py
import random

import pytest

from field import Field


class ConstantRandom(random.Random):
    """
    A random source whose random() always returns the same value. Integer draws
    and shuffles are derived from random(), so they are fixed as well.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(0)

    def random(self):
        return self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def always_rng():
    """Every probability roll succeeds and every integer draw is 0."""
    return ConstantRandom(0.0)


@pytest.fixture
def never_rng():
    """Every probability roll below 1 fails."""
    return ConstantRandom(0.999)


@pytest.fixture
def constant_rng():
    return ConstantRandom


@pytest.fixture
def field(rng):
    return Field(10, 10, rng)
