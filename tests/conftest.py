from random import Random

import pytest

from sort_utility import Series


@pytest.fixture
def rng():
    return Random(1234)


@pytest.fixture
def make_series():
    def make(popularities):
        return [Series(f"#{i}", p) for i, p in enumerate(popularities)]

    return make
