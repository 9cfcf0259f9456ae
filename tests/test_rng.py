"""Tests for the module-wide random source."""

import pytest

from polyring import rng
from polyring.field import FieldElement


def test_seed_is_reproducible():
    rng.set_seed(11)
    first = [rng.randbelow(1000) for _ in range(5)]
    rng.set_seed(11)
    second = [rng.randbelow(1000) for _ in range(5)]
    assert first == second
    assert rng.get_seed() == 11
    rng.set_seed(None)


def test_unseeded_stays_in_range():
    rng.set_seed(None)
    assert rng.get_seed() is None
    for _ in range(20):
        assert 0 <= rng.randbelow(3) < 3


def test_non_positive_bound():
    with pytest.raises(ValueError):
        rng.randbelow(0)


def test_field_sampling_follows_seed():
    rng.set_seed(3)
    a = FieldElement.random_including_zero()
    rng.set_seed(3)
    assert FieldElement.random_including_zero() == a
    rng.set_seed(None)
