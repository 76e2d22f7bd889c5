import logging

import numpy as np
import pytest

from synwell import config
from synwell import layers


@pytest.mark.parametrize("seed", range(20))
def test_random_boundaries_increase_within_interval(seed):
    rng = np.random.default_rng(seed)
    boundaries = layers.random_bed_boundaries([1350, 1380], rng=rng)

    assert np.shape(boundaries)[0] >= 1
    assert (np.diff(boundaries) > 0).all()
    assert boundaries[0] >= 1350 + 0.2
    assert boundaries[-1] < 1380
    # Consecutive boundaries are between 0.2 and 3.2 apart
    assert (np.diff(boundaries) >= 0.2).all()
    assert (np.diff(boundaries) <= 3.2).all()


def test_random_boundaries_reach_bottom_margin():
    boundaries = layers.random_bed_boundaries([0, 100], rng=np.random.default_rng(1))
    assert boundaries[-1] > 100 - 3.2


def test_random_boundaries_are_reproducible():
    first = layers.random_bed_boundaries([1350, 1380], rng=np.random.default_rng(42))
    second = layers.random_bed_boundaries([1350, 1380], rng=np.random.default_rng(42))
    np.testing.assert_array_equal(first, second)


def test_random_boundaries_reject_bad_limits():
    with pytest.raises(ValueError):
        layers.random_bed_boundaries([1380, 1350])
    with pytest.raises(ValueError):
        layers.random_bed_boundaries([1350])


def test_regular_boundaries():
    boundaries = layers.regular_bed_boundaries(1000, 2, 21)
    assert np.shape(boundaries)[0] == 22
    assert boundaries[0] == 1000
    assert boundaries[-1] == 1042
    np.testing.assert_allclose(np.diff(boundaries), 2)


def test_interleaved_boundaries():
    boundaries, reference, thin = layers.interleaved_bed_boundaries(1000, 15, 10, 1)

    assert np.shape(reference)[0] == 12
    assert np.shape(thin)[0] == 10
    assert np.shape(boundaries)[0] == 22
    assert (np.diff(boundaries) > 0).all()
    np.testing.assert_allclose(reference[1:11] - thin, 1)
    # Reference and thin layer boundaries alternate after the first one
    np.testing.assert_allclose(boundaries[1:-1:2], thin)


def test_interleaved_boundaries_reject_thick_layers():
    with pytest.raises(ValueError):
        layers.interleaved_bed_boundaries(1000, 15, 10, 15)


def test_check_bed_boundaries():
    np.testing.assert_array_equal(layers.check_bed_boundaries([1, 2, 3]), [1, 2, 3])
    layers.check_bed_boundaries([1000, 1042], [1000, 1042])
    with pytest.raises(ValueError):
        layers.check_bed_boundaries([1, 1, 2])
    with pytest.raises(ValueError):
        layers.check_bed_boundaries([3, 2])
    with pytest.raises(ValueError):
        layers.check_bed_boundaries([990, 1010], [1000, 1030])
    with pytest.raises(ValueError):
        layers.check_bed_boundaries([])


def test_interior_layer_indices():
    np.testing.assert_array_equal(layers.interior_layer_indices(4), [2, 3, 4])


def test_random_layer_properties():
    properties = layers.random_layer_properties(12, rng=np.random.default_rng(3))

    assert set(properties) == set(config.LAYER_PROPERTY_DISTRIBUTIONS)
    for values in properties.values():
        assert np.shape(values) == (12,)
        assert (values >= 0).all()


def test_random_layer_properties_follow_distribution():
    values = layers.jittered_values(50000, 0.22, 0.04, np.random.default_rng(0))
    assert np.mean(values) == pytest.approx(0.22, abs=0.002)
    assert np.std(values) == pytest.approx(0.04, abs=0.002)


def test_random_walk_fractions():
    for seed in range(10):
        fractions = layers.random_walk_fractions(40, rng=np.random.default_rng(seed))
        assert np.shape(fractions) == (40,)
        assert 0.8 <= fractions[0] <= 1.0
        assert (fractions <= 1).all()
        assert (fractions >= 0).all()


def test_binary_fractions():
    fractions = layers.binary_fractions([0.9, 0.75])
    np.testing.assert_allclose(fractions, [[0.9, 0.1], [0.75, 0.25]])
    np.testing.assert_allclose(fractions.sum(axis=1), 1)


@pytest.mark.parametrize("seed", range(10))
def test_random_boundaries_in_narrow_interval(seed):
    boundaries = layers.random_bed_boundaries([1350, 1352], rng=np.random.default_rng(seed))

    assert np.shape(boundaries)[0] >= 1
    assert boundaries[0] > 1350
    assert boundaries[-1] < 1352
    assert boundaries[0] <= 1351


def test_dropped_boundaries_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="synwell.layers")
    # Without a margin the loop always ends with a boundary below the interval
    boundaries = layers.random_bed_boundaries([0, 10], bottom_margin=0, rng=np.random.default_rng(2))

    assert boundaries[-1] < 10
    assert "Dropped 1 boundaries below the modeling interval" in caplog.text
