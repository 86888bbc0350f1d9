"""Tests for lattice hash, value noise and fBm."""

import math

import numpy as np
import pytest

from py_hexmap.core.noise import (
    NoiseField,
    fbm,
    fbm_field,
    hash_2d,
    hash_field,
    smooth,
    value_noise,
    value_noise_field,
)


class TestHash2D:
    """Test the sine-based lattice hash."""

    def test_origin_with_zero_seed(self):
        """sin(0) is 0 so the hash is exactly 0."""
        assert hash_2d(0, 0, 0.0) == 0.0

    def test_matches_formula(self):
        """Test hash against the fractional part of the scaled sine."""
        for x, y, seed in [(1, 2, 0.0), (7, 11, 1234.5), (-3, 5, 42.0)]:
            raw = math.sin(x * 12.9898 + y * 78.233 + seed) * 43758.5453
            assert hash_2d(x, y, seed) == pytest.approx(raw - math.floor(raw))

    def test_range(self):
        """Test that all hash values are in [0, 1)."""
        for seed in (0.0, 1.5, 9999.0):
            for x in range(-20, 20):
                for y in range(-20, 20):
                    value = hash_2d(x, y, seed)
                    assert 0.0 <= value < 1.0

    def test_deterministic(self):
        """Same inputs give the same output."""
        assert hash_2d(13, 17, 321.0) == hash_2d(13, 17, 321.0)

    def test_seed_changes_output(self):
        values = {hash_2d(5, 9, seed) for seed in (1.0, 2.0, 3.0, 4.0)}
        assert len(values) == 4


class TestSmooth:
    """Test the cubic ease curve."""

    def test_endpoints(self):
        assert smooth(0.0) == 0.0
        assert smooth(1.0) == 1.0

    def test_midpoint(self):
        assert smooth(0.5) == pytest.approx(0.5)

    def test_monotonic(self):
        ts = np.linspace(0.0, 1.0, 101)
        assert np.all(np.diff(smooth(ts)) >= 0)


class TestValueNoise:
    """Test bilinear value noise."""

    def test_lattice_points_equal_hash(self):
        """At integer coordinates the noise is the corner hash."""
        seed = 77.0
        for x in range(-3, 4):
            for y in range(-3, 4):
                assert value_noise(x, y, seed) == pytest.approx(hash_2d(x, y, seed))

    def test_range(self):
        seed = 512.25
        for x in np.linspace(-5.0, 5.0, 41):
            for y in np.linspace(-5.0, 5.0, 41):
                assert 0.0 <= value_noise(x, y, seed) < 1.0

    def test_between_corners(self):
        """Interpolated values stay within the four corner values."""
        seed = 3.0
        corners = [hash_2d(2, 4, seed), hash_2d(3, 4, seed), hash_2d(2, 5, seed), hash_2d(3, 5, seed)]
        value = value_noise(2.37, 4.81, seed)
        assert min(corners) - 1e-12 <= value <= max(corners) + 1e-12


class TestFbm:
    """Test fractal Brownian motion."""

    def test_single_octave_is_value_noise(self):
        seed = 10.0
        assert fbm(0.3, 0.7, seed, 1) == pytest.approx(value_noise(0.3, 0.7, seed))

    @pytest.mark.parametrize("octaves", [1, 2, 3, 4, 6])
    def test_range(self, octaves):
        """Test that fbm stays in [0, 1) for any octave count."""
        seed = 4242.0
        for x in np.linspace(0.0, 3.0, 25):
            for y in np.linspace(0.0, 3.0, 25):
                value = fbm(x, y, seed, octaves)
                assert 0.0 <= value < 1.0

    def test_at_origin_equals_origin_hash(self):
        """Every octave samples the same lattice corner at the origin."""
        seed = 987.0
        assert fbm(0.0, 0.0, seed, 4) == pytest.approx(hash_2d(0, 0, seed))


class TestVectorisedNoise:
    """Test that array variants agree with the scalar functions."""

    def setup_method(self):
        self.seed = 2024.5
        ys, xs = np.mgrid[0:12, 0:15]
        self.xs = xs.astype(np.float64)
        self.ys = ys.astype(np.float64)

    def test_hash_field(self):
        field = hash_field(self.xs * 7, self.ys * 11, self.seed)
        for (r, c), value in np.ndenumerate(field):
            assert value == pytest.approx(hash_2d(c * 7, r * 11, self.seed), abs=1e-6)

    def test_value_noise_field(self):
        field = value_noise_field(self.xs / 3.0, self.ys / 3.0, self.seed)
        for (r, c), value in np.ndenumerate(field):
            assert value == pytest.approx(value_noise(c / 3.0, r / 3.0, self.seed), abs=1e-6)

    def test_fbm_field(self):
        field = fbm_field(self.xs / 50, self.ys / 50, self.seed, 4)
        assert field.shape == self.xs.shape
        for (r, c), value in np.ndenumerate(field):
            assert value == pytest.approx(fbm(c / 50, r / 50, self.seed, 4), abs=1e-6)

    def test_fbm_field_range(self):
        field = fbm_field(self.xs / 4.0, self.ys / 4.0, self.seed, 5)
        assert np.all(field >= 0.0)
        assert np.all(field < 1.0)


class TestNoiseField:
    """Test the seed-bound noise object."""

    def test_binds_seed(self):
        field = NoiseField(55.0)
        assert field.seed == 55.0
        assert field.hash_2d(3, 4) == hash_2d(3, 4, 55.0)
        assert field.value_noise(1.25, 2.5) == value_noise(1.25, 2.5, 55.0)
        assert field.fbm(0.4, 0.9, 3) == fbm(0.4, 0.9, 55.0, 3)

    def test_different_seeds_differ(self):
        a = NoiseField(1.0).fbm_field(np.arange(10.0) / 5, np.zeros(10), 4)
        b = NoiseField(2.0).fbm_field(np.arange(10.0) / 5, np.zeros(10), 4)
        assert not np.array_equal(a, b)
