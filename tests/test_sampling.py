"""
Unit tests for the random sampler and the point generators.
"""

import numpy as np
import pytest

from geomeff_simulation import (
    InvalidConfiguration,
    PointBatch,
    RandomSampler,
    SizeMismatch,
    SourceProfile,
    generate_circular,
    generate_gaussian,
    generate_isotropic,
    generate_source,
)


class TestRandomSampler:
    """Seeded sampler"""

    def test_same_seed_same_sequence(self):
        """Two samplers with the same seed draw identical values"""
        a = RandomSampler(42)
        b = RandomSampler(42)
        np.testing.assert_array_equal(a.uniform(0, 1, 100), b.uniform(0, 1, 100))
        np.testing.assert_array_equal(a.normal(0, 2, 100), b.normal(0, 2, 100))

    def test_stream_zero_is_plain_seed(self):
        np.testing.assert_array_equal(
            RandomSampler(42, stream=0).uniform(0, 1, 50), RandomSampler(42).uniform(0, 1, 50)
        )

    def test_streams_differ(self):
        """Chunks of one evaluation draw different values from the same seed"""
        first = RandomSampler(42, stream=0).uniform(0, 1, 50)
        second = RandomSampler(42, stream=1).uniform(0, 1, 50)
        assert not np.array_equal(first, second)
        np.testing.assert_array_equal(second, RandomSampler(42, stream=1).uniform(0, 1, 50))

    def test_draw_order_matters(self):
        """The second block of draws differs from the first"""
        sampler = RandomSampler(42)
        first = sampler.uniform(0, 1, 10)
        second = sampler.uniform(0, 1, 10)
        assert not np.array_equal(first, second)

    def test_reseed_restarts_sequence(self):
        """Reseeding restarts the sequence from the beginning"""
        sampler = RandomSampler(7)
        first = sampler.uniform(0, 1, 10)
        sampler.reseed(7)
        np.testing.assert_array_equal(sampler.uniform(0, 1, 10), first)

    def test_negative_seed(self):
        """Any integer is a valid seed"""
        np.testing.assert_array_equal(
            RandomSampler(-1).uniform(0, 1, 5),
            RandomSampler(2 ** 64 - 1).uniform(0, 1, 5),
        )

    def test_uniform_range(self):
        """Uniform draws stay in [low, high)"""
        values = RandomSampler(1).uniform(2.0, 3.0, 1000)
        assert np.all(values >= 2.0)
        assert np.all(values < 3.0)


class TestPointBatch:
    """Point batch container"""

    def test_empty(self):
        """An empty batch has the requested size and zero coordinates"""
        batch = PointBatch.empty(5)
        assert len(batch) == 5
        np.testing.assert_array_equal(batch.x, np.zeros(5))
        np.testing.assert_array_equal(batch.y, np.zeros(5))

    def test_unequal_lengths(self):
        """Coordinates of different lengths are rejected"""
        with pytest.raises(SizeMismatch):
            PointBatch(np.zeros(3), np.zeros(4))

    def test_negative_size(self):
        with pytest.raises(InvalidConfiguration):
            PointBatch.empty(-1)


class TestGenerators:
    """Source and emission generators"""

    @pytest.mark.parametrize("n", [0, 1, 17, 1000])
    @pytest.mark.parametrize("generator", [generate_circular, generate_gaussian, generate_isotropic])
    def test_batch_size(self, generator, n):
        """Generators fill exactly N points"""
        batch = generator(PointBatch.empty(n), 0.5, 3)
        assert len(batch) == n
        assert batch.x.size == batch.y.size == n

    def test_fills_in_place(self):
        """The batch passed in is the one returned and filled"""
        batch = PointBatch.empty(10)
        out = generate_circular(batch, 1.0, 3)
        assert out is batch
        assert np.any(batch.x != 0.0)

    def test_circular_inside_radius(self):
        """Uniform disc points lie inside the radius"""
        radius = 0.3
        batch = generate_circular(PointBatch.empty(10000), radius, 11)
        r_sq = batch.x ** 2 + batch.y ** 2
        assert np.all(r_sq <= radius ** 2 * (1.0 + 1e-12))

    def test_circular_area_uniform(self):
        """A quarter of the points fall inside half the radius"""
        batch = generate_circular(PointBatch.empty(40000), 1.0, 5)
        fraction = np.mean(batch.x ** 2 + batch.y ** 2 <= 0.25)
        assert abs(fraction - 0.25) < 0.01

    def test_circular_seed_dependence(self):
        """Different seeds give different points"""
        a = generate_circular(PointBatch.empty(100), 1.0, 1)
        b = generate_circular(PointBatch.empty(100), 1.0, 2)
        assert not np.array_equal(a.x, b.x)

    def test_circular_reproducible(self):
        a = generate_circular(PointBatch.empty(100), 1.0, 9)
        b = generate_circular(PointBatch.empty(100), 1.0, 9)
        np.testing.assert_array_equal(a.x, b.x)
        np.testing.assert_array_equal(a.y, b.y)

    def test_gaussian_signed_radius(self):
        """Gaussian points use the signed normal draw as radius"""
        seed, sigma, n = 21, 0.4, 500
        batch = generate_gaussian(PointBatch.empty(n), sigma, seed)

        sampler = RandomSampler(seed)
        phi = sampler.uniform(0.0, 2.0 * np.pi, n)
        r = sampler.normal(0.0, sigma, n)
        assert np.any(r < 0.0)
        np.testing.assert_allclose(batch.x, r * np.cos(phi))
        np.testing.assert_allclose(batch.y, r * np.sin(phi))

    def test_gaussian_zero_sigma(self):
        """A zero sigma is a point source at the origin"""
        batch = generate_gaussian(PointBatch.empty(50), 0.0, 4)
        np.testing.assert_array_equal(batch.x, np.zeros(50))
        np.testing.assert_array_equal(batch.y, np.zeros(50))

    def test_isotropic_formula(self):
        """Emission offsets follow z tan(acos(1 - 2u))"""
        seed, z, n = 8, 2.0, 300
        batch = generate_isotropic(PointBatch.empty(n), z, seed)

        sampler = RandomSampler(seed)
        phi = sampler.uniform(0.0, 2.0 * np.pi, n)
        theta = np.arccos(1.0 - 2.0 * sampler.uniform(0.0, 1.0, n))
        np.testing.assert_allclose(batch.x, z * np.tan(theta) * np.cos(phi))
        np.testing.assert_allclose(batch.y, z * np.tan(theta) * np.sin(phi))

    def test_isotropic_zero_distance(self):
        """At z = 0 every ray lands on the source position"""
        batch = generate_isotropic(PointBatch.empty(1000), 0.0, 3)
        np.testing.assert_array_equal(batch.x ** 2 + batch.y ** 2, np.zeros(1000))

    def test_isotropic_solid_angle(self):
        """At z = 1 the unit disc catches 1 - 1/sqrt(2) of the full sphere"""
        n = 40000
        batch = generate_isotropic(PointBatch.empty(n), 1.0, 13)
        fraction = np.mean(batch.x ** 2 + batch.y ** 2 <= 1.0)
        assert abs(fraction - (1.0 - 1.0 / np.sqrt(2.0))) < 0.01

    def test_generate_source_dispatch(self):
        """Source profiles dispatch to the matching generator"""
        expected = generate_gaussian(PointBatch.empty(20), 0.2, 6)
        batch = generate_source(PointBatch.empty(20), SourceProfile.gaussian(0.2), 6)
        np.testing.assert_array_equal(batch.x, expected.x)

        expected = generate_circular(PointBatch.empty(20), 0.2, 6)
        batch = generate_source(PointBatch.empty(20), SourceProfile.uniform(0.2), 6)
        np.testing.assert_array_equal(batch.x, expected.x)

    def test_generate_source_invalid(self):
        """Anything that is not a source profile is rejected"""
        with pytest.raises(InvalidConfiguration):
            generate_source(PointBatch.empty(5), "square", 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
