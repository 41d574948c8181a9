"""
Unit tests for boundary module.

Tests for Domain and size_domain: periodicity flags, open-axis sizing,
the three-cutoff minimum, and the minimum image convention.
"""
import dataclasses
import warnings

import numpy as np
import pytest

from elnet.boundary import Domain, check_dim, size_domain
from elnet.core.errors import BoxGrowthWarning, DimensionalityError


class TestSizeDomain:
    """Tests for size_domain."""

    def test_positive_length_is_periodic(self) -> None:
        """A positive raw length is kept and makes the axis periodic."""
        positions = np.array([[-4.9], [4.9]])
        with warnings.catch_warnings():
            warnings.simplefilter("error", BoxGrowthWarning)
            domain = size_domain([10.0], positions, cutoff=1.0)

        np.testing.assert_array_equal(domain.periodic, [True])
        np.testing.assert_array_almost_equal(domain.lengths, [10.0])

    def test_open_axis_encloses_coordinates(self) -> None:
        """An open axis grows to twice the largest |coordinate|."""
        positions = np.array([[0.0], [1.0], [-2.0]])
        domain = size_domain([-1.0], positions, cutoff=0.5)

        assert not domain.periodic[0]
        np.testing.assert_array_almost_equal(domain.lengths, [4.0])

    def test_open_axis_encloses_late_small_growth(self) -> None:
        """Every coordinate fits, not only those larger than the current L."""
        positions = np.array([[1.0], [1.5]])
        domain = size_domain([-1.0], positions, cutoff=0.1)
        assert domain.lengths[0] >= 3.0

    def test_zero_length_is_open(self) -> None:
        """Zero counts as unspecified."""
        positions = np.array([[0.0, 0.0, 0.0]])
        domain = size_domain([10.0, 0.0, -1.0], positions, cutoff=1.0)
        np.testing.assert_array_equal(domain.periodic, [True, False, False])

    def test_narrow_box_grows_with_warning(self) -> None:
        """A box narrower than 3 * Rc grows and warns."""
        positions = np.array([[0.0], [1.0], [2.0]])
        with pytest.warns(BoxGrowthWarning, match=r"L\[0\]"):
            domain = size_domain([-1.0], positions, cutoff=1.5)
        np.testing.assert_array_almost_equal(domain.lengths, [4.5])

    def test_narrow_periodic_box_grows(self) -> None:
        """Periodic axes are widened too and stay periodic."""
        positions = np.array([[0.0, 0.0]])
        with pytest.warns(BoxGrowthWarning):
            domain = size_domain([2.0, 10.0], positions, cutoff=1.0)
        np.testing.assert_array_almost_equal(domain.lengths, [3.0, 10.0])
        assert domain.periodic.all()

    def test_extra_raw_lengths_ignored(self) -> None:
        """Only the first D raw lengths are used."""
        positions = np.array([[0.0, 0.0]])
        domain = size_domain([5.0, 6.0, 7.0], positions, cutoff=1.0)
        assert domain.dim == 2
        np.testing.assert_array_almost_equal(domain.lengths, [5.0, 6.0])

    def test_no_particles(self) -> None:
        """An empty point set still gives a valid domain."""
        with pytest.warns(BoxGrowthWarning):
            domain = size_domain([-1.0, -1.0], np.empty((0, 2)), cutoff=1.0)
        np.testing.assert_array_almost_equal(domain.lengths, [3.0, 3.0])

    def test_too_few_raw_lengths(self) -> None:
        with pytest.raises(DimensionalityError):
            size_domain([10.0], np.zeros((2, 2)), cutoff=1.0)

    def test_invalid_dimensionality(self) -> None:
        with pytest.raises(DimensionalityError):
            size_domain([1.0] * 4, np.zeros((2, 4)), cutoff=1.0)

    def test_invalid_cutoff(self) -> None:
        with pytest.raises(ValueError):
            size_domain([10.0], np.zeros((2, 1)), cutoff=0.0)


class TestDomain:
    """Tests for Domain."""

    @pytest.fixture
    def mixed(self) -> Domain:
        """Periodic in X and Y, open in Z (slab geometry)."""
        return Domain(np.array([10.0, 10.0, 50.0]), np.array([True, True, False]))

    def test_minimum_image_wraps_periodic_axes(self, mixed: Domain) -> None:
        vector = np.array([[8.0, -7.0, 30.0]])
        result = mixed.minimum_image(vector)
        np.testing.assert_array_almost_equal(result, [[-2.0, 3.0, 30.0]])

    def test_minimum_image_does_not_modify_input(self, mixed: Domain) -> None:
        vector = np.array([[8.0, 0.0, 0.0]])
        mixed.minimum_image(vector)
        assert vector[0, 0] == 8.0

    def test_minimum_image_exactly_half(self) -> None:
        """floor(d/L + 0.5) maps +L/2 onto -L/2."""
        domain = Domain(np.array([10.0]), np.array([True]))
        result = domain.minimum_image(np.array([5.0]))
        assert result[0] == pytest.approx(-5.0)

    def test_minimum_image_far_images(self) -> None:
        """Displacements several boxes away are folded back."""
        domain = Domain(np.array([10.0]), np.array([True]))
        result = domain.minimum_image(np.array([[23.0], [-27.0]]))
        np.testing.assert_array_almost_equal(result, [[3.0], [3.0]])

    def test_distances_wrap(self) -> None:
        domain = Domain(np.array([10.0]), np.array([True]))
        r = domain.distances(np.array([-4.9]), np.array([[4.9]]))
        assert r[0] == pytest.approx(0.2)

    def test_distances_use_only_first_dim_components(self) -> None:
        """Extra components beyond D are never read."""
        domain = Domain(np.array([10.0]), np.array([False]))
        r = domain.distances(np.array([0.0, 100.0]), np.array([[1.0, -50.0]]))
        assert r[0] == pytest.approx(1.0)

    def test_arrays_read_only(self, mixed: Domain) -> None:
        with pytest.raises(ValueError):
            mixed.lengths[0] = 1.0

    def test_frozen(self, mixed: Domain) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            mixed.lengths = np.array([1.0, 1.0, 1.0])

    def test_mismatched_shapes(self) -> None:
        with pytest.raises(DimensionalityError):
            Domain(np.array([10.0, 10.0]), np.array([True]))

    @pytest.mark.parametrize("periodic,expected", [
        ((True, True, False), "Mixed(XY periodic)"),
        ((False, False, True), "Mixed(Z periodic)"),
        ((False, False, False), "Open"),
        ((True, True, True), "Periodic(XYZ)"),
    ])
    def test_get_name(self, periodic: tuple, expected: str) -> None:
        domain = Domain(np.array([10.0, 10.0, 10.0]), np.array(periodic))
        assert domain.get_name() == expected


class TestCheckDim:
    """Tests for check_dim."""

    @pytest.mark.parametrize("dim", [1, 2, 3])
    def test_valid(self, dim: int) -> None:
        assert check_dim(dim) == dim

    @pytest.mark.parametrize("dim", [0, 4, -1])
    def test_invalid(self, dim: int) -> None:
        with pytest.raises(DimensionalityError):
            check_dim(dim)
