"""Tests for contrastkit.distance module."""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from contrastkit.distance import Lab, delta_e, hex_to_lab, rgb_to_lab, rgb_to_xyz

rgb_255_strategy = st.tuples(
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=0, max_value=255),
)


class TestLabConversion:
    """Test sRGB to XYZ and Lab conversion."""

    def test_black(self):
        """Test black maps to the Lab origin."""
        assert rgb_to_lab((0, 0, 0)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_white(self):
        """Test white maps to L=100 with neutral a/b."""
        lab = rgb_to_lab((255, 255, 255))
        assert isinstance(lab, Lab)
        assert lab.L == pytest.approx(100.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.01)
        assert lab.b == pytest.approx(0.0, abs=0.01)

    def test_white_xyz_is_normalized(self):
        """Test the white point normalization of XYZ."""
        assert np.allclose(rgb_to_xyz((255, 255, 255)), [1.0, 1.0, 1.0], atol=1e-6)

    def test_red(self):
        """Test pure red against reference Lab values."""
        lab = rgb_to_lab((255, 0, 0))
        assert lab.L == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.1)
        assert lab.b == pytest.approx(67.20, abs=0.1)

    def test_hex_to_lab(self):
        """Test hex input is decoded before conversion."""
        assert hex_to_lab("#fff") == pytest.approx(rgb_to_lab((255, 255, 255)))

    @given(rgb_255_strategy)
    def test_lightness_range(self, rgb):
        """Test L stays within [0, 100] for in-gamut colors."""
        lab = rgb_to_lab(rgb)
        assert -1e-6 <= lab.L <= 100.0 + 1e-3
        assert np.all(np.isfinite(lab))


class TestDeltaE:
    """Test the delta_e function."""

    def test_identical(self):
        """Test identical colors have zero distance."""
        assert delta_e((10, 20, 30), (10, 20, 30)) == 0.0

    def test_black_white(self):
        """Test black to white spans the full lightness axis."""
        assert delta_e((0, 0, 0), (255, 255, 255)) == pytest.approx(100.0, abs=0.01)

    def test_ranking(self):
        """Test a near color ranks closer than a far one."""
        gray = (128, 128, 128)
        assert delta_e(gray, (130, 130, 130)) < delta_e(gray, (0, 0, 0))

    @given(rgb_255_strategy, rgb_255_strategy)
    def test_symmetry(self, a, b):
        """Test the distance is symmetric."""
        assert delta_e(a, b) == pytest.approx(delta_e(b, a))

    @given(rgb_255_strategy, rgb_255_strategy)
    def test_euclidean(self, a, b):
        """Test the distance equals the Euclidean norm in Lab."""
        expected = float(np.linalg.norm(np.array(rgb_to_lab(a)) - np.array(rgb_to_lab(b))))
        assert delta_e(a, b) == pytest.approx(expected)
