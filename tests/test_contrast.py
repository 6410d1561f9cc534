"""Tests for contrastkit.contrast module."""

from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contrastkit.contrast import (
    WCAGCompliance,
    calculate_wcag_compliance,
    contrast_ratio_from_luminance,
    get_contrast_ratio,
    get_readable_text_color,
    get_relative_luminance,
    is_large_text,
    linearize_channel,
)

hex_strategy = st.tuples(
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=0, max_value=255),
).map(lambda rgb: "#{:02x}{:02x}{:02x}".format(*rgb))


class TestRelativeLuminance:
    """Test the get_relative_luminance function."""

    def test_black_luminance(self):
        """Test luminance of pure black."""
        assert get_relative_luminance((0, 0, 0)) == 0.0

    def test_white_luminance(self):
        """Test luminance of pure white."""
        assert get_relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    def test_primaries(self):
        """Test the luminance weights of the primaries."""
        assert get_relative_luminance((255, 0, 0)) == pytest.approx(0.2126)
        assert get_relative_luminance((0, 255, 0)) == pytest.approx(0.7152)
        assert get_relative_luminance((0, 0, 255)) == pytest.approx(0.0722)

    def test_linearize_low_values(self):
        """Test linearization below the 0.03928 knee is linear."""
        assert linearize_channel(0.03) == pytest.approx(0.03 / 12.92)
        assert linearize_channel(0.03928) == pytest.approx(0.03928 / 12.92)

    def test_linearize_high_values(self):
        """Test linearization above the knee follows the power curve."""
        assert linearize_channel(0.5) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4)

    def test_fractional_channels(self):
        """Test unquantized channel values are accepted."""
        low = get_relative_luminance((127.0, 127.0, 127.0))
        mid = get_relative_luminance((127.5, 127.5, 127.5))
        high = get_relative_luminance((128.0, 128.0, 128.0))
        assert low < mid < high


class TestContrastRatio:
    """Test contrast ratio calculations."""

    def test_black_white(self):
        """Test the maximum ratio is 21."""
        assert get_contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
        assert contrast_ratio_from_luminance(0.0, 1.0) == pytest.approx(21.0)

    def test_reference_gray(self):
        """Test #767676 on white is just above 4.5:1."""
        ratio = get_contrast_ratio("#767676", "#ffffff")
        assert 4.5 < ratio < 4.6

    def test_non_canonical_input(self):
        """Test short and uppercase hex are normalized before measuring."""
        assert get_contrast_ratio("#000", "#FFF") == get_contrast_ratio("#000000", "#ffffff")

    @given(hex_strategy)
    def test_identity(self, color):
        """Test a color against itself has ratio 1."""
        assert get_contrast_ratio(color, color) == 1.0

    @given(hex_strategy, hex_strategy)
    def test_symmetry(self, a, b):
        """Test the ratio does not depend on argument order."""
        assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)

    @given(hex_strategy, hex_strategy)
    def test_range(self, a, b):
        """Test the ratio lies in [1, 21]."""
        assert 1.0 <= get_contrast_ratio(a, b) <= 21.0 + 1e-9


class TestWCAGCompliance:
    """Test the calculate_wcag_compliance function."""

    def test_reference_gray_end_to_end(self):
        """Test the compliance record for #767676 on white."""
        result = calculate_wcag_compliance(get_contrast_ratio("#767676", "#ffffff"))
        assert result == WCAGCompliance(
            normal_aa=True,
            normal_aaa=False,
            large_aa=True,
            large_aaa=True,
            graphics_aa=True,
        )

    def test_thresholds_are_inclusive(self):
        """Test each threshold passes at exactly its value."""
        at_three = calculate_wcag_compliance(3.0)
        assert at_three.large_aa and at_three.graphics_aa
        assert not at_three.normal_aa

        at_aa = calculate_wcag_compliance(4.5)
        assert at_aa.normal_aa and at_aa.large_aaa
        assert not at_aa.normal_aaa

        assert calculate_wcag_compliance(7.0).normal_aaa

    def test_all_fail(self):
        """Test a low ratio fails everything."""
        result = calculate_wcag_compliance(2.99)
        assert not any(result.to_dict().values())

    def test_to_dict(self):
        """Test the dictionary form has all five fields."""
        assert set(calculate_wcag_compliance(21.0).to_dict()) == {
            "normal_aa",
            "normal_aaa",
            "large_aa",
            "large_aaa",
            "graphics_aa",
        }


class TestIsLargeText:
    """Test the is_large_text function."""

    def test_regular(self):
        """Test regular text becomes large at 24px."""
        assert is_large_text(24, False)
        assert not is_large_text(23.9, False)

    def test_bold(self):
        """Test bold text becomes large at 18.66px."""
        assert is_large_text(18.66, True)
        assert not is_large_text(18.66, False)
        assert not is_large_text(18, True)


class TestReadableTextColor:
    """Test the get_readable_text_color function."""

    def test_light_background(self):
        """Test black is chosen on light backgrounds."""
        assert get_readable_text_color("#ffffff") == "#000000"
        assert get_readable_text_color("#f8fafc") == "#000000"

    def test_dark_background(self):
        """Test white is chosen on dark backgrounds."""
        assert get_readable_text_color("#000000") == "#ffffff"
        assert get_readable_text_color("#111827") == "#ffffff"

    @patch("contrastkit.contrast.get_contrast_ratio", return_value=4.0)
    def test_tie_favors_white(self, mock_ratio):
        """Test equal ratios resolve to white."""
        assert get_readable_text_color("#777777") == "#ffffff"
        assert mock_ratio.call_count == 2
