"""Relative luminance, contrast ratio and WCAG compliance for contrastkit.

Implements the WCAG 2.x definitions:

    linear(c) = c / 12.92                      if c <= 0.03928
              = ((c + 0.055) / 1.055) ** 2.4   otherwise
    L         = 0.2126 R + 0.7152 G + 0.0722 B
    ratio     = (L_lighter + 0.05) / (L_darker + 0.05)

The ratio ranges from 1 (identical luminance) to 21 (black against white).

Thresholds:
    - Normal text: AA 4.5:1, AAA 7:1
    - Large text (>= 24px, or >= 18.66px bold): AA 3:1, AAA 4.5:1
    - Graphical objects and UI components: AA 3:1

References:
    - https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    - https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from dataclasses import asdict, dataclass
from typing import Sequence

from .color_utils import hex_to_rgb
from .config import (
    AA_LARGE_RATIO,
    AA_NORMAL_RATIO,
    AAA_LARGE_RATIO,
    AAA_NORMAL_RATIO,
    BLACK,
    GRAPHICS_AA_RATIO,
    LARGE_BOLD_TEXT_MIN_PX,
    LARGE_TEXT_MIN_PX,
    WHITE,
)

__all__ = [
    "WCAGCompliance",
    "linearize_channel",
    "get_relative_luminance",
    "contrast_ratio_from_luminance",
    "get_contrast_ratio",
    "calculate_wcag_compliance",
    "is_large_text",
    "get_readable_text_color",
]


@dataclass(frozen=True)
class WCAGCompliance:
    """Pass/fail result for each WCAG contrast criterion."""

    normal_aa: bool
    normal_aaa: bool
    large_aa: bool
    large_aaa: bool
    graphics_aa: bool

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)


def linearize_channel(c: float) -> float:
    """Gamma-expand one sRGB channel given in [0, 1]."""
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def get_relative_luminance(rgb: Sequence[float]) -> float:
    """Compute the relative luminance of an sRGB color.

    Args:
        rgb: Three channel values on the 8-bit [0, 255] scale. Fractional
            values are accepted, which lets the suggestion search measure
            colors before they are quantized.

    Returns:
        Luminance in [0.0, 1.0]; 0 for black, 1 for white.

    Examples:
        >>> get_relative_luminance((0, 0, 0))
        0.0
        >>> round(get_relative_luminance((255, 0, 0)), 4)
        0.2126
    """
    r, g, b = (linearize_channel(float(c) / 255.0) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio_from_luminance(l1: float, l2: float) -> float:
    """Contrast ratio between two luminances, independent of argument order."""
    light = max(l1, l2)
    dark = min(l1, l2)
    return (light + 0.05) / (dark + 0.05)


def get_contrast_ratio(hex_a: str, hex_b: str) -> float:
    """Compute the WCAG contrast ratio between two hex colors.

    Symmetric in its arguments. Returns 1.0 for identical colors and 21.0 for
    black against white.
    """
    return contrast_ratio_from_luminance(
        get_relative_luminance(hex_to_rgb(hex_a)),
        get_relative_luminance(hex_to_rgb(hex_b)),
    )


def calculate_wcag_compliance(ratio: float) -> WCAGCompliance:
    """Classify a contrast ratio against every WCAG threshold."""
    return WCAGCompliance(
        normal_aa=ratio >= AA_NORMAL_RATIO,
        normal_aaa=ratio >= AAA_NORMAL_RATIO,
        large_aa=ratio >= AA_LARGE_RATIO,
        large_aaa=ratio >= AAA_LARGE_RATIO,
        graphics_aa=ratio >= GRAPHICS_AA_RATIO,
    )


def is_large_text(font_size: float, is_bold: bool) -> bool:
    """Whether text of ``font_size`` pixels counts as large text under WCAG."""
    return font_size >= LARGE_TEXT_MIN_PX or (
        is_bold and font_size >= LARGE_BOLD_TEXT_MIN_PX
    )


def get_readable_text_color(background: str) -> str:
    """Pick white or black, whichever reads better on ``background``; ties go to white."""
    white_ratio = get_contrast_ratio(WHITE, background)
    black_ratio = get_contrast_ratio(BLACK, background)
    return WHITE if white_ratio >= black_ratio else BLACK
