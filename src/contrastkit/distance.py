"""CIE Lab conversion and CIE76 color difference for contrastkit.

Lab coordinates are computed directly from 8-bit sRGB (D65 white point) so the
gamma curve matches the one used for WCAG luminance. The Euclidean distance in
Lab (Delta E 1976) is then delegated to colour-science.

Delta E here is only a ranking signal for candidate colors; CIE76 is not
perceptually uniform and no stronger claim is made about it.
"""

from typing import NamedTuple, Sequence

import colour
import numpy as np

from .color_utils import hex_to_rgb
from .contrast import linearize_channel

__all__ = ["Lab", "rgb_to_xyz", "rgb_to_lab", "hex_to_lab", "delta_e"]

# Linear sRGB -> XYZ (D65). Rows X, Y, Z.
_SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)

# D65 reference white (Y normalized to 1)
_D65_WHITE = np.array([0.95047, 1.0, 1.08883])

_LAB_EPSILON = 0.008856
_LAB_KAPPA = 7.787


class Lab(NamedTuple):
    """CIE L*a*b* coordinates."""

    L: float
    a: float
    b: float


def rgb_to_xyz(rgb: Sequence[float]) -> np.ndarray:
    """Convert 8-bit sRGB to XYZ normalized by the D65 white point."""
    linear = np.array([linearize_channel(float(c) / 255.0) for c in rgb])
    return _SRGB_TO_XYZ @ linear / _D65_WHITE


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > _LAB_EPSILON, np.cbrt(t), _LAB_KAPPA * t + 16.0 / 116.0)


def rgb_to_lab(rgb: Sequence[float]) -> Lab:
    """Convert an 8-bit sRGB triple to CIE Lab."""
    fx, fy, fz = _lab_f(rgb_to_xyz(rgb))
    return Lab(
        float(116.0 * fy - 16.0),
        float(500.0 * (fx - fy)),
        float(200.0 * (fy - fz)),
    )


def hex_to_lab(hex_value: str) -> Lab:
    """Convert a hex color to CIE Lab."""
    return rgb_to_lab(hex_to_rgb(hex_value))


def delta_e(rgb1: Sequence[float], rgb2: Sequence[float]) -> float:
    """CIE76 color difference between two 8-bit sRGB colors."""
    lab1 = np.array(rgb_to_lab(rgb1))
    lab2 = np.array(rgb_to_lab(rgb2))
    return float(colour.difference.delta_E_CIE1976(lab1, lab2))
