"""contrastkit - WCAG contrast checking and accessible color suggestions"""

__version__ = "0.1.0"

from .analysis import ContrastReport, analyze_contrast
from .color_utils import (
    HSL,
    HSV,
    RGB,
    ParsedColor,
    alpha_blend,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    is_valid_partial_hex,
    normalize_hex,
    normalize_with_alpha,
    parse_color,
    parse_color_with_alpha,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
)
from .contrast import (
    WCAGCompliance,
    calculate_wcag_compliance,
    get_contrast_ratio,
    get_readable_text_color,
    get_relative_luminance,
    is_large_text,
)
from .distance import Lab, delta_e, rgb_to_lab
from .suggestions import (
    ColorSuggestion,
    SuggestionOutcome,
    search_accessible_colors,
    suggest_accessible_colors,
)

__all__ = [
    "RGB",
    "HSL",
    "HSV",
    "Lab",
    "ParsedColor",
    "WCAGCompliance",
    "ColorSuggestion",
    "SuggestionOutcome",
    "ContrastReport",
    "parse_color",
    "parse_color_with_alpha",
    "normalize_hex",
    "normalize_with_alpha",
    "is_valid_partial_hex",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "alpha_blend",
    "get_relative_luminance",
    "get_contrast_ratio",
    "calculate_wcag_compliance",
    "is_large_text",
    "get_readable_text_color",
    "rgb_to_lab",
    "delta_e",
    "search_accessible_colors",
    "suggest_accessible_colors",
    "analyze_contrast",
]
