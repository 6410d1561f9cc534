"""Defaults, WCAG thresholds and search bounds for contrastkit."""

from dataclasses import dataclass

__all__ = [
    "DEFAULT_FOREGROUND",
    "DEFAULT_BACKGROUND",
    "WHITE",
    "BLACK",
    "AA_NORMAL_RATIO",
    "AAA_NORMAL_RATIO",
    "AA_LARGE_RATIO",
    "AAA_LARGE_RATIO",
    "GRAPHICS_AA_RATIO",
    "LARGE_TEXT_MIN_PX",
    "LARGE_BOLD_TEXT_MIN_PX",
    "SearchSettings",
    "DEFAULT_SEARCH_SETTINGS",
]

# Fallback pair applied when user input does not parse
DEFAULT_FOREGROUND = "#111827"
DEFAULT_BACKGROUND = "#f8fafc"

WHITE = "#ffffff"
BLACK = "#000000"

# WCAG 2.x minimum contrast ratios
AA_NORMAL_RATIO = 4.5
AAA_NORMAL_RATIO = 7.0
AA_LARGE_RATIO = 3.0
AAA_LARGE_RATIO = 4.5
GRAPHICS_AA_RATIO = 3.0

# Large text: 18pt (24px) regular or 14pt (~18.66px) bold
LARGE_TEXT_MIN_PX = 24.0
LARGE_BOLD_TEXT_MIN_PX = 18.66


@dataclass(frozen=True)
class SearchSettings:
    """Bounds for the lightness search used by the suggestion engine.

    Attributes:
        iterations: Number of bisection steps over fractional lightness.
        nudge_step: Lightness increment applied when 8-bit rounding lands a
            candidate just short of its target ratio.
        max_nudges: Maximum number of nudge steps before a candidate is dropped.
        levels: (ratio, level) pairs that are checked, weakest first.
    """

    iterations: int = 20
    nudge_step: float = 0.001
    max_nudges: int = 50
    levels: tuple[tuple[float, str], ...] = (
        (AA_NORMAL_RATIO, "AA"),
        (AAA_NORMAL_RATIO, "AAA"),
    )


DEFAULT_SEARCH_SETTINGS = SearchSettings()
