"""Accessible color suggestions for failing foreground/background pairs.

When a pair misses the WCAG AA (4.5:1) or AAA (7:1) normal-text threshold, this
module looks for the closest colors that would pass. Either side of the pair
may be adjusted; the other side is held fixed.

Algorithm:
    1. For each failing threshold, invert the contrast formula to get the two
       luminances that hit the threshold exactly against the fixed color:

           darker  = (L_other + 0.05) / ratio - 0.05
           lighter = ratio * (L_other + 0.05) - 0.05

       Luminances outside [0, 1] are unreachable and skipped.
    2. Hold the adjusted color's hue and saturation fixed and bisect its HSL
       lightness until the unquantized color reaches the target luminance.
    3. Quantize to 8-bit RGB and re-measure. Rounding can land a candidate just
       short of the threshold, in which case lightness is nudged further away
       from the fixed color in small steps until it passes.
    4. Rank every accepted candidate by CIE76 Delta E from the color it
       replaces.

Every loop has a fixed bound (see :class:`~contrastkit.config.SearchSettings`),
so a search always terminates in predictable time. Candidates that cannot be
reached are dropped silently; :func:`search_accessible_colors` reports whether
the pair was already compliant or simply had no reachable fix.

Example:
    >>> suggestions = suggest_accessible_colors("#777777", "#888888")
    >>> all(s.ratio >= 4.5 for s in suggestions)
    True
"""

import logging
import warnings
from dataclasses import asdict, dataclass
from typing import Any, Literal

from .color_utils import (
    hex_to_rgb,
    hsl_fraction_to_srgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from .config import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    DEFAULT_SEARCH_SETTINGS,
    SearchSettings,
)
from .contrast import (
    contrast_ratio_from_luminance,
    get_contrast_ratio,
    get_relative_luminance,
)
from .distance import delta_e

__all__ = [
    "ColorSuggestion",
    "SuggestionOutcome",
    "Direction",
    "Level",
    "SuggestionTarget",
    "SuggestionStatus",
    "search_accessible_colors",
    "suggest_accessible_colors",
]

logger = logging.getLogger(__name__)

Direction = Literal["darker", "lighter"]
Level = Literal["AA", "AAA"]
SuggestionTarget = Literal["foreground", "background"]
SuggestionStatus = Literal["compliant", "suggested", "unreachable"]


@dataclass(frozen=True)
class ColorSuggestion:
    """A replacement color that brings a pair up to a WCAG level.

    Attributes:
        hex: Canonical hex of the replacement color.
        ratio: Contrast ratio of the replacement against the unchanged color.
        direction: Whether the replacement is darker or lighter than the
            color it replaces.
        level: The WCAG level the replacement satisfies.
        target: Which side of the pair the replacement is for.
        distance: CIE76 Delta E between the replacement and the original.
    """

    hex: str
    ratio: float
    direction: Direction
    level: Level
    target: SuggestionTarget
    distance: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SuggestionOutcome:
    """Result of a suggestion search.

    ``status`` is ``"compliant"`` when the pair already meets every checked
    level, ``"suggested"`` when at least one fix was found and
    ``"unreachable"`` when the pair fails but no in-gamut fix was found.
    """

    status: SuggestionStatus
    ratio: float
    suggestions: tuple[ColorSuggestion, ...] = ()

    @property
    def is_compliant(self) -> bool:
        return self.status == "compliant"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "ratio": self.ratio,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


def _target_luminances(other_lum: float, target_ratio: float) -> list[float]:
    """Luminances whose contrast against ``other_lum`` is exactly ``target_ratio``."""
    darker = (other_lum + 0.05) / target_ratio - 0.05
    lighter = target_ratio * (other_lum + 0.05) - 0.05

    reachable = []
    for lum in (darker, lighter):
        if 0.0 <= lum <= 1.0:
            reachable.append(lum)
        else:
            logger.debug("Target luminance %.4f is outside the sRGB gamut", lum)
    return reachable


def _unquantized_luminance(hue: float, saturation: float, lightness: float) -> float:
    return get_relative_luminance(hsl_fraction_to_srgb(hue, saturation, lightness) * 255.0)


def _quantized_hex(hue: float, saturation: float, lightness: float) -> str:
    return rgb_to_hex(*(hsl_fraction_to_srgb(hue, saturation, lightness) * 255.0))


def _lightness_for_luminance(
    hue: float, saturation: float, target_lum: float, iterations: int
) -> float:
    """Bisect HSL lightness for the given luminance; luminance rises with lightness."""
    low, high = 0.0, 1.0
    for _ in range(iterations):
        mid = (low + high) / 2.0
        if _unquantized_luminance(hue, saturation, mid) < target_lum:
            low = mid
        else:
            high = mid
    return (low + high) / 2.0


def _find_candidate(
    hue: float,
    saturation: float,
    target_lum: float,
    other_lum: float,
    target_ratio: float,
    settings: SearchSettings,
) -> tuple[str, float] | None:
    """Locate an 8-bit color at ``target_lum`` that meets ``target_ratio``.

    Returns the candidate hex and its measured ratio, or ``None`` if rounding
    cannot be corrected within ``settings.max_nudges`` steps.
    """
    lightness = _lightness_for_luminance(hue, saturation, target_lum, settings.iterations)

    # Keep moving away from the fixed color; attempt 0 is the bisection result
    step = -settings.nudge_step if target_lum < other_lum else settings.nudge_step
    for attempt in range(settings.max_nudges + 1):
        candidate_lightness = lightness + step * attempt
        if not 0.0 <= candidate_lightness <= 1.0:
            break

        hex_value = _quantized_hex(hue, saturation, candidate_lightness)
        ratio = contrast_ratio_from_luminance(
            get_relative_luminance(hex_to_rgb(hex_value)), other_lum
        )
        if ratio >= target_ratio:
            return hex_value, ratio

    logger.debug(
        "Dropped candidate for luminance %.4f: ratio %.2f not reached", target_lum, target_ratio
    )
    return None


def _search(
    source_hex: str,
    other_hex: str,
    target: SuggestionTarget,
    failing: list[tuple[float, str]],
    settings: SearchSettings,
) -> list[ColorSuggestion]:
    """Adjust ``source_hex`` against the fixed ``other_hex`` for each failing level."""
    source_rgb = hex_to_rgb(source_hex)
    source_lum = get_relative_luminance(source_rgb)
    other_lum = get_relative_luminance(hex_to_rgb(other_hex))

    h, s, _ = rgb_to_hsl(*source_rgb)
    hue, saturation = h / 360.0, s / 100.0

    seen: set[tuple[str, str]] = set()
    suggestions: list[ColorSuggestion] = []

    for target_ratio, level in failing:
        for target_lum in _target_luminances(other_lum, target_ratio):
            found = _find_candidate(hue, saturation, target_lum, other_lum, target_ratio, settings)
            if found is None:
                continue

            hex_value, ratio = found
            if (hex_value, level) in seen:
                continue
            seen.add((hex_value, level))

            candidate_rgb = hex_to_rgb(hex_value)
            direction: Direction = (
                "darker" if get_relative_luminance(candidate_rgb) < source_lum else "lighter"
            )
            suggestions.append(
                ColorSuggestion(
                    hex=hex_value,
                    ratio=ratio,
                    direction=direction,
                    level=level,  # type: ignore[arg-type]
                    target=target,
                    distance=delta_e(source_rgb, candidate_rgb),
                )
            )

    return suggestions


def search_accessible_colors(
    fg_hex: str, bg_hex: str, settings: SearchSettings | None = None
) -> SuggestionOutcome:
    """Search for accessible replacements and report why the result may be empty.

    Args:
        fg_hex: Foreground color. Unparseable input falls back to the default
            foreground.
        bg_hex: Background color. Unparseable input falls back to the default
            background.
        settings: Search bounds; defaults to
            :data:`~contrastkit.config.DEFAULT_SEARCH_SETTINGS`.

    Returns:
        SuggestionOutcome whose suggestions cover both foreground and
        background adjustments, sorted by ascending Delta E.
    """
    settings = settings or DEFAULT_SEARCH_SETTINGS
    foreground = normalize_hex(fg_hex, DEFAULT_FOREGROUND)
    background = normalize_hex(bg_hex, DEFAULT_BACKGROUND)

    ratio = get_contrast_ratio(foreground, background)
    failing = [(threshold, level) for threshold, level in settings.levels if ratio < threshold]
    if not failing:
        return SuggestionOutcome("compliant", ratio)

    # colour-science warns on achromatic HSL conversions; the hue is treated as 0
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        suggestions = _search(foreground, background, "foreground", failing, settings)
        suggestions += _search(background, foreground, "background", failing, settings)

    suggestions.sort(key=lambda suggestion: suggestion.distance)
    if not suggestions:
        logger.debug("No reachable fix for %s on %s (ratio %.2f)", foreground, background, ratio)
        return SuggestionOutcome("unreachable", ratio)
    return SuggestionOutcome("suggested", ratio, tuple(suggestions))


def suggest_accessible_colors(fg_hex: str, bg_hex: str) -> list[ColorSuggestion]:
    """Suggest colors that make the pair WCAG compliant, closest first.

    Returns an empty list both when the pair already meets AAA and when no fix
    is reachable; use :func:`search_accessible_colors` to tell these apart.
    """
    return list(search_accessible_colors(fg_hex, bg_hex).suggestions)
