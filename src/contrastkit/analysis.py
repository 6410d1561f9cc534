"""One-call contrast report for a user-entered foreground/background pair."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from .color_utils import alpha_blend, normalize_with_alpha
from .config import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, WHITE
from .contrast import (
    WCAGCompliance,
    calculate_wcag_compliance,
    get_contrast_ratio,
    get_readable_text_color,
    is_large_text,
)
from .suggestions import SuggestionOutcome, search_accessible_colors

__all__ = ["ContrastReport", "analyze_contrast", "cached_search"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=512)
def cached_search(foreground: str, background: str) -> SuggestionOutcome:
    """Memoized :func:`search_accessible_colors` keyed by canonical hex pair."""
    return search_accessible_colors(foreground, background)


@dataclass(frozen=True)
class ContrastReport:
    """Everything a contrast checker view needs for one pair of colors.

    ``effective_*`` are the colors actually seen after alpha compositing: the
    background over white, then the foreground over that result. Ratio,
    compliance and suggestions are all computed on the effective pair.
    """

    foreground: str
    background: str
    fg_alpha: float
    bg_alpha: float
    effective_foreground: str
    effective_background: str
    ratio: float
    compliance: WCAGCompliance
    large_text: bool
    passes: bool
    foreground_text_color: str
    background_text_color: str
    preview_text_color: str
    outcome: SuggestionOutcome

    @property
    def has_alpha(self) -> bool:
        return self.fg_alpha < 1.0 or self.bg_alpha < 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "fg_alpha": self.fg_alpha,
            "bg_alpha": self.bg_alpha,
            "effective_foreground": self.effective_foreground,
            "effective_background": self.effective_background,
            "ratio": self.ratio,
            "compliance": self.compliance.to_dict(),
            "large_text": self.large_text,
            "passes": self.passes,
            "foreground_text_color": self.foreground_text_color,
            "background_text_color": self.background_text_color,
            "preview_text_color": self.preview_text_color,
            **self.outcome.to_dict(),
        }


def analyze_contrast(
    foreground: Any,
    background: Any,
    font_size: float = 16.0,
    is_bold: bool = False,
) -> ContrastReport:
    """Build a :class:`ContrastReport` from raw user input.

    Args:
        foreground: Any color string :func:`~contrastkit.color_utils.parse_color`
            understands. Falls back to ``#111827`` when it does not parse.
        background: Same, falling back to ``#f8fafc``.
        font_size: Rendered text size in pixels.
        is_bold: Whether the text is bold.

    Returns:
        ContrastReport for the composited pair. Never raises on bad color input.
    """
    fg = normalize_with_alpha(foreground, DEFAULT_FOREGROUND)
    bg = normalize_with_alpha(background, DEFAULT_BACKGROUND)

    effective_background = alpha_blend(bg.hex, bg.alpha, WHITE)
    effective_foreground = alpha_blend(fg.hex, fg.alpha, effective_background)
    if fg.alpha < 1.0 or bg.alpha < 1.0:
        logger.debug(
            "Composited %s/%s to %s/%s",
            fg.hex, bg.hex, effective_foreground, effective_background,
        )

    ratio = get_contrast_ratio(effective_foreground, effective_background)
    compliance = calculate_wcag_compliance(ratio)
    large_text = is_large_text(font_size, is_bold)

    return ContrastReport(
        foreground=fg.hex,
        background=bg.hex,
        fg_alpha=fg.alpha,
        bg_alpha=bg.alpha,
        effective_foreground=effective_foreground,
        effective_background=effective_background,
        ratio=ratio,
        compliance=compliance,
        large_text=large_text,
        passes=compliance.large_aa if large_text else compliance.normal_aa,
        foreground_text_color=get_readable_text_color(fg.hex),
        background_text_color=get_readable_text_color(bg.hex),
        preview_text_color=get_readable_text_color(effective_background),
        outcome=cached_search(effective_foreground, effective_background),
    )
