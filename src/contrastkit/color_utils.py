"""Color parsing, conversion and compositing utilities for contrastkit.

Every color that leaves this module is a canonical hex string: ``#`` followed
by six lowercase hexadecimal digits. Parsers accept the notations users type
into a color field (hex, ``rgb()``/``rgba()``, ``hsl()``/``hsla()``) and return
``None`` rather than raising when the input cannot be understood, so callers
can apply their own fallback.

Numeric components are clamped, never rejected: channels to [0, 255], alpha to
[0, 1], saturation/lightness/value to [0, 100]. Hues wrap modulo 360.

HSL and HSV conversions are delegated to colour-science's cylindrical models,
which operate on fractional [0, 1] components; the public helpers here expose
degrees and percentages and convert explicitly at the boundary.

Example:
    >>> parse_color("#abc")
    '#aabbcc'
    >>> parse_color_with_alpha("rgba(255, 0, 0, 0.5)")
    ParsedColor(hex='#ff0000', alpha=0.5)
    >>> alpha_blend("#000000", 0.5, "#ffffff")
    '#808080'
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, NamedTuple

import colour
import numpy as np

from .config import DEFAULT_FOREGROUND

__all__ = [
    "RGB",
    "HSL",
    "HSV",
    "ParsedColor",
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
    "hsl_fraction_to_srgb",
    "alpha_blend",
    "with_alpha",
    "unique_normalized_hexes",
    "format_color_output",
]

logger = logging.getLogger(__name__)


class RGB(NamedTuple):
    """8-bit sRGB triple, each channel in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


class HSV(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in percent [0, 100]."""

    h: float
    s: float
    v: float


@dataclass(frozen=True)
class ParsedColor:
    """A canonical hex color together with its alpha channel."""

    hex: str
    alpha: float = 1.0


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_PARTIAL_HEX = re.compile(r"#[0-9a-fA-F]{0,8}")
_FUNCTIONAL = re.compile(r"(rgba?|hsla?)\s*\((.*)\)", re.IGNORECASE | re.DOTALL)
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATORS = re.compile(r"[\s,/]+")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def _to_byte(value: float) -> int:
    value = float(np.nan_to_num(float(value), nan=0.0, posinf=255.0, neginf=0.0))
    return int(_clamp(_round_half_up(_clamp(value, 0.0, 255.0)), 0, 255))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode an RGB triple as canonical hex, rounding and clamping each channel."""
    return "#" + "".join(f"{_to_byte(c):02x}" for c in (r, g, b))


def _parse_hex(text: str) -> ParsedColor | None:
    """Parse #RGB, #RGBA, #RRGGBB or #RRGGBBAA, with or without the ``#``."""
    digits = text[1:] if text.startswith("#") else text
    if len(digits) not in (3, 4, 6, 8) or not _HEX_DIGITS.fullmatch(digits):
        return None

    digits = digits.lower()
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return ParsedColor(f"#{digits[:6]}", alpha)


def _parse_number(token: str, percent_of: float | None = None) -> float | None:
    """Parse a numeric token, resolving a trailing ``%`` against ``percent_of``."""
    is_percent = token.endswith("%")
    if is_percent:
        token = token[:-1]
    if not _NUMBER.fullmatch(token):
        return None

    number = float(token)
    if is_percent:
        if percent_of is None:
            return None
        number = number / 100.0 * percent_of
    if not math.isfinite(number):
        return None
    return number


def _parse_alpha(token: str) -> float | None:
    alpha = _parse_number(token, percent_of=1.0)
    if alpha is None:
        return None
    return _clamp(alpha, 0.0, 1.0)


def _parse_functional(name: str, body: str) -> ParsedColor | None:
    """Parse the argument list of rgb()/rgba()/hsl()/hsla()."""
    tokens = [token for token in _SEPARATORS.split(body.strip()) if token]
    if len(tokens) not in (3, 4):
        return None

    alpha = 1.0
    if len(tokens) == 4:
        parsed_alpha = _parse_alpha(tokens[3])
        if parsed_alpha is None:
            return None
        alpha = parsed_alpha

    if name.startswith("rgb"):
        channels = [_parse_number(token, percent_of=255.0) for token in tokens[:3]]
        if any(c is None for c in channels):
            return None
        return ParsedColor(rgb_to_hex(*channels), alpha)

    hue_token = tokens[0].lower()
    if hue_token.endswith("deg"):
        hue_token = hue_token[:-3]
    hue = _parse_number(hue_token)
    saturation = _parse_number(tokens[1], percent_of=100.0)
    lightness = _parse_number(tokens[2], percent_of=100.0)
    if hue is None or saturation is None or lightness is None:
        return None
    return ParsedColor(rgb_to_hex(*hsl_to_rgb(hue, saturation, lightness)), alpha)


def parse_color_with_alpha(value: Any) -> ParsedColor | None:
    """Parse a color string and surface its alpha channel.

    Accepts 3/4/6/8 digit hex (``#`` optional), ``rgb()``/``rgba()`` and
    ``hsl()``/``hsla()``. Function names are case-insensitive and arguments may
    be separated by commas or whitespace, with an optional ``/`` before alpha.
    Alpha may be a float in [0, 1] or a percentage.

    Returns:
        ParsedColor with a canonical hex and a clamped alpha, or ``None`` when
        the input is not a recognizable color. Never raises.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _FUNCTIONAL.fullmatch(text)
    if match:
        return _parse_functional(match.group(1).lower(), match.group(2))
    return _parse_hex(text)


def parse_color(value: Any) -> str | None:
    """Parse a color string into canonical hex, or ``None`` if unparseable."""
    parsed = parse_color_with_alpha(value)
    return parsed.hex if parsed is not None else None


def normalize_hex(value: Any, fallback: str) -> str:
    """Return the canonical hex for ``value``, or ``fallback`` if it does not parse."""
    parsed = parse_color(value)
    if parsed is None:
        logger.debug("Unparseable color %r, using fallback %s", value, fallback)
        return fallback
    return parsed


def normalize_with_alpha(value: Any, fallback: str) -> ParsedColor:
    """Like :func:`normalize_hex` but keeps alpha; the fallback is fully opaque."""
    parsed = parse_color_with_alpha(value)
    if parsed is None:
        logger.debug("Unparseable color %r, using fallback %s", value, fallback)
        return ParsedColor(fallback, 1.0)
    return parsed


def is_valid_partial_hex(value: Any) -> bool:
    """Check whether ``value`` is a hex color still being typed (``#`` + 0-8 digits)."""
    return isinstance(value, str) and _PARTIAL_HEX.fullmatch(value) is not None


def hex_to_rgb(hex_value: str) -> RGB:
    """Decode a hex color into an 8-bit RGB triple.

    Non-canonical input is normalized first; input that does not parse decodes
    as the default foreground color.
    """
    digits = normalize_hex(hex_value, DEFAULT_FOREGROUND)[1:]
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _unit_rgb(r: float, g: float, b: float) -> np.ndarray:
    return np.array([_to_byte(r), _to_byte(g), _to_byte(b)], dtype=float) / 255.0


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert 8-bit RGB to HSL in degrees and percent.

    Achromatic colors have an undefined hue; it is reported as 0.
    """
    h, s, lightness = np.nan_to_num(colour.RGB_to_HSL(_unit_rgb(r, g, b)))
    return HSL(float(h) * 360.0 % 360.0, float(s) * 100.0, float(lightness) * 100.0)


def hsl_fraction_to_srgb(h: float, s: float, l: float) -> np.ndarray:  # noqa: E741
    """Convert fractional HSL (all components in [0, 1]) to unquantized sRGB in [0, 1]."""
    rgb = colour.HSL_to_RGB(np.array([h % 1.0, s, l], dtype=float))
    return np.clip(rgb, 0.0, 1.0)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to 8-bit RGB."""
    hue = float(h) % 360.0
    saturation = _clamp(float(s), 0.0, 100.0)
    lightness = _clamp(float(l), 0.0, 100.0)
    rgb = hsl_fraction_to_srgb(hue / 360.0, saturation / 100.0, lightness / 100.0)
    return RGB(*(_to_byte(c * 255.0) for c in rgb))


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert 8-bit RGB to HSV in degrees and percent."""
    h, s, v = np.nan_to_num(colour.RGB_to_HSV(_unit_rgb(r, g, b)))
    return HSV(float(h) * 360.0 % 360.0, float(s) * 100.0, float(v) * 100.0)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (degrees, percent, percent) to 8-bit RGB."""
    hue = float(h) % 360.0
    saturation = _clamp(float(s), 0.0, 100.0)
    value = _clamp(float(v), 0.0, 100.0)
    rgb = colour.HSV_to_RGB(np.array([hue / 360.0, saturation / 100.0, value / 100.0]))
    return RGB(*(_to_byte(c * 255.0) for c in np.clip(rgb, 0.0, 1.0)))


def alpha_blend(fg_hex: str, fg_alpha: float, bg_hex: str) -> str:
    """Composite a translucent foreground over an opaque background.

    Each channel is ``fg * a + bg * (1 - a)``, rounded half up and clamped.
    A fully opaque foreground is returned unchanged.
    """
    alpha = _clamp(float(fg_alpha), 0.0, 1.0)
    if alpha >= 1.0:
        return fg_hex

    fg = np.array(hex_to_rgb(fg_hex), dtype=float)
    bg = np.array(hex_to_rgb(bg_hex), dtype=float)
    blended = fg * alpha + bg * (1.0 - alpha)
    return rgb_to_hex(*blended)


def with_alpha(hex_value: str, alpha: float) -> str:
    """Render a hex color as a CSS ``rgba()`` string."""
    r, g, b = hex_to_rgb(hex_value)
    return f"rgba({r}, {g}, {b}, {_clamp(float(alpha), 0.0, 1.0):g})"


def unique_normalized_hexes(values: Iterable[Any]) -> list[str]:
    """Canonicalize, drop unparseable entries and dedupe, keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        normalized = parse_color(value)
        if normalized is None or normalized in seen:
            continue
        seen.add(normalized)
        result.append(normalized)
    return result


def format_color_output(hexes: Iterable[str], format_type: str = "hex") -> list[str]:
    """Format hex colors for output as ``hex``, ``rgb`` or ``hsl`` strings."""
    formatted: list[str] = []

    for hex_value in hexes:
        r, g, b = hex_to_rgb(hex_value)

        if format_type == "hex":
            formatted.append(rgb_to_hex(r, g, b))
        elif format_type == "rgb":
            formatted.append(f"rgb({r}, {g}, {b})")
        else:  # hsl
            h, s, lightness = rgb_to_hsl(r, g, b)
            formatted.append(
                f"hsl({_round_half_up(h) % 360}, {_round_half_up(s)}%, "
                f"{_round_half_up(lightness)}%)"
            )

    return formatted
