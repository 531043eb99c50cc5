"""
Pure-Python OKLCH color model.

Parses CSS color values into OKLCH, interpolates in OKLCH space and
formats colors as the space-separated ``"L C H"`` channel triple that
theme custom properties carry (wrapped downstream as ``oklch(var(--x))``).
No external color libraries required.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .errors import InvalidColorError
from .named_colors import NAMED_COLORS

__all__ = [
    "Oklch",
    "parse_color",
    "format_color",
    "interpolate",
    "darken",
    "foreground",
    "NEUTRAL_FOREGROUND",
]

# Fallback foreground when there is no source color to derive from
NEUTRAL_FOREGROUND = "0% 0 0"

# Chroma below this is treated as achromatic (hue undefined)
_ACHROMATIC_CHROMA = 1e-6

_FUNCTION_RE = re.compile(r"^(?P<name>[a-z]+)\(\s*(?P<args>[^()]*?)\s*\)$")
_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-f]{3,8})$")


@dataclass(frozen=True)
class Oklch:
    """A color in OKLCH space.

    Attributes:
        l: Lightness (0-1).
        c: Chroma (0 and up, roughly 0-0.4 for sRGB colors).
        h: Hue in degrees, or None for achromatic colors.
        alpha: Opacity (0-1).
    """

    l: float  # noqa: E741
    c: float
    h: float | None = None
    alpha: float = 1.0


_BLACK = Oklch(0.0, 0.0, None)
_WHITE = Oklch(1.0, 0.0, None)


# =============================================================================
# sRGB -> OKLab -> OKLCH
# =============================================================================


def _srgb_decode(channel: float) -> float:
    """Gamma-expand an sRGB channel (0-1) to linear light."""
    sign = -1.0 if channel < 0 else 1.0
    value = abs(channel)
    if value <= 0.04045:
        return channel / 12.92
    return sign * ((value + 0.055) / 1.055) ** 2.4


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert gamma-encoded sRGB (0-1 per channel) to OKLab."""
    r_lin = _srgb_decode(r)
    g_lin = _srgb_decode(g)
    b_lin = _srgb_decode(b)

    l = 0.4122214708 * r_lin + 0.5363325363 * g_lin + 0.0514459929 * b_lin  # noqa: E741
    m = 0.2119034982 * r_lin + 0.6806995451 * g_lin + 0.1073969566 * b_lin
    s = 0.0883024619 * r_lin + 0.2817188376 * g_lin + 0.6299787005 * b_lin

    l_ = _cbrt(l)
    m_ = _cbrt(m)
    s_ = _cbrt(s)

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def _oklab_to_oklch(L: float, a: float, b: float, alpha: float = 1.0) -> Oklch:  # noqa: N803
    chroma = math.hypot(a, b)
    if chroma < _ACHROMATIC_CHROMA:
        return Oklch(L, 0.0, None, alpha)
    hue = math.degrees(math.atan2(b, a)) % 360
    return Oklch(L, chroma, hue, alpha)


def _rgb_to_oklch(r: float, g: float, b: float, alpha: float = 1.0) -> Oklch:
    return _oklab_to_oklch(*_rgb_to_oklab(r, g, b), alpha=alpha)


def _hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """Convert HSL (hue in degrees, saturation/lightness 0-1) to sRGB 0-1."""

    def channel(n: float) -> float:
        k = (n + hue / 30) % 12
        a = saturation * min(lightness, 1 - lightness)
        return lightness - a * max(-1.0, min(k - 3, 9 - k, 1.0))

    return channel(0), channel(8), channel(4)


# =============================================================================
# Parsing
# =============================================================================


def _number(token: str, percent_scale: float = 1.0) -> float:
    """Parse a CSS number or percentage; 100% maps to *percent_scale*."""
    if token == "none":
        return 0.0
    if token.endswith("%"):
        return float(token[:-1]) / 100 * percent_scale
    return float(token)


def _hue(token: str) -> float | None:
    """Parse a CSS hue angle into degrees."""
    if token == "none":
        return None
    units = (("grad", 0.9), ("turn", 360.0), ("deg", 1.0), ("rad", 180 / math.pi))
    for suffix, factor in units:
        if token.endswith(suffix):
            return float(token[: -len(suffix)]) * factor
    return float(token)


def _split_args(args: str) -> tuple[list[str], str | None]:
    """Split function arguments into channel tokens and an optional alpha token."""
    alpha: str | None = None
    if "/" in args:
        args, alpha = (part.strip() for part in args.split("/", 1))
    if "," in args:
        parts = [part.strip() for part in args.split(",")]
        if len(parts) == 4 and alpha is None:
            alpha = parts.pop()
    else:
        parts = args.split()
    return parts, alpha


def _parse_hex(digits: str) -> Oklch:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ValueError("hex colors need 3, 4, 6 or 8 digits")
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return _rgb_to_oklch(r, g, b, alpha)


def _parse_function(name: str, args: str) -> Oklch:
    parts, alpha_token = _split_args(args)
    if len(parts) != 3:
        raise ValueError(f"{name}() expects three channels, got {len(parts)}")
    alpha = _number(alpha_token) if alpha_token is not None else 1.0

    if name in ("rgb", "rgba"):
        r, g, b = (_number(p, 255.0) / 255 for p in parts)
        return _rgb_to_oklch(r, g, b, alpha)

    if name in ("hsl", "hsla"):
        hue = _hue(parts[0]) or 0.0
        saturation = _number(parts[1], 100.0) / 100
        lightness = _number(parts[2], 100.0) / 100
        return _rgb_to_oklch(*_hsl_to_rgb(hue, saturation, lightness), alpha=alpha)

    if name == "oklch":
        lightness = _number(parts[0])
        chroma = _number(parts[1], 0.4)
        hue = _hue(parts[2])
        if hue is not None:
            hue %= 360
        return Oklch(lightness, chroma, hue, alpha)

    if name == "oklab":
        return _oklab_to_oklch(
            _number(parts[0]), _number(parts[1], 0.4), _number(parts[2], 0.4), alpha
        )

    raise ValueError(f"unsupported color function {name}()")


def parse_color(value: str) -> Oklch:
    """
    Parse a CSS color value into OKLCH.

    Accepts hex colors, CSS named colors, ``transparent``, ``rgb()``,
    ``hsl()``, ``oklch()``, ``oklab()`` and a bare ``"L C H"`` channel
    triple as produced by :func:`format_color`.

    Raises:
        InvalidColorError: If the value is not a color.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidColorError(value, "empty or non-string value")

    text = value.strip().lower()
    try:
        if text == "transparent":
            return Oklch(0.0, 0.0, None, 0.0)
        if text in NAMED_COLORS:
            return _parse_hex(NAMED_COLORS[text][1:])
        if match := _HEX_RE.match(text):
            return _parse_hex(match.group("digits"))
        if match := _FUNCTION_RE.match(text):
            return _parse_function(match.group("name"), match.group("args"))
        if len(text.split()) == 3:
            return _parse_function("oklch", text)
    except (ValueError, TypeError) as exc:
        raise InvalidColorError(value, str(exc)) from exc
    raise InvalidColorError(value, "unrecognized color syntax")


# =============================================================================
# Formatting and interpolation
# =============================================================================


def _trim(number: float) -> str:
    """Format a number with at most six decimals and no trailing zeros."""
    rounded = round(number, 6)
    if rounded == 0:
        return "0"
    return f"{rounded:.6f}".rstrip("0").rstrip(".")


def format_color(color: Oklch) -> str:
    """Format a color as ``"<L>% <C> <H>"`` (no alpha, achromatic hue as 0)."""
    return f"{_trim(color.l * 100)}% {_trim(color.c)} {_trim(color.h or 0.0)}"


def interpolate(start: Oklch, end: Oklch, amount: float) -> Oklch:
    """
    Linearly interpolate between two colors in OKLCH space.

    Hue takes the shorter arc. An achromatic endpoint adopts the other
    endpoint's hue, so mixing toward black or white keeps the hue.
    """
    lightness = start.l + (end.l - start.l) * amount
    chroma = start.c + (end.c - start.c) * amount
    alpha = start.alpha + (end.alpha - start.alpha) * amount

    if start.h is None and end.h is None:
        hue = None
    elif start.h is None:
        hue = end.h
    elif end.h is None:
        hue = start.h
    else:
        delta = (end.h - start.h + 180) % 360 - 180
        hue = (start.h + delta * amount) % 360

    return Oklch(lightness, chroma, hue, alpha)


def darken(value: str, amount: float = 0.07) -> str:
    """Mix *value* toward black by *amount* (0-1) and format the result.

    Raises:
        InvalidColorError: If *value* is not a color.
    """
    return format_color(interpolate(parse_color(value), _BLACK, amount))


def foreground(value: str | None = None, amount: float = 0.8) -> str:
    """
    Derive a foreground (content) color from a background color.

    With no source color the neutral ``"0% 0 0"`` is returned whatever the
    amount. Otherwise the color is mixed by *amount* toward white when its
    lightness is 50% or more, and toward black below that.

    Raises:
        InvalidColorError: If *value* is given but is not a color.
    """
    if not value:
        return NEUTRAL_FOREGROUND
    color = parse_color(value)
    target = _WHITE if color.l * 100 >= 50 else _BLACK
    return format_color(interpolate(color, target, amount))
