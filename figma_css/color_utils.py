"""
Color / unit helpers — Figma channel values (0..1) → CSS color strings, and
length rounding shared by every generator.
"""

import math
from typing import Optional

CSS_PRECISION = 2


def is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return not math.isnan(value) and not math.isinf(value)


def to_number(value, default: float = 0) -> float:
    """Coerce to a finite number, falling back to ``default``."""
    return value if is_number(value) else default


def round_css(value, precision: int = CSS_PRECISION) -> float:
    """Round half-up to a fixed precision; non-numbers and NaN become 0."""
    if not is_number(value):
        return 0
    factor = 10 ** precision
    rounded = math.floor(value * factor + 0.5) / factor
    # -0.0 → 0
    return rounded + 0.0 if rounded != 0 else 0.0


def css_number(value, precision: int = CSS_PRECISION) -> str:
    """Rounded number without trailing zeros: 50 → '50', 12.50 → '12.5'."""
    text = f"{round_css(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def px(value) -> str:
    return f"{css_number(value)}px"


def clamp_alpha(value) -> float:
    if not is_number(value):
        return 1
    return min(1, max(0, value))


def rgba_to_hex(color, opacity=1) -> str:
    """Figma RGBA dict → '#rrggbb' when fully opaque, else 'rgba(r, g, b, a)'.

    The effective alpha is ``color.a × opacity``, clamped to [0, 1].
    Anything that is not a color dict renders as black.
    """
    if not isinstance(color, dict):
        return "#000000"

    def channel(key: str) -> int:
        v = color.get(key)
        if not is_number(v):
            return 0
        return int(math.floor(min(1, max(0, v)) * 255 + 0.5))

    r, g, b = channel("r"), channel("g"), channel("b")
    alpha = clamp_alpha(color.get("a", 1)) * clamp_alpha(opacity)

    if alpha == 1:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r}, {g}, {b}, {css_number(alpha)})"


def resolve_color(value) -> Optional[str]:
    """Accept a color dict, a ``{"value": ...}`` wrapper, or a CSS string.

    ``AUTO`` / ``currentColor`` mean "inherit from text" and resolve to None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        if value.upper() in ("AUTO", "CURRENTCOLOR", ""):
            return None
        return value
    if isinstance(value, dict):
        if "value" in value and not any(k in value for k in ("r", "g", "b")):
            return resolve_color(value["value"])
        return rgba_to_hex(value)
    return None
