"""
Fill extractor — Figma paints → normalized fills → CSS background / text color.
"""

import math
from typing import Optional

from .color_utils import clamp_alpha, css_number, rgba_to_hex, to_number

GRADIENT_TYPES = ("GRADIENT_LINEAR", "GRADIENT_RADIAL", "GRADIENT_ANGULAR", "GRADIENT_DIAMOND")


def extract_fills(node: dict) -> list:
    """Visible paints only, with paint opacity folded into every color."""
    fills = node.get("fills")
    if not isinstance(fills, list):
        return []

    result = []
    for paint in fills:
        if not isinstance(paint, dict) or paint.get("visible") is False:
            continue

        paint_type = paint.get("type")
        opacity = clamp_alpha(paint.get("opacity", 1))
        fill = {"type": paint_type, "opacity": opacity}

        if paint_type == "SOLID":
            fill["color"] = rgba_to_hex(paint.get("color"), opacity)
        elif paint_type in GRADIENT_TYPES:
            stops = []
            for stop in paint.get("gradientStops") or []:
                if not isinstance(stop, dict):
                    continue
                stops.append({
                    "position": to_number(stop.get("position")),
                    "color": rgba_to_hex(stop.get("color"), opacity),
                })
            fill["gradientStops"] = stops
            fill["gradientTransform"] = paint.get("gradientTransform")
            fill["gradientHandlePositions"] = paint.get("gradientHandlePositions")
        elif paint_type == "IMAGE":
            fill["imageRef"] = paint.get("imageRef")
            fill["scaleMode"] = paint.get("scaleMode")

        result.append(fill)
    return result


def _format_stops(stops: list) -> str:
    return ", ".join(
        f"{stop['color']} {css_number(stop['position'] * 100)}%" for stop in stops
    )


def _linear_angle(fill: dict) -> float:
    """CSS angle from the first two gradient handles; 90deg when unknown."""
    handles = fill.get("gradientHandlePositions")
    if not isinstance(handles, list) or len(handles) < 2:
        return 90
    start, end = handles[0] or {}, handles[1] or {}
    dx = to_number(end.get("x")) - to_number(start.get("x"))
    dy = to_number(end.get("y")) - to_number(start.get("y"))
    if dx == 0 and dy == 0:
        return 90
    angle = math.degrees(math.atan2(dy, dx)) + 90
    return angle % 360


def generate_gradient_css(fill: dict) -> Optional[str]:
    stops = fill.get("gradientStops") or []
    if len(stops) < 2:
        return None

    fill_type = fill.get("type")
    if fill_type == "GRADIENT_LINEAR":
        return f"linear-gradient({css_number(_linear_angle(fill))}deg, {_format_stops(stops)})"
    if fill_type in ("GRADIENT_RADIAL", "GRADIENT_DIAMOND"):
        return f"radial-gradient(circle, {_format_stops(stops)})"
    if fill_type == "GRADIENT_ANGULAR":
        return f"conic-gradient({_format_stops(stops)})"
    return None


def generate_background_css(fills: list) -> Optional[str]:
    """Value for ``background:`` from the first visible fill."""
    if not fills:
        return None
    fill = fills[0]
    if fill.get("type") == "SOLID":
        return fill.get("color")
    if fill.get("type") in GRADIENT_TYPES:
        return generate_gradient_css(fill)
    return None


def generate_text_color_css(fills: list) -> Optional[str]:
    if not fills:
        return None
    fill = fills[0]
    if fill.get("type") == "SOLID":
        return fill.get("color")
    # gradient text is not reproduced
    return "#000000"
