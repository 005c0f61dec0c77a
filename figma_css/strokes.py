"""
Stroke extractor / border generator.

A node's stroke is either *uniform* (one weight, one color) or *individual*
(per-side weights and colors). Individual strokes whose four sides agree
collapse back to a single ``border`` shorthand; otherwise only side-specific
declarations are emitted.
"""

from typing import Optional

from .color_utils import is_number, px, rgba_to_hex, round_css
from .mappers import map_dash_pattern, map_stroke_align

SIDES = ("Top", "Right", "Bottom", "Left")
SIDE_WEIGHT_KEYS = tuple(f"stroke{side}Weight" for side in SIDES)


def _first_visible_stroke(node: dict) -> Optional[dict]:
    strokes = node.get("strokes")
    if not isinstance(strokes, list):
        return None
    for paint in strokes:
        if isinstance(paint, dict) and paint.get("visible") is not False:
            return paint
    return None


def _paint_color(paint: dict) -> Optional[str]:
    if paint.get("type") != "SOLID" or not isinstance(paint.get("color"), dict):
        return None
    return rgba_to_hex(paint["color"], paint.get("opacity", 1))


def extract_strokes(node: dict) -> Optional[dict]:
    paint = _first_visible_stroke(node)
    if paint is None:
        return None

    color = _paint_color(paint)
    base_weight = node.get("strokeWeight")
    base_weight = base_weight if is_number(base_weight) else 1

    stroke = {
        "type": paint.get("type"),
        "color": color,
        "align": map_stroke_align(node.get("strokeAlign") or "INSIDE"),
        "style": map_dash_pattern(node.get("dashPattern")),
    }

    # 'mixed' weights come through as a string sentinel from plugin exports
    individual = (
        bool(node.get("individualStrokes"))
        or (isinstance(node.get("strokeWeight"), str) and "mixed" in node["strokeWeight"].lower())
        or any(is_number(node.get(key)) for key in SIDE_WEIGHT_KEYS)
    )

    if not individual:
        stroke["individualStrokes"] = False
        stroke["weight"] = base_weight
        return stroke

    stroke["individualStrokes"] = True
    for side in SIDES:
        weight = node.get(f"stroke{side}Weight")
        stroke[f"stroke{side}Weight"] = weight if is_number(weight) else base_weight
        side_color = node.get(f"stroke{side}Color")
        if isinstance(side_color, dict):
            stroke[f"stroke{side}Color"] = rgba_to_hex(side_color, paint.get("opacity", 1))
        else:
            stroke[f"stroke{side}Color"] = color
    return stroke


def _border_value(weight, style: str, color: str) -> str:
    return f"{px(weight)} {style} {color}"


def generate_stroke_css(stroke: Optional[dict]) -> list:
    if not stroke or stroke.get("type") != "SOLID":
        return []

    style = stroke.get("style") or "solid"

    if not stroke.get("individualStrokes"):
        weight = stroke.get("weight")
        if is_number(weight) and weight > 0 and stroke.get("color"):
            return [f"border: {_border_value(weight, style, stroke['color'])};"]
        return []

    weights = [round_css(stroke.get(f"stroke{side}Weight")) for side in SIDES]
    colors = [stroke.get(f"stroke{side}Color") for side in SIDES]

    if weights[0] > 0 and len(set(weights)) == 1 and len(set(colors)) == 1 and colors[0]:
        return [f"border: {_border_value(weights[0], style, colors[0])};"]

    rules = []
    for side, weight, color in zip(SIDES, weights, colors):
        if weight > 0 and color:
            rules.append(f"border-{side.lower()}: {_border_value(weight, style, color)};")
    return rules


def generate_line_css(node: dict, stroke: Optional[dict]) -> list:
    """LINE 節點：stroke 顏色變成背景，粗細套在較薄的那一軸."""
    if not stroke or stroke.get("type") != "SOLID" or not stroke.get("color"):
        return []

    weight = stroke.get("weight")
    if not is_number(weight):
        weight = stroke.get("strokeTopWeight", 1)
    width, height = node.get("width"), node.get("height")
    width = width if is_number(width) else 0
    height = height if is_number(height) else 0

    rules = []
    if height > width:
        rules.append(f"width: {px(weight)};")
    else:
        rules.append(f"height: {px(weight)};")
    rules.append(f"background-color: {stroke['color']};")
    return rules
