"""
Vector / shape path generator — shape nodes → SVG path data + viewBox.

Polygons and stars are placeholder geometry (triangle, fixed 5-point star) and
vector networks are rebuilt from straight segments only; curves are not
tessellated.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .color_utils import css_number, is_number, round_css

PATH_NODE_TYPES = ("RECTANGLE", "ELLIPSE", "POLYGON", "STAR", "VECTOR", "BOOLEAN_OPERATION")


def _warn(msg: str) -> None:
    print(f"   ⚠️  [svg] {msg}")


@dataclass(frozen=True)
class PathRecord:
    view_box: str
    path: str

    def to_dict(self) -> dict:
        return {"viewBox": self.view_box, "path": self.path}


def _size(node: dict) -> tuple:
    width = round_css(node.get("width")) if is_number(node.get("width")) else 0
    height = round_css(node.get("height")) if is_number(node.get("height")) else 0
    return width, height


def _n(value) -> str:
    return css_number(value)


# ════════════════════════════════════════════════════════════
# Primitive shapes
# ════════════════════════════════════════════════════════════

def _corner_radii(node: dict) -> list:
    uniform = node.get("cornerRadius") if is_number(node.get("cornerRadius")) else 0
    rest = node.get("rectangleCornerRadii")
    if isinstance(rest, list) and len(rest) == 4:
        return [v if is_number(v) else 0 for v in rest]
    keys = ("topLeftRadius", "topRightRadius", "bottomRightRadius", "bottomLeftRadius")
    return [node[k] if is_number(node.get(k)) else uniform for k in keys]


def generate_rectangle_path(node: dict) -> str:
    width, height = _size(node)
    limit = min(width / 2, height / 2)
    tl, tr, br, bl = (round_css(max(0, min(r, limit))) for r in _corner_radii(node))

    if not any((tl, tr, br, bl)):
        return f"M 0 0 L {_n(width)} 0 L {_n(width)} {_n(height)} L 0 {_n(height)} Z"

    def arc(r, x, y):
        return f"A {_n(r)} {_n(r)} 0 0 1 {_n(x)} {_n(y)}" if r else ""

    parts = [
        f"M {_n(tl)} 0",
        f"L {_n(width - tr)} 0",
        arc(tr, width, tr),
        f"L {_n(width)} {_n(height - br)}",
        arc(br, width - br, height),
        f"L {_n(bl)} {_n(height)}",
        arc(bl, 0, height - bl),
        f"L 0 {_n(tl)}",
        arc(tl, tl, 0),
        "Z",
    ]
    return " ".join(p for p in parts if p)


def generate_ellipse_path(node: dict) -> str:
    width, height = _size(node)
    rx, ry = width / 2, height / 2
    return (
        f"M 0 {_n(ry)} "
        f"A {_n(rx)} {_n(ry)} 0 0 1 {_n(width)} {_n(ry)} "
        f"A {_n(rx)} {_n(ry)} 0 0 1 0 {_n(ry)} Z"
    )


def generate_polygon_path(node: dict) -> str:
    # TODO: honour pointCount; only the triangle case is drawn today
    width, height = _size(node)
    return f"M {_n(width / 2)} 0 L {_n(width)} {_n(height)} L 0 {_n(height)} Z"


def generate_star_path(node: dict) -> str:
    width, height = _size(node)
    cx, cy = width / 2, height / 2
    outer = min(width, height) / 2
    inner = outer * 0.4

    commands = []
    for i in range(10):
        angle = i * math.pi / 5 - math.pi / 2
        radius = outer if i % 2 == 0 else inner
        x = cx + radius * math.cos(angle)
        y = cy + radius * math.sin(angle)
        commands.append(f"{'M' if i == 0 else 'L'} {_n(x)} {_n(y)}")
    commands.append("Z")
    return " ".join(commands)


# ════════════════════════════════════════════════════════════
# Freeform vectors
# ════════════════════════════════════════════════════════════

def _first_path_data(geometry) -> Optional[str]:
    if isinstance(geometry, list) and geometry:
        first = geometry[0]
        if isinstance(first, dict):
            return first.get("data") or first.get("path") or None
    return None


def convert_vector_network_to_path(network: dict) -> str:
    """Straight-line rebuild of a vector network (tangents are dropped).

    Segments reference vertices by index; older exports inline ``start`` /
    ``end`` points instead.
    """
    segments = network.get("segments") or []
    vertices = network.get("vertices") or []

    def point(segment: dict, key: str) -> dict:
        ref = segment.get(key)
        if isinstance(ref, dict):
            return ref
        return vertices[ref]

    commands = []
    cursor = None
    for segment in segments:
        start, end = point(segment, "start"), point(segment, "end")
        start_xy = (round_css(start.get("x")), round_css(start.get("y")))
        if start_xy != cursor:
            commands.append(f"M {_n(start_xy[0])} {_n(start_xy[1])}")
        cursor = (round_css(end.get("x")), round_css(end.get("y")))
        commands.append(f"L {_n(cursor[0])} {_n(cursor[1])}")
    return " ".join(commands)


def extract_vector_path(node: dict) -> str:
    for key in ("fillGeometry", "strokeGeometry", "vectorPaths"):
        data = _first_path_data(node.get(key))
        if data is not None:
            return data

    network = node.get("vectorNetwork")
    if isinstance(network, dict) and network.get("segments"):
        return convert_vector_network_to_path(network)

    return generate_rectangle_path(node)


# ════════════════════════════════════════════════════════════
# Entry point
# ════════════════════════════════════════════════════════════

_GENERATORS = {
    "RECTANGLE": generate_rectangle_path,
    "ELLIPSE": generate_ellipse_path,
    "POLYGON": generate_polygon_path,
    "STAR": generate_star_path,
    "VECTOR": extract_vector_path,
    "BOOLEAN_OPERATION": extract_vector_path,
}


def generate_path_record(node: dict) -> Optional[PathRecord]:
    """PathRecord for shape nodes; None for other kinds or malformed geometry."""
    generator = _GENERATORS.get(node.get("type"))
    if generator is None:
        return None
    try:
        width, height = _size(node)
        return PathRecord(view_box=f"0 0 {_n(width)} {_n(height)}", path=generator(node))
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        _warn(f"無法產生 {node.get('type')} '{node.get('name', node.get('id'))}' 的路徑：{e}")
        return None
