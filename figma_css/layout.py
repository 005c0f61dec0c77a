"""
Layout extractor + generator.

Captures sizing / flex / corner / overflow fields plus the parent context a
positioning decision needs, then emits the box-model declarations. Position
itself is decided in ``positioning``; this module never writes ``position``,
``left`` or ``top``.
"""

from typing import Optional

from .color_utils import css_number, is_number, px, round_css, to_number
from .mappers import (
    map_counter_axis_align,
    map_overflow,
    map_overflow_direction,
    map_primary_axis_align,
)
from .transitions import resolve_transition

AUTO_LAYOUT_MODES = ("HORIZONTAL", "VERTICAL")
CORNERS = ("topLeftRadius", "topRightRadius", "bottomRightRadius", "bottomLeftRadius")


def _corner_radii(node: dict) -> dict:
    """Per-corner radii; REST-style ``rectangleCornerRadii`` wins when present."""
    uniform = node.get("cornerRadius")
    uniform = uniform if is_number(uniform) else 0

    rest = node.get("rectangleCornerRadii")
    if isinstance(rest, list) and len(rest) == 4:
        return {corner: to_number(value) for corner, value in zip(CORNERS, rest)}

    radii = {}
    for corner in CORNERS:
        value = node.get(corner)
        radii[corner] = value if is_number(value) else uniform
    return radii


def extract_layout(node: dict, parent: Optional[dict] = None, is_root: bool = False) -> dict:
    """Snapshot of one node's layout fields plus its parent context.

    ``parent`` is the snapshot built by the driver (``id``, ``type``, ``x``,
    ``y``, ``layoutMode``, ``layoutPositioning``, ``groupId``), not the raw
    parent node.
    """
    parent = parent or {}

    return {
        "nodeId": node.get("id"),
        "type": node.get("type"),
        "width": node.get("width") if is_number(node.get("width")) else None,
        "height": node.get("height") if is_number(node.get("height")) else None,
        "x": node.get("x") if is_number(node.get("x")) else None,
        "y": node.get("y") if is_number(node.get("y")) else None,
        "rotation": to_number(node.get("rotation")),

        # ─── Auto layout ───
        "layoutMode": node.get("layoutMode") or "NONE",
        "primaryAxisAlignItems": node.get("primaryAxisAlignItems"),
        "counterAxisAlignItems": node.get("counterAxisAlignItems"),
        "paddingTop": to_number(node.get("paddingTop")),
        "paddingRight": to_number(node.get("paddingRight")),
        "paddingBottom": to_number(node.get("paddingBottom")),
        "paddingLeft": to_number(node.get("paddingLeft")),
        "itemSpacing": to_number(node.get("itemSpacing")),
        "counterAxisSpacing": to_number(node.get("counterAxisSpacing")),
        "layoutWrap": node.get("layoutWrap") or "NO_WRAP",
        "layoutGrow": to_number(node.get("layoutGrow")),
        "layoutAlign": node.get("layoutAlign") or "INHERIT",

        # ─── Positioning ───
        "relativeTransform": node.get("relativeTransform"),
        "constraints": node.get("constraints"),
        "layoutPositioning": node.get("layoutPositioning"),
        "zIndex": node.get("zIndex") if is_number(node.get("zIndex")) else None,
        "transition": resolve_transition(node),

        # ─── Corners / overflow ───
        **_corner_radii(node),
        "overflow": node.get("overflow") or "VISIBLE",
        "overflowDirection": node.get("overflowDirection") or "NONE",
        "clipsContent": bool(node.get("clipsContent")),

        # ─── Sizing ───
        "layoutSizingHorizontal": node.get("layoutSizingHorizontal") or "FIXED",
        "layoutSizingVertical": node.get("layoutSizingVertical") or "FIXED",
        "minWidth": node.get("minWidth") if is_number(node.get("minWidth")) else None,
        "maxWidth": node.get("maxWidth") if is_number(node.get("maxWidth")) else None,
        "minHeight": node.get("minHeight") if is_number(node.get("minHeight")) else None,
        "maxHeight": node.get("maxHeight") if is_number(node.get("maxHeight")) else None,

        # ─── Parent context ───
        "parentType": parent.get("type"),
        "parentLayoutMode": parent.get("layoutMode"),
        "parentLayoutPositioning": parent.get("layoutPositioning"),
        # roots measure from the implicit container at (0, 0)
        "parentX": to_number(parent.get("x")),
        "parentY": to_number(parent.get("y")),
        "groupId": parent.get("groupId"),
        "isRoot": is_root,
        "isVariant": parent.get("type") == "COMPONENT_SET",
    }


# ════════════════════════════════════════════════════════════
# Generators
# ════════════════════════════════════════════════════════════

def generate_transform_css(layout: dict) -> Optional[str]:
    # relativeTransform is skipped: it usually encodes document-level coordinates
    rotation = layout.get("rotation")
    if is_number(rotation) and 0.1 < abs(rotation) < 360:
        return f"transform: rotate({css_number(rotation)}deg);"
    return None


def generate_border_radius_css(layout: dict) -> Optional[str]:
    radii = [round_css(layout.get(corner)) for corner in CORNERS]
    if not any(radii):
        return None
    if len(set(radii)) == 1:
        return px(radii[0])
    return " ".join(px(r) for r in radii)


def map_overflow_to_css(layout: dict) -> list:
    if layout.get("clipsContent"):
        return ["overflow: hidden;"]

    rules = []
    overflow = layout.get("overflow")
    if overflow and overflow != "VISIBLE":
        rules.append(f"overflow: {map_overflow(overflow)};")
    prop = map_overflow_direction(layout.get("overflowDirection"))
    if prop and not rules:
        rules.append(f"{prop}: auto;")
    return rules


def _generate_flex_container_css(layout: dict) -> list:
    mode = layout.get("layoutMode")
    if mode not in AUTO_LAYOUT_MODES:
        return []

    rules = [
        "display: flex;",
        f"flex-direction: {'row' if mode == 'HORIZONTAL' else 'column'};",
    ]
    primary = layout.get("primaryAxisAlignItems")
    if primary:
        rules.append(f"justify-content: {map_primary_axis_align(primary)};")
    counter = layout.get("counterAxisAlignItems")
    if counter:
        rules.append(f"align-items: {map_counter_axis_align(counter)};")

    # space-between distributes the free space itself
    spacing = layout.get("itemSpacing")
    if spacing and primary != "SPACE_BETWEEN":
        rules.append(f"gap: {px(spacing)};")

    if layout.get("layoutWrap") == "WRAP":
        rules.append("flex-wrap: wrap;")
        if layout.get("counterAxisSpacing"):
            rules.append(f"row-gap: {px(layout['counterAxisSpacing'])};")
    return rules


def _generate_flex_item_css(layout: dict) -> list:
    if layout.get("parentLayoutMode") not in AUTO_LAYOUT_MODES:
        return []
    if layout.get("layoutPositioning") == "ABSOLUTE":
        return []

    rules = []
    if layout.get("layoutGrow"):
        rules.append(f"flex-grow: {css_number(layout['layoutGrow'])};")
    if layout.get("layoutAlign") == "STRETCH":
        rules.append("align-self: stretch;")
    return rules


def _generate_padding_css(layout: dict) -> Optional[str]:
    sides = [layout.get(k) or 0 for k in ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft")]
    if not any(sides):
        return None
    return " ".join(px(side) for side in sides)


def generate_layout_css(layout: dict, is_image_frame: bool = False, owned_axes: tuple = ()) -> list:
    """Box-model declarations for one node.

    ``owned_axes`` names the dimensions another generator supplies (text
    auto-resize, LINE thickness); a fixed size is not written for those.
    FILL / HUG axes are left to the positioning stage.
    """
    rules = []

    # ─── Fixed size ───
    width = layout.get("width")
    if width and "width" not in owned_axes and layout.get("layoutSizingHorizontal") not in ("FILL", "HUG"):
        rules.append(f"width: {px(width)};")
    height = layout.get("height")
    if height and "height" not in owned_axes and layout.get("layoutSizingVertical") not in ("FILL", "HUG"):
        rules.append(f"height: {px(height)};")

    transform = generate_transform_css(layout)
    if transform:
        rules.append(transform)

    radius = generate_border_radius_css(layout)
    if radius:
        rules.append(f"border-radius: {radius};")

    rules.extend(map_overflow_to_css(layout))
    rules.extend(_generate_flex_container_css(layout))
    rules.extend(_generate_flex_item_css(layout))

    # padding would push an image away from the frame edges
    padding = None if is_image_frame else _generate_padding_css(layout)
    if padding:
        rules.append(f"padding: {padding};")

    return rules
