"""
Positioning generator — 每個節點只選一種定位策略（第一個符合者勝出）

1. Variant（父層為 COMPONENT_SET）：absolute，固定 left/top = 0
2. 明確的 layoutPositioning（非 AUTO）
3. 父層有宣告 layoutMode：auto-layout → relative；NONE → absolute + 自身 x/y
4. 父層沒有宣告 layoutMode（GROUP 等，或完全沒有父層）：absolute，x/y 減去父層原點
   節點本身是否為 auto-layout 不影響這一步

constraints 只讀取、不轉成 CSS。
"""

from .color_utils import is_number, px
from .mappers import map_layout_positioning, map_layout_sizing
from .transitions import generate_position_size_transition


def _offsets(layout: dict, relative_to_parent: bool) -> list:
    rules = []
    for axis, prop, origin in (("x", "left", "parentX"), ("y", "top", "parentY")):
        value = layout.get(axis)
        if not is_number(value):
            continue
        if layout.get("isRoot"):
            value = 0
        elif relative_to_parent:
            value = value - layout.get(origin, 0)
        rules.append(f"{prop}: {px(value)};")
    return rules


def _choose_position(layout: dict) -> list:
    positioning = layout.get("layoutPositioning")
    if positioning and positioning != "AUTO":
        keyword = map_layout_positioning(positioning)
        if keyword:
            rules = [f"position: {keyword};"]
            if keyword == "absolute":
                rules.extend(_offsets(layout, relative_to_parent=False))
            return rules

    parent_mode = layout.get("parentLayoutMode")
    if parent_mode:
        if parent_mode != "NONE":
            # flexbox flow places the child; x/y are ignored
            return ["position: relative;"]
        return ["position: absolute;"] + _offsets(layout, relative_to_parent=False)

    # group children share the group's parent coordinate space
    return ["position: absolute;"] + _offsets(layout, relative_to_parent=True)


def generate_layout_sizing_css(layout: dict) -> list:
    rules = []
    for key, prop in (("minWidth", "min-width"), ("maxWidth", "max-width"),
                      ("minHeight", "min-height"), ("maxHeight", "max-height")):
        value = layout.get(key)
        if is_number(value) and value > 0:
            rules.append(f"{prop}: {px(value)};")

    for key, direction in (("layoutSizingHorizontal", "horizontal"), ("layoutSizingVertical", "vertical")):
        rule = map_layout_sizing(layout.get(key), direction)
        if rule:
            rules.append(rule)
    return rules


def generate_positioning_css(layout: dict) -> list:
    transition = generate_position_size_transition(layout.get("transition"))

    if layout.get("isVariant"):
        # every variant of a group is stacked at the group origin
        rules = ["position: absolute;", "left: 0;", "top: 0;"]
        if transition:
            rules.append(transition)
        return rules

    rules = _choose_position(layout)
    rules.extend(generate_layout_sizing_css(layout))

    if layout.get("zIndex") is not None:
        rules.append(f"z-index: {int(layout['zIndex'])};")

    if transition:
        rules.append(transition)
    return rules
