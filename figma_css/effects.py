"""
Effect extractor — shadows / blurs → box-shadow, filter, backdrop-filter.
"""

from typing import Optional

from .color_utils import px, rgba_to_hex, to_number
from .mappers import map_effect_type

SHADOW_TYPES = ("DROP_SHADOW", "INNER_SHADOW")
BLUR_TYPES = ("LAYER_BLUR", "BACKGROUND_BLUR")


def extract_effects(node: dict) -> list:
    effects = node.get("effects")
    if not isinstance(effects, list):
        return []

    result = []
    for effect in effects:
        if not isinstance(effect, dict) or effect.get("visible") is False:
            continue
        effect_type = effect.get("type")
        if effect_type in SHADOW_TYPES:
            offset = effect.get("offset") or {}
            result.append({
                "type": effect_type,
                "kind": map_effect_type(effect_type),
                "color": rgba_to_hex(effect.get("color")),
                "offset": {"x": to_number(offset.get("x")), "y": to_number(offset.get("y"))},
                "radius": to_number(effect.get("radius")),
                "spread": to_number(effect.get("spread")),
            })
        elif effect_type in BLUR_TYPES:
            result.append({
                "type": effect_type,
                "kind": map_effect_type(effect_type),
                "radius": to_number(effect.get("radius")),
            })
    return result


def _shadow_value(effect: dict, with_spread: bool = True) -> str:
    parts = [px(effect["offset"]["x"]), px(effect["offset"]["y"]), px(effect["radius"])]
    if with_spread:
        parts.append(px(effect["spread"]))
    parts.append(effect["color"])
    value = " ".join(parts)
    if effect["kind"] == "inner-shadow":
        value = f"inset {value}"
    return value


def generate_effects_css(effects: list, include_shadows: bool = True) -> list:
    rules = []

    if include_shadows:
        shadows = [_shadow_value(e) for e in effects if e["type"] in SHADOW_TYPES]
        if shadows:
            rules.append(f"box-shadow: {', '.join(shadows)};")

    for effect in effects:
        if effect["kind"] == "blur":
            rules.append(f"filter: blur({px(effect['radius'])});")
        elif effect["kind"] == "backdrop-blur":
            rules.append(f"backdrop-filter: blur({px(effect['radius'])});")
    return rules


def generate_text_shadow_css(effects: list) -> Optional[str]:
    """Drop shadows re-expressed as text-shadow (no spread, no inset)."""
    shadows = [_shadow_value(e, with_spread=False) for e in effects if e["type"] == "DROP_SHADOW"]
    if not shadows:
        return None
    return ", ".join(shadows)
