"""
Transition helpers — Figma easing / duration → CSS transition declarations.
"""

from typing import Optional

from .color_utils import css_number, to_number

DEFAULT_DURATION_SECONDS = 0.3

# Shared so any later change to position or size on the node animates uniformly
TRANSITION_PROPERTIES = ("transform", "width", "height", "left", "top", "right", "bottom")

EASING_CURVES = {
    "LINEAR": "linear",
    "EASE_IN": "ease-in",
    "EASE_OUT": "ease-out",
    "EASE_IN_OUT": "ease-in-out",
    "EASE_IN_AND_OUT": "ease-in-out",
    "GENTLE": "cubic-bezier(0.25, 0.1, 0.25, 1)",
    # back curves are approximated, CSS cannot overshoot with named keywords
    "EASE_IN_BACK": "cubic-bezier(0.6, -0.28, 0.735, 0.045)",
    "EASE_OUT_BACK": "cubic-bezier(0.175, 0.885, 0.32, 1.275)",
    "EASE_IN_AND_OUT_BACK": "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
}


def map_easing_to_css(easing) -> str:
    """Accepts ``"EASE_OUT"`` or ``{"type": "EASE_OUT"}``; unknown → ease-in-out."""
    easing_type = easing.get("type") if isinstance(easing, dict) else easing

    if easing_type == "CUSTOM_CUBIC_BEZIER" and isinstance(easing, dict):
        curve = easing.get("easingFunctionCubicBezier") or {}
        points = [css_number(to_number(curve.get(k))) for k in ("x1", "y1", "x2", "y2")]
        return f"cubic-bezier({', '.join(points)})"

    return EASING_CURVES.get(easing_type, "ease-in-out")


def generate_position_size_transition(transition: Optional[dict]) -> Optional[str]:
    if not transition or not isinstance(transition, dict):
        return None

    seconds = to_number(transition.get("duration"), 0) or DEFAULT_DURATION_SECONDS
    duration_ms = int(seconds * 1000 + 0.5)
    easing = map_easing_to_css(transition.get("easing"))
    properties = ", ".join(TRANSITION_PROPERTIES)
    return f"transition: {properties} {duration_ms}ms {easing};"


def resolve_transition(node: dict) -> Optional[dict]:
    """Own transition first, then the first reaction that carries one."""
    transition = node.get("transition")
    if isinstance(transition, dict):
        return transition

    for reaction in node.get("reactions") or []:
        if not isinstance(reaction, dict):
            continue
        action = reaction.get("action") or {}
        if isinstance(action, dict) and isinstance(action.get("transition"), dict):
            return action["transition"]
        # older plugin exports keep it beside the action
        if isinstance(reaction.get("transition"), dict):
            return reaction["transition"]
    return None
