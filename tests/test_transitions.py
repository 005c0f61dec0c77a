"""
transitions 單元測試
easing 對照、transition 宣告格式與 reactions fallback。
"""
from figma_css.transitions import (
    generate_position_size_transition,
    map_easing_to_css,
    resolve_transition,
)

BACK_CURVE = "cubic-bezier(0.68, -0.55, 0.265, 1.55)"


# ─── map_easing_to_css ──────────────────────────────────────────────────────

def test_named_easings():
    assert map_easing_to_css("LINEAR") == "linear"
    assert map_easing_to_css({"type": "EASE_OUT"}) == "ease-out"
    assert map_easing_to_css("EASE_IN_AND_OUT") == "ease-in-out"


def test_back_easing_uses_cubic_bezier():
    assert map_easing_to_css("EASE_IN_AND_OUT_BACK") == BACK_CURVE


def test_unknown_easing_defaults_to_ease_in_out():
    assert map_easing_to_css("BOUNCY_SPRING") == "ease-in-out"
    assert map_easing_to_css(None) == "ease-in-out"


def test_custom_cubic_bezier():
    easing = {
        "type": "CUSTOM_CUBIC_BEZIER",
        "easingFunctionCubicBezier": {"x1": 0.1, "y1": 0.2, "x2": 0.3, "y2": 1},
    }
    assert map_easing_to_css(easing) == "cubic-bezier(0.1, 0.2, 0.3, 1)"


# ─── generate_position_size_transition ──────────────────────────────────────

def test_transition_declaration_format():
    transition = {"type": "SMART_ANIMATE", "easing": {"type": "EASE_IN_AND_OUT_BACK"}, "duration": 0.3}
    assert generate_position_size_transition(transition) == (
        f"transition: transform, width, height, left, top, right, bottom 300ms {BACK_CURVE};"
    )


def test_missing_duration_defaults_to_300ms():
    rule = generate_position_size_transition({"type": "DISSOLVE"})
    assert " 300ms ease-in-out;" in rule


def test_duration_rounded_to_ms():
    rule = generate_position_size_transition({"duration": 0.25, "easing": "LINEAR"})
    assert rule.endswith("250ms linear;")


def test_no_transition_returns_none():
    assert generate_position_size_transition(None) is None
    assert generate_position_size_transition({}) is None


# ─── resolve_transition ─────────────────────────────────────────────────────

def test_own_transition_wins():
    own = {"type": "DISSOLVE"}
    node = {"transition": own, "reactions": [{"action": {"transition": {"type": "SMART_ANIMATE"}}}]}
    assert resolve_transition(node) is own


def test_transition_from_reaction_action():
    t = {"type": "SMART_ANIMATE", "duration": 0.5}
    node = {"reactions": [{"trigger": {"type": "ON_CLICK"}}, {"action": {"transition": t}}]}
    assert resolve_transition(node) is t


def test_transition_beside_action():
    t = {"type": "SMART_ANIMATE"}
    assert resolve_transition({"reactions": [{"action": {}, "transition": t}]}) is t


def test_no_reactions():
    assert resolve_transition({}) is None
