"""
Property mappers — Figma enum 值 → CSS 值 的對照表

每個領域一張表、一個函式；其他模組一律透過這裡查表，不自行寫條件分支。
"""

from typing import Optional

# ─── Blend mode ───

BLEND_MODES = {
    "NORMAL": "normal",
    "PASS_THROUGH": "normal",
    "MULTIPLY": "multiply",
    "SCREEN": "screen",
    "OVERLAY": "overlay",
    "DARKEN": "darken",
    "LIGHTEN": "lighten",
    "COLOR_DODGE": "color-dodge",
    "COLOR_BURN": "color-burn",
    "HARD_LIGHT": "hard-light",
    "SOFT_LIGHT": "soft-light",
    "DIFFERENCE": "difference",
    "EXCLUSION": "exclusion",
    "HUE": "hue",
    "SATURATION": "saturation",
    "COLOR": "color",
    "LUMINOSITY": "luminosity",
}


def map_blend_mode(blend_mode: Optional[str]) -> Optional[str]:
    return BLEND_MODES.get(blend_mode)


# ─── Text alignment ───

TEXT_ALIGN = {
    "LEFT": "left",
    "CENTER": "center",
    "RIGHT": "right",
    "JUSTIFIED": "justify",
}

VERTICAL_ALIGN = {
    "TOP": "top",
    "CENTER": "middle",
    "BOTTOM": "bottom",
}


def map_text_align(text_align: Optional[str]) -> str:
    if not isinstance(text_align, str):
        return "left"
    return TEXT_ALIGN.get(text_align.upper(), text_align.lower())


def map_vertical_align(vertical_align: Optional[str]) -> Optional[str]:
    if not isinstance(vertical_align, str):
        return None
    return VERTICAL_ALIGN.get(vertical_align.upper())


# ─── Strokes / effects ───

def map_stroke_align(stroke_align: Optional[str]) -> str:
    # recorded on the stroke dict; CSS borders always draw inside the box
    return {"INSIDE": "inside", "OUTSIDE": "outside"}.get(stroke_align, "center")


def map_effect_type(effect_type: Optional[str]) -> Optional[str]:
    return {
        "DROP_SHADOW": "drop-shadow",
        "INNER_SHADOW": "inner-shadow",
        "LAYER_BLUR": "blur",
        "BACKGROUND_BLUR": "backdrop-blur",
    }.get(effect_type)


def map_dash_pattern(dash_pattern) -> str:
    if isinstance(dash_pattern, (list, tuple)) and any(dash_pattern):
        return "dashed"
    return "solid"


# ─── Sizing / positioning ───

LAYOUT_SIZING = {"FILL": "100%", "HUG": "fit-content"}


def map_layout_sizing(sizing: Optional[str], direction: str) -> Optional[str]:
    """('FILL', 'horizontal') → 'width: 100%;'；FIXED 回傳 None（由 layout 處理）."""
    value = LAYOUT_SIZING.get(sizing)
    if value is None:
        return None
    prop = "width" if direction == "horizontal" else "height"
    return f"{prop}: {value};"


LAYOUT_POSITIONING = {
    "ABSOLUTE": "absolute",
    "RELATIVE": "relative",
    "FIXED": "fixed",
    "STICKY": "sticky",
}


def map_layout_positioning(positioning: Optional[str]) -> Optional[str]:
    return LAYOUT_POSITIONING.get(positioning)


# ─── Auto layout (flex) ───

PRIMARY_AXIS_ALIGN = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "SPACE_BETWEEN": "space-between",
}

COUNTER_AXIS_ALIGN = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "BASELINE": "baseline",
}


def map_primary_axis_align(value: Optional[str]) -> str:
    return PRIMARY_AXIS_ALIGN.get(value, "flex-start")


def map_counter_axis_align(value: Optional[str]) -> str:
    return COUNTER_AXIS_ALIGN.get(value, "flex-start")


def map_overflow(overflow: Optional[str]) -> str:
    return {"HIDDEN": "hidden", "SCROLL": "auto"}.get(overflow, "visible")


OVERFLOW_DIRECTION = {
    "HORIZONTAL_SCROLLING": "overflow-x",
    "VERTICAL_SCROLLING": "overflow-y",
    "BOTH": "overflow",
}


def map_overflow_direction(direction: Optional[str]) -> Optional[str]:
    """捲動方向 → 對應的 CSS 屬性名（值固定為 auto）."""
    return OVERFLOW_DIRECTION.get(direction)


# ─── Typography ───

TEXT_DECORATION = {
    "UNDERLINE": "underline",
    "STRIKETHROUGH": "line-through",
    "OVERLINE": "overline",
}

TEXT_DECORATION_STYLE = {
    "SOLID": "solid",
    "DASHED": "dashed",
    "DOTTED": "dotted",
    "WAVY": "wavy",
    "DOUBLE": "double",
}


def map_text_decoration(value: Optional[str]) -> str:
    return TEXT_DECORATION.get(value, "none")


def map_text_decoration_style(value: Optional[str]) -> str:
    return TEXT_DECORATION_STYLE.get(value, "solid")


TEXT_CASE = {
    "UPPER": ("uppercase", None),
    "LOWER": ("lowercase", None),
    "TITLE": ("capitalize", None),
    "SMALL_CAPS": (None, "small-caps"),
    "SMALL_CAPS_FORCED": (None, "all-small-caps"),
}


def map_text_case(text_case: Optional[str]) -> tuple:
    """回傳 (text-transform, font-variant)，不適用者為 None."""
    return TEXT_CASE.get(text_case, (None, None))


def map_leading_trim(leading_trim: Optional[str]) -> Optional[dict]:
    if leading_trim == "CAP_HEIGHT":
        return {"trim": "trim-both", "edge": "cap alphabetic"}
    return None


def map_text_auto_resize(auto_resize: Optional[str]) -> Optional[dict]:
    if auto_resize == "WIDTH_AND_HEIGHT":
        return {"width": "fit-content", "height": "fit-content"}
    if auto_resize in ("HEIGHT", "AUTO_HEIGHT"):
        return {"height": "fit-content"}
    return None


FONT_WEIGHT_NAMES = [
    ("thin", 100), ("hairline", 100),
    ("extralight", 200), ("ultralight", 200),
    ("light", 300),
    ("regular", 400), ("normal", 400), ("book", 400),
    ("medium", 500),
    ("semibold", 600), ("demibold", 600),
    ("extrabold", 800), ("ultrabold", 800),
    ("bold", 700),
    ("black", 900), ("heavy", 900),
]


def map_font_style_to_weight(style_name: Optional[str]) -> Optional[int]:
    """'Semi Bold Italic' → 600；比對時忽略空白與連字號."""
    if not isinstance(style_name, str):
        return None
    compact = style_name.lower().replace(" ", "").replace("-", "")
    for name, weight in FONT_WEIGHT_NAMES:
        if name in compact:
            return weight
    return None


FONT_STRETCH_NAMES = [
    ("ultracondensed", "ultra-condensed"),
    ("extracondensed", "extra-condensed"),
    ("semicondensed", "semi-condensed"),
    ("condensed", "condensed"),
    ("ultraexpanded", "ultra-expanded"),
    ("extraexpanded", "extra-expanded"),
    ("semiexpanded", "semi-expanded"),
    ("expanded", "expanded"),
]


def map_font_style_to_stretch(style_name: Optional[str]) -> str:
    if not isinstance(style_name, str):
        return "normal"
    compact = style_name.lower().replace(" ", "").replace("-", "")
    for name, stretch in FONT_STRETCH_NAMES:
        if name in compact:
            return stretch
    return "normal"
