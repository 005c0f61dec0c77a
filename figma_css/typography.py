"""
Typography — TEXT 節點的文字樣式擷取與 CSS 產生

只輸出非預設值；陰影與描邊沿用 effects / strokes 的管線，再改寫成文字專用屬性。
"""

from typing import Optional

from .color_utils import css_number, is_number, px, resolve_color, to_number
from .effects import extract_effects, generate_text_shadow_css
from .mappers import (
    map_blend_mode,
    map_font_style_to_stretch,
    map_font_style_to_weight,
    map_leading_trim,
    map_text_align,
    map_text_auto_resize,
    map_text_case,
    map_text_decoration,
    map_text_decoration_style,
    map_vertical_align,
)
from .strokes import extract_strokes

DEFAULT_FALLBACK_FONTS = [
    "-apple-system",
    "BlinkMacSystemFont",
    '"Segoe UI"',
    "Roboto",
    "sans-serif",
]


# ════════════════════════════════════════════════════════════
# Extraction
# ════════════════════════════════════════════════════════════

def _map_line_height(line_height):
    """{'unit': 'PIXELS', 'value': 24} → 24；PERCENT → '120%'；AUTO → 'normal'."""
    if isinstance(line_height, dict):
        unit = line_height.get("unit")
        value = line_height.get("value")
        if unit == "AUTO" or not is_number(value):
            return "normal"
        if unit == "PERCENT":
            return f"{css_number(value)}%"
        return value
    if line_height in (None, "AUTO", "normal"):
        return "normal"
    if is_number(line_height) or (isinstance(line_height, str) and line_height.endswith("%")):
        return line_height
    if isinstance(line_height, str):
        try:
            return float(line_height.strip().removesuffix("px"))
        except ValueError:
            return "normal"
    return "normal"


def _map_letter_spacing(letter_spacing) -> Optional[str]:
    if isinstance(letter_spacing, dict):
        value = to_number(letter_spacing.get("value"))
        if value == 0:
            return None
        if letter_spacing.get("unit") == "PERCENT":
            return f"{css_number(value / 100)}em"
        return px(value)
    if is_number(letter_spacing) and letter_spacing != 0:
        return px(letter_spacing)
    return None


def _extract_text_stroke(node: dict) -> tuple:
    """(-webkit-text-stroke value, 'inside' | 'center' | 'outside')."""
    stroke = extract_strokes(node)
    if not stroke or stroke.get("type") != "SOLID" or not stroke.get("color"):
        return None, None
    weight = stroke.get("weight", stroke.get("strokeTopWeight", 1))
    return f"{px(weight)} {stroke['color']}", stroke["align"]


# REST TypeStyle 欄位 → plugin API 欄位（同名者直接沿用）
_REST_STYLE_KEYS = (
    "fontSize", "fontWeight", "textAlignHorizontal", "textAlignVertical",
    "textDecoration", "textCase", "paragraphSpacing", "paragraphIndent",
    "textAutoResize", "textTruncation", "maxLines",
)


def _with_rest_style(node: dict) -> dict:
    """REST 的 TEXT 節點把字體設定放在 node['style']，補成 plugin API 欄位；原欄位優先."""
    style = node.get("style")
    if not isinstance(style, dict):
        return node

    merged = dict(node)
    for key in _REST_STYLE_KEYS:
        if key not in merged and key in style:
            merged[key] = style[key]

    if "fontName" not in merged and style.get("fontFamily"):
        style_name = style.get("fontStyle") or ""
        if style.get("italic") and "italic" not in style_name.lower():
            style_name = f"{style_name} Italic".strip()
        merged["fontName"] = {"family": style["fontFamily"], "style": style_name}

    if "lineHeight" not in merged:
        if style.get("lineHeightUnit") == "FONT_SIZE_%" and is_number(style.get("lineHeightPercentFontSize")):
            merged["lineHeight"] = {"unit": "PERCENT", "value": style["lineHeightPercentFontSize"]}
        elif is_number(style.get("lineHeightPx")):
            merged["lineHeight"] = {"unit": "PIXELS", "value": style["lineHeightPx"]}

    if "letterSpacing" not in merged and is_number(style.get("letterSpacing")):
        merged["letterSpacing"] = {"unit": "PIXELS", "value": style["letterSpacing"]}
    return merged


def _white_space(node: dict) -> str:
    if node.get("textAutoResize") == "WIDTH_AND_HEIGHT" or node.get("maxLines") == 1:
        return "nowrap"
    return "normal"


def extract_typography(node: dict, fallback_fonts: Optional[list] = None) -> Optional[dict]:
    if node.get("type") != "TEXT":
        return None
    node = _with_rest_style(node)

    font_name = node.get("fontName") if isinstance(node.get("fontName"), dict) else {}
    style_name = font_name.get("style") or ""
    text_transform, case_variant = map_text_case(node.get("textCase"))
    text_stroke, text_stroke_align = _extract_text_stroke(node)

    font_weight = node.get("fontWeight")
    if not is_number(font_weight):
        font_weight = map_font_style_to_weight(style_name)

    typography = {
        "fontFamily": font_name.get("family"),
        "fallbackFonts": list(fallback_fonts if fallback_fonts is not None else DEFAULT_FALLBACK_FONTS),
        "fontSize": node.get("fontSize") if is_number(node.get("fontSize")) else None,
        "fontWeight": font_weight,
        "fontStyle": "italic" if "italic" in style_name.lower() else "normal",
        "fontVariant": case_variant or "normal",
        "fontStretch": map_font_style_to_stretch(style_name),

        "textDecoration": map_text_decoration(node.get("textDecoration")),
        "textDecorationStyle": map_text_decoration_style(node.get("textDecorationStyle")),
        "textDecorationColor": resolve_color(node.get("textDecorationColor")),

        "textAlign": map_text_align(node.get("textAlignHorizontal")),
        "textAlignVertical": map_vertical_align(node.get("textAlignVertical")) or "top",

        "lineHeight": _map_line_height(node.get("lineHeight")),
        "letterSpacing": _map_letter_spacing(node.get("letterSpacing")),
        "wordSpacing": to_number(node.get("wordSpacing")),
        "paragraphSpacing": to_number(node.get("paragraphSpacing")),
        "textIndent": to_number(node.get("paragraphIndent")),

        "leadingTrim": node.get("leadingTrim") or "NONE",
        "textAutoResize": node.get("textAutoResize") or "FIXED",
        "textCase": node.get("textCase") or "ORIGINAL",
        "textTransform": text_transform or "none",

        "textShadow": generate_text_shadow_css(extract_effects(node)),
        "textStroke": text_stroke,
        "textStrokeAlign": text_stroke_align,

        "whiteSpace": _white_space(node),
        "textOverflow": "ellipsis" if node.get("textTruncation") == "ENDING" else "clip",

        "textOpacity": node.get("opacity") if is_number(node.get("opacity")) else 1,
        "mixBlendMode": node.get("blendMode") or "PASS_THROUGH",
    }

    has_typography = (
        typography["fontFamily"]
        or typography["fontSize"]
        or typography["fontWeight"]
        or typography["textDecoration"] != "none"
        or typography["textCase"] not in ("ORIGINAL", "NONE")
    )
    return typography if has_typography else None


# ════════════════════════════════════════════════════════════
# CSS generation
# ════════════════════════════════════════════════════════════

def _font_family_css(typography: dict) -> str:
    chain = [f'"{typography["fontFamily"]}"'] + list(typography.get("fallbackFonts") or [])
    return ", ".join(chain)


def _decoration_css(typography: dict) -> Optional[str]:
    line = typography.get("textDecoration")
    if not line or line == "none":
        return None
    parts = [line]
    style = typography.get("textDecorationStyle")
    if style and style != "solid":
        parts.append(style)
    color = typography.get("textDecorationColor")
    if color:
        parts.append(color)
    return " ".join(parts)


def generate_typography_css(typography: Optional[dict]) -> list:
    if not typography:
        return []
    rules = []

    # ─── Font ───
    if typography.get("fontFamily"):
        rules.append(f"font-family: {_font_family_css(typography)};")
    if typography.get("fontSize"):
        rules.append(f"font-size: {px(typography['fontSize'])};")
    if typography.get("fontWeight") and typography["fontWeight"] != 400:
        rules.append(f"font-weight: {css_number(typography['fontWeight'])};")
    if typography.get("fontStyle") and typography["fontStyle"] != "normal":
        rules.append(f"font-style: {typography['fontStyle']};")
    if typography.get("fontVariant") and typography["fontVariant"] != "normal":
        rules.append(f"font-variant: {typography['fontVariant']};")
    if typography.get("fontStretch") and typography["fontStretch"] != "normal":
        rules.append(f"font-stretch: {typography['fontStretch']};")

    # ─── Decoration ───
    decoration = _decoration_css(typography)
    if decoration:
        rules.append(f"text-decoration: {decoration};")

    # ─── Alignment ───
    if typography.get("textAlign") and typography["textAlign"] != "left":
        rules.append(f"text-align: {typography['textAlign']};")
    if typography.get("textAlignVertical") and typography["textAlignVertical"] != "top":
        rules.append(f"vertical-align: {typography['textAlignVertical']};")

    # ─── Spacing ───
    line_height = typography.get("lineHeight")
    if line_height is not None and line_height != "normal":
        if isinstance(line_height, str) and line_height.endswith("%"):
            rules.append(f"line-height: {line_height};")
        else:
            rules.append(f"line-height: {px(to_number(line_height))};")
    if typography.get("letterSpacing"):
        rules.append(f"letter-spacing: {typography['letterSpacing']};")
    if typography.get("wordSpacing"):
        rules.append(f"word-spacing: {px(typography['wordSpacing'])};")
    if typography.get("paragraphSpacing"):
        rules.append(f"margin-bottom: {px(typography['paragraphSpacing'])};")
    if typography.get("textIndent"):
        rules.append(f"text-indent: {px(typography['textIndent'])};")

    # ─── Leading trim ───
    trim = map_leading_trim(typography.get("leadingTrim"))
    if trim:
        rules.append(f"text-box-trim: {trim['trim']};")
        rules.append(f"text-box-edge: {trim['edge']};")

    # ─── Auto resize ───
    resize = map_text_auto_resize(typography.get("textAutoResize"))
    if resize:
        if resize.get("width"):
            rules.append(f"width: {resize['width']};")
        if resize.get("height"):
            rules.append(f"height: {resize['height']};")

    # ─── Case ───
    if typography.get("textTransform") and typography["textTransform"] != "none":
        rules.append(f"text-transform: {typography['textTransform']};")

    # ─── Effects ───
    if typography.get("textShadow"):
        rules.append(f"text-shadow: {typography['textShadow']};")
    if typography.get("textStroke"):
        rules.append(f"-webkit-text-stroke: {typography['textStroke']};")
        # the fill paints over the inner half of the stroke, leaving it outside
        if typography.get("textStrokeAlign") == "outside":
            rules.append("paint-order: stroke fill;")

    # ─── Clipping ───
    if typography.get("whiteSpace") and typography["whiteSpace"] != "normal":
        rules.append(f"white-space: {typography['whiteSpace']};")
    if typography.get("textOverflow") and typography["textOverflow"] != "clip":
        rules.append(f"text-overflow: {typography['textOverflow']};")
        rules.append("overflow: hidden;")

    # ─── Opacity / blending ───
    opacity = typography.get("textOpacity")
    if is_number(opacity) and opacity != 1:
        rules.append(f"opacity: {css_number(opacity)};")
    blend = map_blend_mode(typography.get("mixBlendMode"))
    if blend and blend != "normal":
        rules.append(f"mix-blend-mode: {blend};")

    return rules


def text_owned_axes(typography: Optional[dict]) -> tuple:
    """Axes whose size the auto-resize mode supplies (layout must not write them)."""
    if not typography:
        return ()
    resize = map_text_auto_resize(typography.get("textAutoResize"))
    if not resize:
        return ()
    return tuple(axis for axis in ("width", "height") if resize.get(axis))
