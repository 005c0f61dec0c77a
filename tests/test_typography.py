"""
Typography 單元測試
只輸出非預設值；文字裝飾合併成單一宣告。
"""
from figma_css.typography import (
    DEFAULT_FALLBACK_FONTS,
    extract_typography,
    generate_typography_css,
    text_owned_axes,
)


def text_node(**props):
    node = {
        "id": "t1",
        "type": "TEXT",
        "fontName": {"family": "Inter", "style": "Regular"},
        "fontSize": 16,
    }
    node.update(props)
    return node


def css(node, fallback_fonts=None):
    return generate_typography_css(extract_typography(node, fallback_fonts))


# ─── Extraction ─────────────────────────────────────────────────────────────

def test_non_text_node_has_no_typography():
    assert extract_typography({"type": "FRAME", "fontSize": 12}) is None


def test_default_fallback_chain():
    rules = css(text_node())
    assert 'font-family: "Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;' in rules
    assert extract_typography(text_node())["fallbackFonts"] == DEFAULT_FALLBACK_FONTS


def test_custom_fallback_fonts():
    assert 'font-family: "Inter", serif;' in css(text_node(), ["serif"])


def test_regular_weight_and_left_align_suppressed():
    rules = css(text_node(textAlignHorizontal="LEFT"))
    assert rules == [
        'font-family: "Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;',
        "font-size: 16px;",
    ]


def test_weight_and_italic_from_style_name():
    rules = css(text_node(fontName={"family": "Inter", "style": "Bold Italic"}))
    assert "font-weight: 700;" in rules
    assert "font-style: italic;" in rules


def test_explicit_font_weight_wins():
    rules = css(text_node(fontName={"family": "Inter", "style": "Bold"}, fontWeight=500))
    assert "font-weight: 500;" in rules


# ─── Decoration ─────────────────────────────────────────────────────────────

def test_underline_dashed_colored_is_one_declaration():
    node = text_node(
        textDecoration="UNDERLINE",
        textDecorationStyle="DASHED",
        textDecorationColor={"r": 0.906, "g": 0.298, "b": 0.235},
    )
    rules = css(node)
    decorations = [r for r in rules if r.startswith("text-decoration")]
    assert decorations == ["text-decoration: underline dashed #e74c3c;"]


def test_decoration_color_as_string():
    node = text_node(textDecoration="UNDERLINE", textDecorationStyle="DASHED", textDecorationColor="#e74c3c")
    assert "text-decoration: underline dashed #e74c3c;" in css(node)


def test_solid_decoration_without_color():
    assert "text-decoration: line-through;" in css(text_node(textDecoration="STRIKETHROUGH"))


# ─── Spacing ────────────────────────────────────────────────────────────────

def test_line_height_units():
    assert "line-height: 150%;" in css(text_node(lineHeight={"unit": "PERCENT", "value": 150}))
    assert "line-height: 24px;" in css(text_node(lineHeight={"unit": "PIXELS", "value": 24}))
    assert not any(r.startswith("line-height") for r in css(text_node(lineHeight={"unit": "AUTO"})))


def test_letter_spacing_percent_to_em():
    assert "letter-spacing: 0.05em;" in css(text_node(letterSpacing={"unit": "PERCENT", "value": 5}))


def test_letter_spacing_pixels():
    assert "letter-spacing: 1.5px;" in css(text_node(letterSpacing={"unit": "PIXELS", "value": 1.5}))


def test_paragraph_spacing_and_indent():
    rules = css(text_node(paragraphSpacing=12, paragraphIndent=20))
    assert "margin-bottom: 12px;" in rules
    assert "text-indent: 20px;" in rules


# ─── Case / trim / resize ───────────────────────────────────────────────────

def test_upper_case():
    assert "text-transform: uppercase;" in css(text_node(textCase="UPPER"))


def test_small_caps_uses_font_variant_only():
    rules = css(text_node(textCase="SMALL_CAPS"))
    assert "font-variant: small-caps;" in rules
    assert not any(r.startswith("text-transform") for r in rules)


def test_leading_trim():
    rules = css(text_node(leadingTrim="CAP_HEIGHT"))
    assert "text-box-trim: trim-both;" in rules
    assert "text-box-edge: cap alphabetic;" in rules


def test_auto_width_and_height():
    node = text_node(textAutoResize="WIDTH_AND_HEIGHT")
    rules = css(node)
    assert "width: fit-content;" in rules
    assert "height: fit-content;" in rules
    assert "white-space: nowrap;" in rules
    assert text_owned_axes(extract_typography(node)) == ("width", "height")


def test_auto_height_owns_height_only():
    assert text_owned_axes(extract_typography(text_node(textAutoResize="HEIGHT"))) == ("height",)
    assert text_owned_axes(extract_typography(text_node())) == ()


def test_ellipsis_truncation():
    rules = css(text_node(textTruncation="ENDING"))
    assert "text-overflow: ellipsis;" in rules
    assert "overflow: hidden;" in rules


# ─── Effects / appearance ───────────────────────────────────────────────────

def test_drop_shadow_becomes_text_shadow():
    node = text_node(effects=[{
        "type": "DROP_SHADOW",
        "color": {"r": 0, "g": 0, "b": 0, "a": 1},
        "offset": {"x": 0, "y": 2},
        "radius": 4,
    }])
    assert "text-shadow: 0px 2px 4px #000000;" in css(node)


def test_text_stroke():
    node = text_node(strokes=[{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}], strokeWeight=1)
    assert "-webkit-text-stroke: 1px #ffffff;" in css(node)


def test_opacity_and_blend():
    rules = css(text_node(opacity=0.8, blendMode="MULTIPLY"))
    assert "opacity: 0.8;" in rules
    assert "mix-blend-mode: multiply;" in rules


def test_no_typography_for_empty_text():
    assert generate_typography_css(extract_typography({"type": "TEXT"})) == []


# ─── REST-shaped text nodes ─────────────────────────────────────────────────

def test_rest_style_object_is_read():
    node = {
        "id": "t2",
        "type": "TEXT",
        "style": {
            "fontFamily": "Roboto",
            "fontWeight": 700,
            "fontSize": 20,
            "italic": True,
            "lineHeightPx": 28,
            "letterSpacing": 0.5,
            "textAlignHorizontal": "CENTER",
        },
    }
    rules = css(node, ["sans-serif"])
    assert 'font-family: "Roboto", sans-serif;' in rules
    assert "font-size: 20px;" in rules
    assert "font-weight: 700;" in rules
    assert "font-style: italic;" in rules
    assert "line-height: 28px;" in rules
    assert "letter-spacing: 0.5px;" in rules
    assert "text-align: center;" in rules


def test_plugin_keys_win_over_rest_style():
    node = text_node(style={"fontFamily": "Roboto", "fontSize": 99})
    rules = css(node)
    assert "font-size: 16px;" in rules
    assert any('"Inter"' in r for r in rules)


def test_outside_text_stroke_paints_stroke_first():
    stroke = [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0}}]
    outside = css(text_node(strokes=stroke, strokeWeight=2, strokeAlign="OUTSIDE"))
    centered = css(text_node(strokes=stroke, strokeWeight=2, strokeAlign="CENTER"))
    assert outside[-2:] == ["-webkit-text-stroke: 2px #000000;", "paint-order: stroke fill;"]
    assert "paint-order: stroke fill;" not in centered
