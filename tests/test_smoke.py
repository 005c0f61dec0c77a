"""
Smoke tests：驗證套件可匯入、版本與公開 API 存在。
"""


def test_import_package():
    """套件可正常匯入"""
    import figma_css
    assert figma_css.__version__ == "0.1.0"


def test_public_api():
    """公開 API 可從 figma_css 取得"""
    from figma_css import (
        __version__,
        EngineConfig,
        MissingNodeIdError,
        PathRecord,
        StyleEngine,
        StyleResult,
        generate_path_record,
        generate_styles,
        load_config,
        map_easing_to_css,
        rgba_to_hex,
        validate_config,
    )
    assert __version__ == "0.1.0"
    assert issubclass(MissingNodeIdError, ValueError)
    assert callable(generate_styles)
    assert callable(generate_path_record)
    assert callable(load_config)
    assert callable(validate_config)
    assert isinstance(StyleEngine().build([]), StyleResult)
    assert PathRecord("0 0 1 1", "M 0 0").view_box == "0 0 1 1"
    assert EngineConfig().selector_attribute == "data-figma-id"
    assert rgba_to_hex({"r": 0, "g": 0, "b": 0}) == "#000000"
    assert map_easing_to_css("LINEAR") == "linear"


def test_generate_styles_minimal_tree():
    """最小節點樹可產生規則與 CSS"""
    from figma_css import generate_styles

    result = generate_styles({"id": "0:1", "type": "FRAME", "width": 100, "height": 100})
    assert "0:1" in result.rules
    assert "width: 100px;" in result.rules["0:1"]
    assert '[data-figma-id="0:1"]' in result.to_css()
