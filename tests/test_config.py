"""
設定檔載入 / 驗證 / EngineConfig 單元測試
"""
import json

from figma_css.config import EngineConfig, load_config, validate_config
from figma_css.typography import DEFAULT_FALLBACK_FONTS


def write_config(tmp_path, data):
    path = tmp_path / "figma-css.config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


# ─── load_config ────────────────────────────────────────────────────────────

def test_missing_file_returns_empty(tmp_path):
    assert load_config(str(tmp_path / "nope.json")) == {}


def test_non_object_returns_empty_with_warning(tmp_path, capsys):
    path = write_config(tmp_path, ["not", "an", "object"])
    assert load_config(path) == {}
    assert "[config]" in capsys.readouterr().out


def test_valid_config_loaded(tmp_path, capsys):
    data = {"output": {"dir": "dist", "selectorAttribute": "data-node"}}
    assert load_config(write_config(tmp_path, data)) == data
    assert capsys.readouterr().out == ""


# ─── validate_config ────────────────────────────────────────────────────────

def test_unknown_top_level_key_warns(capsys):
    validate_config({"outptu": {}})
    assert "outptu" in capsys.readouterr().out


def test_unknown_section_key_warns(capsys):
    validate_config({"engine": {"verbos": True}})
    assert "verbos" in capsys.readouterr().out


def test_wrong_types_warn(capsys):
    validate_config({
        "output": {"dir": 3},
        "typography": {"fallbackFonts": "serif"},
        "engine": {"verbose": "yes"},
    })
    out = capsys.readouterr().out
    assert "output.dir" in out
    assert "typography.fallbackFonts" in out
    assert "engine.verbose" in out


def test_validate_never_raises():
    validate_config({"output": "flat", "engine": None})
    validate_config({})


# ─── EngineConfig ───────────────────────────────────────────────────────────

def test_defaults():
    config = EngineConfig()
    assert config.selector_attribute == "data-figma-id"
    assert config.image_frame_prefix == "[IMG]"
    assert config.fallback_fonts == DEFAULT_FALLBACK_FONTS
    assert config.verbose is False


def test_default_fonts_not_shared():
    a, b = EngineConfig(), EngineConfig()
    a.fallback_fonts.append("serif")
    assert "serif" not in b.fallback_fonts


def test_from_dict():
    config = EngineConfig.from_dict({
        "output": {"selectorAttribute": "data-node"},
        "typography": {"fallbackFonts": ["Georgia", "serif"]},
        "engine": {"imageFramePrefix": "#img", "verbose": True},
    })
    assert config.selector_attribute == "data-node"
    assert config.fallback_fonts == ["Georgia", "serif"]
    assert config.image_frame_prefix == "#img"
    assert config.verbose is True


def test_from_dict_ignores_bad_values():
    config = EngineConfig.from_dict({
        "output": {"selectorAttribute": ""},
        "typography": {"fallbackFonts": "serif"},
        "engine": {"verbose": "yes"},
    })
    assert config == EngineConfig()


def test_from_empty():
    assert EngineConfig.from_dict(None) == EngineConfig()
