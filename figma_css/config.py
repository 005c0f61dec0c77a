"""設定檔載入、基本驗證與引擎設定."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .typography import DEFAULT_FALLBACK_FONTS

DEFAULT_CONFIG_PATH = "figma-css.config.json"
DEFAULT_SELECTOR_ATTRIBUTE = "data-figma-id"
DEFAULT_IMAGE_FRAME_PREFIX = "[IMG]"

# 已知有效的頂層欄位
_KNOWN_TOP_KEYS = {"input", "output", "typography", "engine"}

# 各區塊已知欄位（用於拼字提示）
_KNOWN_SECTION_KEYS = {
    "input": {"nodesFile"},
    "output": {"dir", "cssFile", "pathsFile", "selectorAttribute"},
    "typography": {"fallbackFonts"},
    "engine": {"imageFramePrefix", "verbose"},
}

# 字串型欄位
_STRING_FIELDS = (
    ("input", "nodesFile"),
    ("output", "dir"),
    ("output", "cssFile"),
    ("output", "pathsFile"),
    ("output", "selectorAttribute"),
    ("engine", "imageFramePrefix"),
)


def _warn(msg: str) -> None:
    print(f"   ⚠️  [config] {msg}")


def validate_config(cfg: dict) -> None:
    """對 config 做基本欄位驗證，印出警告但不拋例外。"""
    if not cfg:
        return

    # 頂層未知欄位
    for key in cfg:
        if key not in _KNOWN_TOP_KEYS:
            known = ", ".join(sorted(_KNOWN_TOP_KEYS))
            _warn(f"未知頂層欄位 '{key}'（已知欄位：{known}）")

    # 各區塊欄位
    for section, known_keys in _KNOWN_SECTION_KEYS.items():
        section_cfg = cfg.get(section, {})
        if not isinstance(section_cfg, dict):
            _warn(f"'{section}' 應為物件，目前是 {type(section_cfg).__name__}")
            continue
        for key in section_cfg:
            if key not in known_keys:
                known = ", ".join(sorted(known_keys))
                _warn(f"[{section}] 未知欄位 '{key}'（已知欄位：{known}）")

    # 值類型
    for section, key in _STRING_FIELDS:
        section_cfg = cfg.get(section)
        if not isinstance(section_cfg, dict):
            continue
        val = section_cfg.get(key)
        if val is not None and not isinstance(val, str):
            _warn(f"{section}.{key} 應為字串，目前是 {type(val).__name__}")

    typography = cfg.get("typography")
    fonts = typography.get("fallbackFonts") if isinstance(typography, dict) else None
    if fonts is not None and not (isinstance(fonts, list) and all(isinstance(f, str) for f in fonts)):
        _warn("typography.fallbackFonts 應為字串陣列")

    engine = cfg.get("engine")
    verbose = engine.get("verbose") if isinstance(engine, dict) else None
    if verbose is not None and not isinstance(verbose, bool):
        _warn(f"engine.verbose 應為布林值，目前是 {type(verbose).__name__}")


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """載入 JSON 設定檔，不存在則回傳空 dict；存在則做基本驗證。"""
    path = Path(config_path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg: Any = json.load(f)
    if not isinstance(cfg, dict):
        _warn(f"'{config_path}' 格式錯誤，應為 JSON 物件，回傳空設定。")
        return {}
    validate_config(cfg)
    return cfg


def _section(cfg: dict, name: str) -> dict:
    value = cfg.get(name)
    return value if isinstance(value, dict) else {}


@dataclass
class EngineConfig:
    """StyleEngine 的執行設定（皆有預設值，可不帶設定檔執行）。"""

    selector_attribute: str = DEFAULT_SELECTOR_ATTRIBUTE
    image_frame_prefix: str = DEFAULT_IMAGE_FRAME_PREFIX
    fallback_fonts: list = field(default_factory=lambda: list(DEFAULT_FALLBACK_FONTS))
    verbose: bool = False

    @classmethod
    def from_dict(cls, cfg: Optional[dict]) -> "EngineConfig":
        """從 load_config() 的結果建立；型別不符的欄位沿用預設值。"""
        cfg = cfg or {}
        output = _section(cfg, "output")
        typography = _section(cfg, "typography")
        engine = _section(cfg, "engine")

        config = cls()
        if isinstance(output.get("selectorAttribute"), str) and output["selectorAttribute"]:
            config.selector_attribute = output["selectorAttribute"]
        if isinstance(engine.get("imageFramePrefix"), str):
            config.image_frame_prefix = engine["imageFramePrefix"]
        fonts = typography.get("fallbackFonts")
        if isinstance(fonts, list) and all(isinstance(f, str) for f in fonts):
            config.fallback_fonts = list(fonts)
        if isinstance(engine.get("verbose"), bool):
            config.verbose = engine["verbose"]
        return config
