"""
figma-css — Figma 節點樹 → 每節點 CSS 規則 + 向量路徑

純轉換引擎；讀檔、寫檔與 watch 由 cli 負責。
"""

__version__ = "0.1.0"

from .config import EngineConfig, load_config, validate_config
from .engine import MissingNodeIdError, StyleEngine, StyleResult, generate_styles
from .svg_paths import PathRecord, generate_path_record
from .color_utils import rgba_to_hex
from .transitions import map_easing_to_css

__all__ = [
    "__version__",
    "EngineConfig",
    "load_config",
    "validate_config",
    "MissingNodeIdError",
    "StyleEngine",
    "StyleResult",
    "generate_styles",
    "PathRecord",
    "generate_path_record",
    "rgba_to_hex",
    "map_easing_to_css",
]
