"""
Style engine — 走訪節點樹，為每個節點組出 CSS 宣告清單與向量路徑

單一節點的輸出順序固定：
  positioning → layout → 背景 / 文字顏色 → 邊框 → effects → typography
  → opacity / blend（非文字）→ display: none（隱藏節點）

引擎本身不做任何 I/O；每次 build() 都從零開始，不保留狀態。
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .color_utils import css_number, is_number
from .config import EngineConfig
from .effects import extract_effects, generate_effects_css
from .fills import extract_fills, generate_background_css, generate_text_color_css
from .layout import extract_layout, generate_layout_css
from .mappers import map_blend_mode
from .positioning import generate_positioning_css
from .strokes import extract_strokes, generate_line_css, generate_stroke_css
from .svg_paths import generate_path_record
from .typography import extract_typography, generate_typography_css, text_owned_axes

CSS_HEADER = "/* Generated CSS from Figma styles */"

# 由 SVG 路徑描繪的形狀：描邊屬於路徑，不輸出 CSS 邊框
_PATH_STROKED_TYPES = ("VECTOR", "ELLIPSE", "POLYGON", "STAR", "BOOLEAN_OPERATION")
_NO_BACKGROUND_TYPES = ("VECTOR", "ELLIPSE")


class MissingNodeIdError(ValueError):
    """節點缺少 id，無法作為樣式規則的 key."""


def _warn(msg: str) -> None:
    print(f"   ⚠️  [engine] {msg}")


def _as_roots(roots) -> list:
    if roots is None:
        return []
    if isinstance(roots, dict):
        return [roots]
    return list(roots)


def _count_nodes(node: dict) -> int:
    n = 1
    for child in node.get("children") or []:
        n += _count_nodes(child)
    return n


@dataclass
class StyleResult:
    rules: dict = field(default_factory=dict)
    paths: dict = field(default_factory=dict)

    def to_css(self, attribute: str = "data-figma-id") -> str:
        """One block per node, keyed by an attribute selector."""
        blocks = [CSS_HEADER, ""]
        for node_id, declarations in self.rules.items():
            if not declarations:
                continue
            selector_id = str(node_id).replace("\\", "\\\\").replace('"', '\\"')
            body = "\n".join(f"  {declaration}" for declaration in declarations)
            blocks.append(f'[{attribute}="{selector_id}"] {{\n{body}\n}}\n')
        return "\n".join(blocks)

    def paths_to_dict(self) -> dict:
        return {node_id: record.to_dict() for node_id, record in self.paths.items()}


class StyleEngine:
    """節點樹 → StyleResult."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def build(self, roots: Union[dict, list, None]) -> StyleResult:
        roots = _as_roots(roots)
        for root in roots:
            self._validate_ids(root)

        result = StyleResult()
        for root in roots:
            self._visit(root, None, True, result)

        if self.config.verbose:
            total = sum(_count_nodes(root) for root in roots)
            print(f"🎨 Styled {len(result.rules)}/{total} nodes, {len(result.paths)} paths")
        return result

    # ─── Traversal ───

    def _validate_ids(self, node: dict, path: str = "root") -> None:
        if not isinstance(node, dict):
            raise MissingNodeIdError(f"{path}: node must be an object, got {type(node).__name__}")
        node_id = node.get("id")
        if node_id is None or node_id == "":
            label = node.get("name") or node.get("type") or "?"
            raise MissingNodeIdError(f"{path}: node '{label}' has no id")
        for i, child in enumerate(node.get("children") or []):
            self._validate_ids(child, f"{path}.children[{i}]")

    def _visit(self, node: dict, parent: Optional[dict], is_root: bool, result: StyleResult) -> None:
        node_id = node["id"]

        if node_id in result.rules:
            _warn(f"重複的節點 id '{node_id}'（{node.get('name', '')}），略過")
        else:
            result.rules[node_id] = self.node_rules(node, parent, is_root)
            record = generate_path_record(node)
            if record is not None:
                result.paths[node_id] = record
            if self.config.verbose:
                print(f"   🎨 {node.get('name', node_id)} ({node.get('type')}): "
                      f"{len(result.rules[node_id])} declarations")

        snapshot = self._snapshot(node, parent)
        for child in node.get("children") or []:
            self._visit(child, snapshot, False, result)

    @staticmethod
    def _snapshot(node: dict, parent: Optional[dict]) -> dict:
        """Parent context handed to every child of ``node``."""
        if node.get("type") == "COMPONENT_SET":
            group_id = node.get("id")
        else:
            group_id = (parent or {}).get("groupId")
        return {
            "id": node.get("id"),
            "type": node.get("type"),
            "x": node.get("x") if is_number(node.get("x")) else 0,
            "y": node.get("y") if is_number(node.get("y")) else 0,
            "layoutMode": node.get("layoutMode"),
            "layoutPositioning": node.get("layoutPositioning"),
            "groupId": group_id,
        }

    # ─── Per-node rules ───

    def is_image_frame(self, node: dict) -> bool:
        prefix = self.config.image_frame_prefix
        return bool(prefix) and str(node.get("name") or "").startswith(prefix)

    def node_rules(self, node: dict, parent: Optional[dict] = None, is_root: bool = False) -> list:
        node_type = node.get("type")
        is_text = node_type == "TEXT"
        image_frame = self.is_image_frame(node)

        layout = extract_layout(node, parent, is_root)
        typography = extract_typography(node, self.config.fallback_fonts) if is_text else None

        rules = generate_positioning_css(layout)

        if is_text:
            owned_axes = text_owned_axes(typography)
        elif node_type == "LINE":
            owned_axes = ("width",) if _size(node, "height") > _size(node, "width") else ("height",)
        else:
            owned_axes = ()
        rules.extend(generate_layout_css(layout, is_image_frame=image_frame, owned_axes=owned_axes))

        # ─── Paint ───
        fills = extract_fills(node)
        if is_text:
            color = generate_text_color_css(fills)
            if color:
                rules.append(f"color: {color};")
        elif not image_frame and node_type not in _NO_BACKGROUND_TYPES:
            background = generate_background_css(fills)
            if background:
                rules.append(f"background: {background};")

        # text strokes and shadows are re-emitted by typography
        stroke = extract_strokes(node)
        if node_type == "LINE":
            rules.extend(generate_line_css(node, stroke))
        elif not (is_text or image_frame or node_type == "COMPONENT_SET" or node_type in _PATH_STROKED_TYPES):
            rules.extend(generate_stroke_css(stroke))

        rules.extend(generate_effects_css(extract_effects(node), include_shadows=not is_text))
        rules.extend(generate_typography_css(typography))

        if not is_text:
            opacity = node.get("opacity")
            if is_number(opacity) and opacity != 1:
                rules.append(f"opacity: {css_number(max(0, min(1, opacity)))};")
            blend = map_blend_mode(node.get("blendMode"))
            if blend and blend != "normal":
                rules.append(f"mix-blend-mode: {blend};")

        if node.get("visible") is False:
            rules.append("display: none;")

        # clip + ellipsis can both ask for overflow: hidden
        return list(dict.fromkeys(rules))


def _size(node: dict, key: str) -> float:
    value = node.get(key)
    return value if is_number(value) else 0


def generate_styles(roots: Union[dict, list, None], config: Optional[EngineConfig] = None) -> StyleResult:
    """StyleEngine(config).build(roots) 的簡寫."""
    return StyleEngine(config).build(roots)
