#!/usr/bin/env python3
"""
figma-css CLI — 節點樹 JSON → CSS 規則 + SVG 路徑

  figma-css build nodes.json [--output DIR]    # 產生 styles.css + paths.json
  figma-css watch nodes.json                   # 檔案變更時自動重新 build
  figma-css inspect nodes.json --node 1:23     # 檢視單一節點的宣告
"""

import argparse
import json
import os
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from . import __version__
from .config import DEFAULT_CONFIG_PATH, EngineConfig, load_config
from .engine import MissingNodeIdError, StyleEngine

DEFAULT_OUTPUT_DIR = ".figma-css"
DEFAULT_CSS_FILE = "styles.css"
DEFAULT_PATHS_FILE = "paths.json"


def load_nodes(nodes_path: str) -> list:
    """讀取節點 JSON：單一節點、節點陣列，或 {"nodes": [...]}."""
    with open(nodes_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and isinstance(data.get("nodes"), list):
        return data["nodes"]
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise ValueError(f"'{nodes_path}' 應為節點物件或節點陣列，目前是 {type(data).__name__}")


def _resolve_nodes_path(args, config: dict):
    return getattr(args, "nodes", None) or config.get("input", {}).get("nodesFile")


def _engine_config(config: dict, attribute=None) -> EngineConfig:
    engine_config = EngineConfig.from_dict(config)
    if attribute:
        engine_config.selector_attribute = attribute
    return engine_config


def _build_result(nodes_path: str, engine_config: EngineConfig):
    """共用的 讀檔 → build 步驟；失敗時印出 ❌ 並回傳 None."""
    try:
        nodes = load_nodes(nodes_path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError 是 ValueError 的子類別
        print(f"   ❌ 無法讀取節點檔 '{nodes_path}': {e}")
        return None

    try:
        return StyleEngine(engine_config).build(nodes)
    except MissingNodeIdError as e:
        print(f"   ❌ {e}")
        return None


def perform_build(nodes_path: str, config: dict, output_dir=None, attribute=None) -> bool:
    """Core build logic, shared by build and watch commands."""
    print(f"🎨 Building styles from: {nodes_path}")

    engine_config = _engine_config(config, attribute)
    result = _build_result(nodes_path, engine_config)
    if result is None:
        return False
    print(f"   ✅ {len(result.rules)} nodes, {len(result.paths)} vector paths")

    output_cfg = config.get("output", {})
    output_dir = output_dir or output_cfg.get("dir") or DEFAULT_OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    css_path = os.path.join(output_dir, output_cfg.get("cssFile") or DEFAULT_CSS_FILE)
    with open(css_path, "w", encoding="utf-8") as f:
        f.write(result.to_css(engine_config.selector_attribute))
    print(f"   📄 CSS saved to {css_path}")

    paths_path = os.path.join(output_dir, output_cfg.get("pathsFile") or DEFAULT_PATHS_FILE)
    with open(paths_path, "w", encoding="utf-8") as f:
        json.dump(result.paths_to_dict(), f, indent=2, ensure_ascii=False)
    print(f"   📄 Paths saved to {paths_path}")
    return True


def cmd_build(args, config: dict) -> int:
    """Build: 節點 JSON → styles.css + paths.json."""
    nodes_path = _resolve_nodes_path(args, config)
    if not nodes_path:
        print("❌ 請指定節點 JSON 檔，或在 figma-css.config.json 的 input.nodesFile 設定。")
        return 1
    ok = perform_build(nodes_path, config, output_dir=args.output, attribute=args.attribute)
    return 0 if ok else 1


class ChangeHandler(FileSystemEventHandler):
    """節點檔變更事件處理器，帶 debounce 防抖。"""

    def __init__(self, callback, watched_path: str, debounce: float = 1.0):
        self.callback = callback
        self.watched_path = os.path.abspath(watched_path)
        self.last_trigger = 0.0
        self.debounce_seconds = debounce

    def on_modified(self, event):
        if event.is_directory:
            return
        if os.path.abspath(event.src_path) != self.watched_path:
            return
        current_time = time.time()
        if current_time - self.last_trigger < self.debounce_seconds:
            return
        self.last_trigger = current_time
        print(f"\n🔄 File changed: {event.src_path}")
        self.callback()


def cmd_watch(args, config: dict) -> int:
    """Watch: 監聽節點 JSON 變更並自動執行 build."""
    nodes_path = _resolve_nodes_path(args, config)
    if not nodes_path:
        print("❌ 請指定節點 JSON 檔，或在 figma-css.config.json 的 input.nodesFile 設定。")
        return 1

    watch_dir = str(Path(nodes_path).resolve().parent)
    print(f"👀 Watching '{nodes_path}' for changes...")
    print("   Press Ctrl+C to stop.")

    def build_task():
        perform_build(nodes_path, config, output_dir=args.output, attribute=args.attribute)

    # 初始執行一次 build
    build_task()

    event_handler = ChangeHandler(build_task, nodes_path)
    observer = Observer()
    observer.schedule(event_handler, path=watch_dir, recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\n👋 Stopping watch...")
        observer.stop()
    finally:
        observer.join()
    return 0


def cmd_inspect(args, config: dict) -> int:
    """印出單一節點的 CSS 宣告與向量路徑."""
    nodes_path = _resolve_nodes_path(args, config)
    if not nodes_path:
        print("❌ 請指定節點 JSON 檔。")
        return 1

    result = _build_result(nodes_path, _engine_config(config, getattr(args, "attribute", None)))
    if result is None:
        return 1

    node_id = args.node
    if node_id not in result.rules:
        print(f"❌ 找不到節點 '{node_id}'")
        return 1

    print(f"🔍 Node {node_id}")
    for declaration in result.rules[node_id]:
        print(f"  {declaration}")
    record = result.paths.get(node_id)
    if record is not None:
        print(f"\n  viewBox: {record.view_box}")
        print(f"  path:    {record.path}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="figma-css: Figma node tree → CSS rules + SVG paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config path")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    build_p = sub.add_parser("build", help="Node JSON → styles.css + paths.json",
        epilog="Examples:\n  figma-css build nodes.json\n  figma-css build nodes.json --output ./dist --attribute data-node",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    build_p.add_argument("nodes", nargs="?", help="Node tree JSON (defaults to input.nodesFile)")
    build_p.add_argument("--output", help="Output directory")
    build_p.add_argument("--attribute", help="Selector attribute (default: data-figma-id)")

    watch_p = sub.add_parser("watch", help="Rebuild when the node JSON changes",
        epilog="Examples:\n  figma-css watch nodes.json\n  figma-css watch nodes.json --output ./dist",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    watch_p.add_argument("nodes", nargs="?", help="Node tree JSON (defaults to input.nodesFile)")
    watch_p.add_argument("--output", help="Output directory")
    watch_p.add_argument("--attribute", help="Selector attribute (default: data-figma-id)")

    inspect_p = sub.add_parser("inspect", help="Print one node's declarations",
        epilog="Examples:\n  figma-css inspect nodes.json --node 1:23",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    inspect_p.add_argument("nodes", nargs="?", help="Node tree JSON (defaults to input.nodesFile)")
    inspect_p.add_argument("--node", required=True, help="Node id")

    args = parser.parse_args(argv)
    config = load_config(args.config)

    if args.command == "build":
        return cmd_build(args, config)
    if args.command == "watch":
        return cmd_watch(args, config)
    if args.command == "inspect":
        return cmd_inspect(args, config)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
