# -*- coding: utf-8 -*-
"""
render.py
- チャート文書(YAML) を読み込み、各チャートを SVG ファイルに書き出すコマンドライン。
- 特色:
  * 文書ノーマライザー: list ルートや単一チャートだけの緩い入力も包んで処理
  * ツールローディング: tool 名から schemas / renderers を動的に解決
  * theme: 文書全体の既定オプションを各チャートの options の下に敷く
  * 1 チャートの失敗で全体を止めない（最後に終了コードで報告）
"""
from __future__ import annotations

import argparse
import importlib
import importlib.util
import logging
import re
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .data import normalize_data
from .document_schema import ChartDocument
from .errors import PrettyGraphsError
from .ids import default_id_generator
from .logger import setup_logger

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CHART_FAILED = 1
EXIT_BAD_DOCUMENT = 2


# =========================================================
# Tool Loader
# =========================================================
def _sanitize_module_name(name: str) -> str:
    n = (name or "").strip()
    n = n.replace("-", "_").replace(" ", "_")
    n = re.sub(r"[^0-9a-zA-Z_]", "_", n)
    return n.lower()


def _load_tool_module(kind: str, tool_name: str):
    mod_name = _sanitize_module_name(tool_name)
    full = f"{__package__}.{kind}.{mod_name}"
    if importlib.util.find_spec(full) is None:
        logger.warning(
            "%s for tool '%s' not found. Expected '%s/%s.py'.",
            kind.rstrip("s").capitalize(), tool_name, kind, mod_name,
        )
        return None
    return importlib.import_module(full)


def load_schema(tool_name: str):
    """ツール名から Pydantic スキーマ（Schema クラス）を読み込む"""
    module = _load_tool_module("schemas", tool_name)
    if module is None:
        return None
    if not hasattr(module, "Schema"):
        logger.warning("Schema module for '%s' has no 'Schema' class.", tool_name)
        return None
    return module.Schema


def load_renderer(tool_name: str):
    """ツール名からレンダラー（render 関数を持つモジュール）を読み込む"""
    module = _load_tool_module("renderers", tool_name)
    if module is None:
        return None
    if not hasattr(module, "render"):
        logger.warning(
            "Renderer module for '%s' has no 'render(records, options, ids)' function.",
            tool_name,
        )
        return None
    return module


# =========================================================
# Document normalizer
# =========================================================
def _normalize_document(raw):
    """
    受け取った文書を {version, meta, theme, charts} に正規化する。
    - list ルート: charts とみなす
    - dict ルート: charts が無くて tool / data があれば 1 チャートに包む
    """
    if raw is None:
        return {"version": 1, "meta": {}, "theme": {}, "charts": []}

    if isinstance(raw, list):
        return {"version": 1, "meta": {}, "theme": {}, "charts": raw}

    if isinstance(raw, dict):
        doc = dict(raw)
        if "charts" not in doc and ("tool" in doc or "data" in doc):
            chart = {k: doc.pop(k) for k in ("tool", "id", "data", "options", "output") if k in doc}
            doc["charts"] = [chart]
        return doc

    raise TypeError(f"Chart document must be dict or list. Got: {type(raw)}")


def load_document(path) -> ChartDocument:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return ChartDocument.model_validate(_normalize_document(raw))


# =========================================================
# Render
# =========================================================
def render_chart(doc: ChartDocument, chart) -> str | None:
    """1 チャート分の SVG を返す（ツールが見つからなければ None）"""
    tool_name = chart.tool_name
    schema_class = load_schema(tool_name)
    renderer = load_renderer(tool_name)
    if schema_class is None or renderer is None:
        return None

    options = schema_class.model_validate(doc.options_for(chart))
    records = normalize_data(chart.data)
    return renderer.render(records, options, default_id_generator.next_ids())


def _output_path(out: Path, name: str) -> Path | None:
    """out 配下に収まる書き出し先を返す（はみ出す場合は None）"""
    root = out.resolve()
    target = (root / name).resolve()
    if target == root or root not in target.parents:
        return None
    return target


def render_document(doc_path, output_dir) -> int:
    """文書内の全チャートを output_dir に書き出し、失敗数を返す"""
    doc = load_document(doc_path)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    failures = 0
    for idx, chart in enumerate(doc.charts, start=1):
        chart_id = chart.id or f"{chart.tool_name}_{idx}"
        try:
            svg = render_chart(doc, chart)
        except (PrettyGraphsError, ValidationError) as e:
            logger.error("Failed to render chart '%s': %s", chart_id, e)
            failures += 1
            continue
        if svg is None:
            logger.warning("Skipping chart '%s': unknown tool '%s'.", chart_id, chart.tool_name)
            failures += 1
            continue

        name = chart.output or f"{chart_id}.svg"
        target = _output_path(out, name)
        if target is None:
            logger.error("Refusing to write chart '%s' outside '%s': %s", chart_id, out, name)
            failures += 1
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(svg, encoding="utf-8")
        logger.info("Wrote %s", target)

    return failures


# =========================================================
# CLI
# =========================================================
def _build_arg_parser():
    p = argparse.ArgumentParser(description="Render SVG bar charts from a chart document (YAML).")
    p.add_argument("input", help="Path to chart document YAML")
    p.add_argument("-o", "--output", default="dist", help="Directory for the .svg files")
    p.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    return p


def main(argv=None) -> int:
    args = _build_arg_parser().parse_args(argv)
    setup_logger(__package__, args.log_level)

    try:
        failures = render_document(args.input, args.output)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        logger.error("Cannot read chart document '%s': %s", args.input, e)
        return EXIT_BAD_DOCUMENT

    if failures:
        logger.error("%d chart(s) failed to render.", failures)
        return EXIT_CHART_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
