from __future__ import annotations

import argparse
import json
import sys

from .artifacts import render_groups_text, serialize_word_grouping_result
from .config import GroupingConfig, StrategyName
from .module import run_word_grouping
from .validation import InvalidInputError

SAMPLE_SOURCE = "   сапог   сарай  сапо    сбпо  спг       арбуз   биржаа    болт  бокс биржа    яяя я   "


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="word-grouper",
        description="Group whitespace-separated words by first character (singleton groups dropped).",
    )
    p.add_argument(
        "text",
        nargs="?",
        default=SAMPLE_SOURCE,
        help=(
            "Source string. Default: a built-in Cyrillic sample sentence. "
            "Put it after '--' when it starts with '-', e.g. `word-grouper -- \"-x -y\"`."
        ),
    )
    p.add_argument(
        "--strategy",
        choices=[s.value for s in StrategyName],
        default=StrategyName.LOOP.value,
    )
    p.add_argument("--min-group-size", type=int, default=2)
    p.add_argument("--format", choices=["text", "json"], default="text", dest="output_format")
    p.add_argument(
        "--compare",
        action="store_true",
        help="Run every strategy and report whether their outputs agree.",
    )
    return p


def _run_compare(text: str, min_group_size: int) -> int:
    rendered: dict[str, str] = {}
    for name in StrategyName:
        cfg = GroupingConfig(strategy=name, min_group_size=min_group_size)
        groups = run_word_grouping(text, cfg).as_mapping()
        rendered[name.value] = render_groups_text(groups)
        print(f"{name.value}: {rendered[name.value]}")

    if len(set(rendered.values())) != 1:
        print("strategies disagree", file=sys.stderr)
        return 3
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    try:
        if args.compare:
            return _run_compare(args.text, args.min_group_size)

        cfg = GroupingConfig(strategy=StrategyName(args.strategy), min_group_size=args.min_group_size)
        result = run_word_grouping(args.text, cfg)
    except InvalidInputError as e:
        print(json.dumps({"ok": False, "error": str(e)}, ensure_ascii=False), file=sys.stderr)
        return 2

    if args.output_format == "json":
        sys.stdout.write(serialize_word_grouping_result(result))
    else:
        print(render_groups_text(result.as_mapping()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
