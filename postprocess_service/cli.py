"""Post-process one saved raw ASR result and print the turn document."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from common.config import PostProcessSettings
from turn_engine.formatter import render_script
from turn_engine.pipeline import build_document

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    settings = PostProcessSettings()
    parser = argparse.ArgumentParser(
        prog="postprocess-transcript",
        description="Convert a raw ASR result into speaker turns with end-of-turn labels.",
    )
    parser.add_argument("raw_json", help="Path to a raw ASR result JSON file, or '-' for stdin")
    parser.add_argument(
        "--timestamps",
        action=argparse.BooleanOptionalAction,
        default=settings.include_timestamps,
        help="Attach an HH:MM:SS timestamp to every turn",
    )
    parser.add_argument("--format", choices=("json", "script"), default="json")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser.parse_args(argv)


def _load(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    try:
        data = _load(args.raw_json)
    except (OSError, ValueError) as exc:
        print(f"error: could not read {args.raw_json}: {exc}", file=sys.stderr)
        return 1

    document = build_document(data, include_timestamps=args.timestamps)
    logger.info("Post-processed %s: %d turns", args.raw_json, len(document.results))
    if args.format == "script":
        sys.stdout.write(render_script(document) + "\n")
    else:
        sys.stdout.write(json.dumps(document.to_wire(), indent=2) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
