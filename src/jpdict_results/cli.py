"""Command line harness that expands compact word records."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .assembler import to_word_result
from .common.config import LOG_FORMAT
from .common.types import GlossType, RawWordRecord, WordResult
from .loader import load_raw_records, parse_raw_records
from .normalization import kana_to_hiragana

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Expand compact dictionary word records for display.",
    )
    parser.add_argument(
        "--text",
        required=True,
        help="Text the user selected; katakana is folded to hiragana before matching.",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="JSON file holding one record or a list of records. Defaults to stdin.",
    )
    parser.add_argument(
        "--reason",
        help="Deinflection reason to attach to every result.",
    )
    parser.add_argument(
        "--romaji",
        nargs="+",
        help="Romanized readings to attach to every result.",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output with indentation.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to write the output. Defaults to stdout.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    matching_text = kana_to_hiragana((args.text or "").strip())
    if not matching_text:
        _emit_error("Selected text must be a non-empty string.")
        return 2

    try:
        records = _read_records(args.input)
    except (FileNotFoundError, OSError, ValueError) as exc:
        logger.error("Could not read word records: %s", exc)
        _emit_error(str(exc))
        return 2

    results = [
        to_word_result(
            record,
            matching_text,
            reason=args.reason,
            romaji=args.romaji,
        )
        for record in records
    ]

    if args.format == "json":
        rendered = _render_json(results, pretty=args.pretty)
    else:
        rendered = _format_text_report(results)
    _emit_output(rendered, output_path=args.output)
    return 0


def _read_records(input_path: Optional[Path]) -> List[RawWordRecord]:
    if input_path is not None:
        return load_raw_records(input_path)
    return parse_raw_records(json.loads(sys.stdin.read()))


def _render_json(results: Sequence[WordResult], *, pretty: bool) -> str:
    json_kwargs = {"ensure_ascii": False}
    if pretty:
        json_kwargs["indent"] = 2
    return json.dumps(list(results), **json_kwargs)


def _format_text_report(results: Sequence[WordResult]) -> str:
    return "\n\n".join(_format_result(result) for result in results)


def _format_result(result: WordResult) -> str:
    lines: List[str] = []
    headwords = [_format_headword(entry) for entry in result["k"]]
    readings = [_format_headword(entry) for entry in result["r"]]
    if headwords:
        lines.append("【" + "、".join(headwords) + "】 " + "、".join(readings))
    else:
        lines.append("、".join(readings))

    annotations = []
    if result.get("romaji"):
        annotations.append(", ".join(result["romaji"]))
    if result.get("reason"):
        annotations.append(f"< {result['reason']}")
    if annotations:
        lines.append("  " + "  ".join(annotations))

    for number, sense in enumerate(result["s"], start=1):
        pos = f"({', '.join(sense['pos'])}) " if sense.get("pos") else ""
        glosses = "; ".join(_format_gloss(gloss) for gloss in sense["g"])
        lines.append(f"  {number}. {pos}{glosses}")
    return "\n".join(lines)


def _format_headword(entry: dict) -> str:
    return f"*{entry['ent']}" if entry["match"] else entry["ent"]


def _format_gloss(gloss: dict) -> str:
    gloss_type = gloss.get("type")
    if gloss_type is None:
        return gloss["str"]
    try:
        label = GlossType(gloss_type).name.lower()
    except ValueError:
        label = str(gloss_type)
    return f"{gloss['str']} [{label}]"


def _emit_output(content: str, *, output_path: Optional[Path]) -> None:
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content + "\n", encoding="utf-8")
    else:
        print(content)


def _emit_error(message: str) -> None:
    print(message, file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
