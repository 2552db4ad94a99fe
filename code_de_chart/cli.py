"""Command-line interface."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from .classifier import classify, suggest_chart_types
from .config import print_config
from .logging_config import configure_logging
from .models import ChartRequest, ChartResult, Completion, InputKind
from .service import ChartService, finalize, resolve_request


def _read_input(args: argparse.Namespace) -> str:
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise ValueError(f"Input file not found: {args.file}")
        return path.read_text()
    return args.text or ""


def _print_result(result: ChartResult, as_json: bool):
    if as_json:
        print(result.model_dump_json(by_alias=True, indent=2))
        return

    print(f"Chart type: {result.chart_type.value}")
    if result.fallback:
        print("Fallback: yes")
    if result.error:
        print(f"Error: {result.error}")
    if result.warning:
        print(f"Warning: {result.warning}")
    print()
    print(result.mermaid_code)


def run_offline(text: str, raw_path: str, chart_type: Optional[str], input_kind: InputKind) -> ChartResult:
    """Normalize a saved completion without calling the model."""
    path = Path(raw_path)
    if not path.exists():
        raise ValueError(f"Completion file not found: {raw_path}")

    request = ChartRequest(text=text or "", chart_type=chart_type, input_kind=input_kind)
    request, resolved = resolve_request(request)
    return finalize(request, resolved, Completion(success=True, content=path.read_text()))


async def run_generate(text: str, chart_type: Optional[str], input_kind: InputKind, language: str) -> ChartResult:
    service = ChartService()
    request = ChartRequest(text=text, chart_type=chart_type, input_kind=input_kind, language=language)
    return await service.generate(request)


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="code-de-chart",
        description="LLM-driven Mermaid chart generation from text or code"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text or code to chart"
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        help="Read the input from a file instead"
    )
    parser.add_argument(
        "--type", "-t",
        dest="chart_type",
        type=str,
        default=None,
        help="Chart type or alias (gantt, pie, flowchart, ...); detected from the input if omitted"
    )
    parser.add_argument(
        "--input-kind", "-k",
        choices=[kind.value for kind in InputKind],
        default=None,
        help="Treat the input as code or text (default: text, code for --file)"
    )
    parser.add_argument(
        "--language", "-l",
        type=str,
        default="javascript",
        help="Programming language of code input"
    )
    parser.add_argument(
        "--raw-file",
        type=str,
        metavar="COMPLETION.txt",
        help="Normalize a saved model completion instead of calling the model"
    )
    parser.add_argument(
        "--detect",
        action="store_true",
        help="Print the detected input category and exit"
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Print chart type suggestions and exit"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON (for scripting)"
    )
    parser.add_argument(
        "--config", "-c",
        action="store_true",
        help="Show config and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log pipeline details to stderr"
    )
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None, stream=sys.stderr)

    if args.config:
        print_config()
        return

    try:
        text = _read_input(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.detect:
        category = classify(text)
        print(json.dumps({"detectedType": category.value}) if args.json else category.value)
        return

    if args.suggest:
        suggestions = suggest_chart_types(text)
        if args.json:
            print(json.dumps([s.model_dump(mode="json") for s in suggestions], indent=2))
        else:
            for s in suggestions:
                marker = "*" if s.recommended else " "
                print(f"{marker} {s.type.value:<10} {s.name} - {s.description}")
        return

    if args.input_kind:
        input_kind = InputKind(args.input_kind)
    else:
        input_kind = InputKind.CODE if args.file else InputKind.TEXT

    try:
        if args.raw_file:
            result = run_offline(text, args.raw_file, args.chart_type, input_kind)
        else:
            result = asyncio.run(run_generate(text, args.chart_type, input_kind, args.language))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _print_result(result, args.json)


if __name__ == "__main__":
    main()
