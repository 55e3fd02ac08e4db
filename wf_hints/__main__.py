#!/usr/bin/env python3
"""
Workflow Hints - Command-line interface

Inspect how messages are sanitized, which mentions are detected and how
workflow names resolve.

Usage:
    python -m wf_hints sanitize [TEXT]
    python -m wf_hints detect [TEXT]
    python -m wf_hints resolve NAME -w WORKFLOW [-w WORKFLOW ...]
    python -m wf_hints inject [TEXT] -w WORKFLOW [--desc NAME=TEXT] [--hinted NAME]

TEXT defaults to stdin. WORKFLOW is NAME or NAME=alias1,alias2.

Examples:
    echo "review this //cr" | python -m wf_hints inject -w commit-review=cr
    python -m wf_hints resolve 5app -w 5-approaches
"""

import argparse
import os
import sys
from typing import List

from .catalog import Workflow, WorkflowCatalog
from .config import HintConfig
from .display import HintDisplay
from .injector import HintInjector
from .logger import HintLogger
from .mentions import detect_mentions
from .sanitize import sanitize_user_message
from .templates import THEME_HEADERS


def parse_workflow_arg(value: str) -> Workflow:
    """Parse 'name' or 'name=alias1,alias2'. Raises ValueError on an empty name."""
    name, _, aliases = value.partition("=")
    if not name.strip():
        raise ValueError(f"Invalid workflow '{value}': expected NAME or NAME=alias1,alias2")
    alias_list = [a.strip() for a in aliases.split(",") if a.strip()]
    return Workflow(name=name.strip(), aliases=alias_list)


def build_catalog(args) -> WorkflowCatalog:
    """Build a catalog from -w and --desc options. Raises ValueError on malformed values."""
    descriptions = {}
    for item in getattr(args, "desc", None) or []:
        name, sep, text = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid description '{item}': expected NAME=TEXT")
        descriptions[name.strip()] = text.strip()

    workflows: List[Workflow] = []
    for item in args.workflow or []:
        workflow = parse_workflow_arg(item)
        workflow.description = descriptions.get(workflow.name, "")
        workflows.append(workflow)
    return WorkflowCatalog(workflows)


def read_text(args) -> str:
    """Message text from the positional argument or stdin."""
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def cmd_sanitize(args) -> int:
    """Print the message with hints and highlights removed."""
    HintDisplay().text(sanitize_user_message(read_text(args)))
    return 0


def cmd_detect(args) -> int:
    """Print workflow mentions found in the sanitized message."""
    text = sanitize_user_message(read_text(args))
    HintDisplay().mentions(detect_mentions(text))
    return 0


def cmd_resolve(args) -> int:
    """Resolve a workflow name, printing suggestions on no match."""
    config = HintConfig()
    try:
        catalog = build_catalog(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    display = HintDisplay()

    workflow = catalog.resolve(args.name)
    if workflow is None:
        suggestions = catalog.format_suggestions(
            args.name,
            limit=config.suggestion_limit,
            max_aliases=config.max_aliases,
        )
        display.suggestions(args.name, suggestions)
        return 1

    display.text(workflow.name)
    return 0


def cmd_inject(args) -> int:
    """Sanitize a message and append hints for mentioned workflows."""
    config = HintConfig()
    logger = HintLogger(config.log_dir, args.session_id)
    try:
        catalog = build_catalog(args)
    except ValueError as e:
        logger.log_error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    injector = HintInjector(catalog, config, logger)

    result = injector.prepare(read_text(args), already_hinted=args.hinted or [])
    HintDisplay().injection_result(result)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="wf_hints",
        description="Workflow Hints - mention detection, name resolution and hint sanitizing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--theme", choices=sorted(THEME_HEADERS),
                        help="Hint header theme (overrides config)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sanitize_parser = subparsers.add_parser("sanitize", help="Strip hints and highlights")
    sanitize_parser.add_argument("text", nargs="?", help="Message text (default: stdin)")
    sanitize_parser.set_defaults(func=cmd_sanitize)

    detect_parser = subparsers.add_parser("detect", help="List //name mentions")
    detect_parser.add_argument("text", nargs="?", help="Message text (default: stdin)")
    detect_parser.set_defaults(func=cmd_detect)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a workflow name")
    resolve_parser.add_argument("name", help="Typed workflow name")
    resolve_parser.add_argument("-w", "--workflow", action="append",
                                help="Known workflow: NAME or NAME=alias1,alias2")
    resolve_parser.set_defaults(func=cmd_resolve)

    inject_parser = subparsers.add_parser("inject", help="Append hints for mentioned workflows")
    inject_parser.add_argument("text", nargs="?", help="Message text (default: stdin)")
    inject_parser.add_argument("-w", "--workflow", action="append",
                               help="Known workflow: NAME or NAME=alias1,alias2")
    inject_parser.add_argument("--desc", action="append",
                               help="Workflow description: NAME=TEXT")
    inject_parser.add_argument("--hinted", action="append",
                               help="Workflow already hinted on an earlier turn")
    inject_parser.add_argument("--session-id", default="cli",
                               help="Session ID for log file naming")
    inject_parser.set_defaults(func=cmd_inject)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.theme:
        os.environ["WF_HINTS_THEME"] = args.theme

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
