"""
Tabline Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import re
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any

import yaml
from prompt_toolkit import PromptSession
from rich.columns import Columns
from rich.markup import escape

from tabline.completer import AutoCompleter, TablineCompleter
from tabline.config import find_tabline_config, loader
from tabline.console import console
from tabline.context import Context, ObjectValue
from tabline.exceptions import ConfigError
from tabline.utils import setup_logging

ASSIGNMENT = re.compile(r"^\s*\$(\w+)\s*=(?![=>])\s*(.+?)\s*;?\s*$")
NEW_OBJECT = re.compile(r"^new\s+\\?([\w\\]+)")


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="tabline",
        description="Context-sensitive tab completion for an interactive PHP shell.",
    )
    parser.add_argument("-c", "--config", type=Path, help="YAML or TOML config file.")
    parser.add_argument("--log-mode", choices=["cli", "json"], help="Log output mode.")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to a file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")

    subparsers = parser.add_subparsers(dest="command")
    complete_parser = subparsers.add_parser(
        "complete",
        help="Print the completions for one line of input",
        description="Print every candidate that could complete the word at the cursor.",
    )
    complete_parser.add_argument("line", type=str, help="The input line.")
    complete_parser.add_argument(
        "--cursor", type=int, default=None, help="Cursor offset (default: end of line)."
    )
    complete_parser.add_argument(
        "--json", action="store_true", help="Print candidates as a JSON list."
    )
    subparsers.add_parser(
        "shell",
        help="Try completion interactively",
        description=(
            "Start a prompt with tab completion. `$name = new Class` and "
            "`$name = <value>` bind variables; other lines list their completions."
        ),
    )
    return parser


def build_auto_completer(config_path: Path | None) -> AutoCompleter:
    path = config_path or find_tabline_config()
    if path:
        return loader(path)
    return AutoCompleter.default()


def bind_assignment(context: Context, line: str) -> tuple[str, Any] | None:
    """Bind `$name = new Class` or `$name = <yaml scalar>`; None if not an assignment."""
    match = ASSIGNMENT.match(line)
    if not match:
        return None
    name, expression = match.groups()
    new_object = NEW_OBJECT.match(expression)
    if new_object:
        value: Any = ObjectValue(class_name=new_object.group(1))
    else:
        try:
            value = yaml.safe_load(expression)
        except yaml.YAMLError:
            value = expression
    context.set(name, value)
    return name, value


def print_candidates(candidates: list[str], as_json: bool = False) -> None:
    if as_json:
        console.print_json(data=candidates)
    elif candidates:
        console.print(Columns([escape(c) for c in candidates], equal=True, expand=False))
    else:
        console.print("[dim]No completions.[/]")


def run_shell(auto_completer: AutoCompleter) -> None:
    session: PromptSession = PromptSession(
        completer=TablineCompleter(auto_completer), complete_while_typing=False
    )
    console.print("[bold]Tabline shell[/] (Tab to complete, Ctrl-D to quit)")
    while True:
        try:
            line = session.prompt("> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if not line.strip():
            continue
        if isinstance(auto_completer.context, Context):
            bound = bind_assignment(auto_completer.context, line)
            if bound is not None:
                console.print(f"[green]${bound[0]} =>[/] {bound[1]}")
                continue
        print_candidates(sorted(auto_completer.complete(line)))


def main(argv: list[str] | None = None) -> Any:
    args: Namespace = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        log_filename=args.log_file,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        auto_completer = build_auto_completer(args.config)
    except ConfigError as error:
        console.print(f"[red]❌ {escape(str(error))}[/]")
        sys.exit(1)

    if args.command == "complete":
        print_candidates(
            sorted(auto_completer.complete(args.line, args.cursor)), as_json=args.json
        )
    elif args.command == "shell":
        run_shell(auto_completer)
    else:
        get_parser().print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
