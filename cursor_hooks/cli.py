"""Command line tools for hooks.json files."""

import argparse
import json
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cursor_hooks.config import HooksConfig
from cursor_hooks.exceptions import HookConfigError
from cursor_hooks.logger import setup_logging
from cursor_hooks.registry import HOOK_SPECS


def _validate(args: argparse.Namespace, console: Console) -> int:
    try:
        config = HooksConfig.load(args.path)
    except HookConfigError as e:
        console.print(f"[red]✗[/red] {escape(e.args[0])}", highlight=False)
        for error in e.errors:
            console.print(f"  - {error}", highlight=False, markup=False)
        return 1

    console.print(f"[green]✓[/green] {escape(args.path)} is a valid hooks config")
    table = Table()
    table.add_column("Event", no_wrap=True)
    table.add_column("Commands")
    for event in HOOK_SPECS:
        commands = config.get_commands(event)
        if commands:
            table.add_row(event.value, "\n".join(escape(c.command) for c in commands))
    if table.row_count:
        console.print(table)
    else:
        console.print("No hooks registered.")
    return 0


def _schema(args: argparse.Namespace, console: Console) -> int:
    print(json.dumps(HooksConfig.json_schema(), indent=2))
    return 0


def _events(args: argparse.Namespace, console: Console) -> int:
    table = Table()
    table.add_column("Event", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Description")
    for event, spec in HOOK_SPECS.items():
        table.add_row(event.value, spec.kind.value, spec.description)
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cursor-hooks", description="Cursor hook contract tools"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a hooks.json file")
    validate.add_argument("path", help="Path to hooks.json")
    validate.set_defaults(func=_validate)

    schema = subparsers.add_parser(
        "schema", help="Print the JSON schema of hooks.json"
    )
    schema.set_defaults(func=_schema)

    events = subparsers.add_parser("events", help="List the hook events")
    events.set_defaults(func=_events)
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    return args.func(args, Console(soft_wrap=True))


if __name__ == "__main__":
    sys.exit(main())
