"""Command-line interface for fsseam."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fsseam.core.config import AppConfig, load_app_config
from fsseam.core.importers import Dealership, DealershipImporterSync, DealershipParseError
from fsseam.core.io import FileSystem, absolute_path
from fsseam.core.utils.logging import configure_logging, get_logger

console = Console()


def _render_table(records: list[Dealership]) -> Table:
    """Build a rich table of dealership records."""
    table = Table(title=f"Dealerships ({len(records)})")
    for column in ("Name", "Address", "City", "State", "Postal Code", "Phone"):
        table.add_column(column)
    for r in records:
        table.add_row(
            r.name, r.address or "", r.city or "", r.state or "", r.postal_code or "", r.phone or ""
        )
    return table


def run_import(
    args: argparse.Namespace, config: AppConfig, fs: FileSystem | None = None
) -> int:
    """Import dealerships from a CSV file, or every CSV file in a directory.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    target = absolute_path(Path(args.path))
    logger = get_logger(__name__, path=str(target))

    importer = DealershipImporterSync(
        fs,
        encoding=config.importer.encoding,
        skip_blank_lines=config.importer.skip_blank_lines,
    )

    try:
        records = importer.import_path(target, config.importer.suffix)
    except FileNotFoundError:
        console.print(f"[red]ERROR: Not found: {escape(str(target))}[/red]")
        return 1
    except PermissionError:
        console.print(f"[red]ERROR: Permission denied: {escape(str(target))}[/red]")
        return 1
    except DealershipParseError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    except UnicodeDecodeError as e:
        logger.debug(f"Decode failed: {e}")
        console.print(
            f"[red]ERROR: Cannot decode {escape(str(target))} as {config.importer.encoding}[/red]"
        )
        return 1
    except OSError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    logger.debug(f"Imported {len(records)} records")

    if args.json:
        console.print_json(data=[r.model_dump() for r in records])
    else:
        console.print(_render_table(records))
    return 0


def _common_options(default: object) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=default,
        help="Path to app config (.yaml/.yml/.json, default: fsseam.yaml if present)",
    )
    common.add_argument(
        "--log-level",
        default=default,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return common


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="fsseam",
        description="fsseam - dealership importer built on a swappable filesystem layer",
        parents=[_common_options(None)],
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # SUPPRESS keeps a global value unless the subcommand repeats the option
    imp = sub.add_parser(
        "import",
        help="Import dealerships from CSV",
        parents=[_common_options(argparse.SUPPRESS)],
    )
    imp.add_argument("path", help="CSV file, or directory of *.csv files")
    imp.add_argument("--json", action="store_true", help="Print records as JSON")

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except FileNotFoundError:
        console.print(f"[red]ERROR: Config not found: {args.config}[/red]")
        return 1
    except ValueError as e:
        console.print(f"[red]ERROR: Invalid config: {e}[/red]")
        return 1

    configure_logging(
        level=args.log_level or config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )

    if args.cmd == "import":
        return run_import(args, config)
    return 1


if __name__ == "__main__":
    sys.exit(main())
