"""
valuesort CLI - rank your personal values through pairwise comparisons.

Interactive terminal front end for the sorting session.
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from valuesort.catalog import VALUES
from valuesort.display import (
    ConsoleEventHandler,
    console,
    create_intro_panel,
    print_results,
)
from valuesort.errors import ValueSortError
from valuesort.logging import DEFAULT_LOG_LEVEL, configure_logging, get_logger
from valuesort.models import SessionConfig
from valuesort.session import SortSession

log = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="valuesort",
        description="Values Sort - discover what matters most to you",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  valuesort
  valuesort --min-comparisons 30
  valuesort --output my-values.txt
  valuesort --list
        """,
    )

    parser.add_argument(
        "--min-comparisons",
        "-n",
        type=int,
        help="Comparisons before results are shown (default: 20, env VALUESORT_MIN_COMPARISONS)",
    )
    parser.add_argument(
        "--top",
        type=int,
        help="How many values to show in the top summary (default: 3, env VALUESORT_TOP_N)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Also write the copied results to this file",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the values and exit",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines instead of console output",
    )

    return parser


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Merge environment configuration with command line overrides."""
    config = SessionConfig.from_env()
    overrides = {}
    if args.min_comparisons is not None:
        overrides["min_comparisons"] = args.min_comparisons
    if args.top is not None:
        overrides["top_n"] = args.top
    if overrides:
        config = SessionConfig(**{**config.model_dump(), **overrides})
    return config


def parse_move(command: str, size: int) -> tuple[int, int]:
    """Parse ``m FROM TO`` (1-based ranks) into 0-based positions.

    Raises:
        ValueError: If the command is malformed or a rank is out of range
    """
    parts = command.split()
    if len(parts) != 3 or parts[0] != "m":
        raise ValueError("Usage: m FROM TO (e.g. m 3 1)")
    from_rank, to_rank = int(parts[1]), int(parts[2])
    for rank in (from_rank, to_rank):
        if not 1 <= rank <= size:
            raise ValueError(f"Rank must be between 1 and {size}")
    return from_rank - 1, to_rank - 1


def create_session(config: SessionConfig, out: Console = console) -> SortSession:
    """Create a session whose events are rendered to the console."""
    return SortSession(config=config, event_handler=ConsoleEventHandler(out))


def copy_results(session: SortSession, output: Path | None, out: Console) -> None:
    """Print the plain-text export and optionally write it to a file."""
    text = session.export_text()
    out.print(text, markup=False, highlight=False)
    if output is None:
        return

    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        out.print(f"[red]Could not write {escape(str(output))}: {escape(str(e))}[/red]")
        log.warning("results_write_failed", path=str(output), error=str(e))
        return
    out.print(f"[green]Copied to {escape(str(output))}[/green]")
    log.info("results_written", path=str(output))


def run_sorting(session: SortSession, out: Console) -> bool:
    """Drive the sorting phase until results are ready.

    Returns:
        False if the user quit, True otherwise
    """
    while session.phase == "sorting":
        pair = session.current_pair
        choice = Prompt.ask("Your choice", choices=["1", "2", "s", "q"], console=out)
        if choice == "q":
            return False
        if choice == "s":
            session.skip()
        else:
            session.choose(pair[int(choice) - 1].id)
    return True


def run_results(session: SortSession, output: Path | None, out: Console) -> str:
    """Drive the results phase.

    Returns:
        "restart" or "quit"
    """
    print_results(session.ranking, session.top(), session.scores, target=out)
    while True:
        command = Prompt.ask("Command", console=out).strip().lower()
        if command == "q":
            return "quit"
        if command == "r":
            return "restart"
        if command == "c":
            copy_results(session, output, out)
            continue
        if command.startswith("m"):
            try:
                from_index, to_index = parse_move(command, len(session.ranking))
                session.reorder(from_index, to_index)
            except (ValueError, ValueSortError) as e:
                out.print(f"[red]{e}[/red]")
                continue
            print_results(session.ranking, session.top(), session.scores, target=out)
            continue
        out.print("[red]Unknown command[/red]")


def run_interactive(session: SortSession, output: Path | None = None, out: Console = console) -> None:
    """Run sessions until the user quits."""
    while True:
        out.print(create_intro_panel(session.items))
        Prompt.ask("Press Enter to start sorting", default="", show_default=False, console=out)
        session.start()

        if not run_sorting(session, out):
            return

        if run_results(session, output, out) == "quit":
            return
        session.restart()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(cli_mode=not args.json_logs, log_level=args.log_level)

    try:
        config = build_config(args)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return 2

    if args.list:
        for card in VALUES:
            console.print(f"[bold cyan]{card.name}[/bold cyan]: {card.description}")
        return 0

    session = create_session(config)
    try:
        run_interactive(session, args.output)
    except (KeyboardInterrupt, EOFError):
        console.print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
