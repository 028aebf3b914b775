"""Rich UI components for the values sort."""

from collections.abc import Sequence
from typing import Any

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from valuesort.models import Pair, ScoreRecord, Scores, ValueCard

# Shared console instance
console = Console()

MEDALS = ("🥇", "🥈", "🥉")


def create_intro_panel(items: Sequence[ValueCard]) -> Panel:
    """Create the panel explaining how sorting works."""
    content = Text()
    content.append("How it works\n\n", style="bold gold1")
    content.append("1. ", style="bold yellow")
    content.append("You'll see two values at a time\n")
    content.append("2. ", style="bold yellow")
    content.append("Choose which one feels more important to you right now\n")
    content.append("3. ", style="bold yellow")
    content.append("There are no wrong answers, trust your gut\n")
    content.append("4. ", style="bold yellow")
    content.append("At the end, you'll see your personal values ranking\n\n")

    content.append(f"The {len(items)} values\n", style="bold")
    for card in items:
        content.append(f"  • {card.name}\n", style="dim")

    return Panel(
        content,
        title="[bold]Values Sort[/bold]",
        subtitle="[dim]Based on Acceptance and Commitment Therapy (ACT) values work[/dim]",
        border_style="yellow",
        box=box.ROUNDED,
    )


def create_progress_line(comparisons: int, min_comparisons: int) -> Group:
    """Create the progress counter and bar."""
    label = Text()
    label.append("Progress ", style="dim")
    label.append(f"{comparisons} / {min_comparisons}", style="bold")

    bar = ProgressBar(
        total=min_comparisons,
        completed=min(comparisons, min_comparisons),
        width=40,
        complete_style="yellow",
    )
    return Group(label, bar)


def create_card_panel(card: ValueCard, choice_key: str) -> Panel:
    """Create a panel for a single value card."""
    content = Text()
    content.append(f"{card.name}\n\n", style="bold cyan")
    content.append(card.description, style="white")

    return Panel(
        content,
        title=f"[bold yellow][{choice_key}][/bold yellow]",
        border_style="cyan",
        box=box.ROUNDED,
        width=38,
    )


def create_pair_display(pair: Pair) -> Group:
    """Create the comparison screen for one pair."""
    cards = Table.grid(padding=(0, 2))
    cards.add_row(
        create_card_panel(pair[0], "1"),
        create_card_panel(pair[1], "2"),
    )

    return Group(
        Text("Which matters more to you right now?", style="bold"),
        cards,
        Text("[1] / [2] to choose, [s] skip to results", style="dim"),
    )


def _rank_label(rank: int) -> str:
    if rank <= len(MEDALS):
        return f"{MEDALS[rank - 1]} {rank}"
    return str(rank)


def create_ranking_table(ranking: Sequence[ValueCard], scores: Scores | None = None) -> Table:
    """Create a Rich table of the ranked values.

    Args:
        ranking: Cards in ranked order
        scores: Optional scores to show each card's W/L record

    Returns:
        Rich table with one row per card
    """
    table = Table(
        title="[bold green]Your Values Ranking[/bold green]",
        caption=f"[dim]Use {escape('[m FROM TO]')} to adjust if anything feels off[/dim]",
        box=box.ROUNDED,
        show_lines=False,
        header_style="bold magenta",
    )

    table.add_column("Rank", style="bold", width=6, justify="center")
    table.add_column("Value", style="cyan", width=14)
    if scores is not None:
        table.add_column("W/L", style="green", width=6, justify="center")
    table.add_column("Description", style="dim", overflow="fold")

    for rank, card in enumerate(ranking, 1):
        # Top 3 highlighted, next 3 normal, rest dimmed
        if rank <= 3:
            name = f"[bold yellow]{card.name}[/bold yellow]"
        elif rank <= 6:
            name = card.name
        else:
            name = f"[dim]{card.name}[/dim]"

        row = [_rank_label(rank), name]
        if scores is not None:
            record = scores.get(card.id, ScoreRecord())
            row.append(f"{record.wins}/{record.losses}")
        row.append(card.description)
        table.add_row(*row)

    return table


def create_top_panel(top: Sequence[ValueCard]) -> Panel:
    """Create the summary panel for the highest ranked values."""
    content = Text()
    for rank, card in enumerate(top, 1):
        content.append(f"{_rank_label(rank)}  ", style="yellow")
        content.append(f"{card.name}\n", style="bold")

    return Panel(
        content,
        title=f"[bold]Your top {len(top)} values[/bold]",
        border_style="yellow",
        box=box.ROUNDED,
    )


def print_results(
    ranking: Sequence[ValueCard],
    top: Sequence[ValueCard],
    scores: Scores | None = None,
    target: Console | None = None,
) -> None:
    """Print the final ranking and top values summary."""
    out = target or console
    out.print(create_ranking_table(ranking, scores))
    out.print(create_top_panel(top))
    out.print(
        Text("[m FROM TO] move  [c] copy results  [r] start over  [q] quit", style="dim")
    )


class ConsoleEventHandler:
    """Event handler that renders session events to a Rich console."""

    def __init__(self, target: Console | None = None):
        self.console = target or console

    def on_pair_offered(self, pair: Pair, comparisons: int, **kwargs: Any) -> None:
        self.console.print(create_pair_display(pair))

    def on_choice_recorded(self, *args: Any, **kwargs: Any) -> None:
        pass

    def on_progress(self, current: int, total: int, message: str, **kwargs: Any) -> None:
        self.console.print()
        self.console.print(create_progress_line(current, total))

    def on_finished(self, ranking: list[ValueCard], reason: str, **kwargs: Any) -> None:
        if reason == "pairs_exhausted":
            self.console.print("[dim]Every pair has been compared.[/dim]")
