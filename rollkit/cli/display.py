"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.table import Table

from rollkit.dice.formatting import format_modifier, format_timestamp
from rollkit.dice.types import DiceExpression, RollEntry, RollResult


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def _entry_status(entry: RollEntry) -> str:
    if entry.dropped:
        return "[red]dropped[/red]"
    if not entry.kept:
        return "[dim]not kept[/dim]"
    return "[green]kept[/green]"


def _entry_notes(entry: RollEntry) -> str:
    notes = []
    if entry.exploded:
        notes.append("[yellow]exploded[/yellow]")
    if entry.rerolled:
        notes.append(f"[cyan]rerolled from {entry.original_value}[/cyan]")
    return ", ".join(notes)


def display_roll_result(result: RollResult) -> None:
    """Display every die of a roll and the total.

    Args:
        result: The roll to display.
    """
    title = f"{result.input or result.parsed.notation}  [dim]{format_timestamp(result.timestamp)}[/dim]"
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Die", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Status")
    table.add_column("Notes")

    for index, entry in enumerate(result.rolls, start=1):
        value = str(entry.value) if entry.kept else f"[strike]{entry.value}[/strike]"
        table.add_row(
            str(index),
            entry.die_label,
            value,
            _entry_status(entry),
            _entry_notes(entry),
        )

    console.print(table)
    console.print(
        f"  Subtotal {result.subtotal}{format_modifier(result.modifier)}"
        f" → [bold cyan]{result.total}[/bold cyan]"
    )


def display_expression(expression: DiceExpression) -> None:
    """Display the structure of a parsed expression.

    Args:
        expression: Parsed notation.
    """
    table = Table(title=expression.notation, box=box.ROUNDED)
    table.add_column("Count", justify="right", style="cyan")
    table.add_column("Sides", justify="right", style="cyan")
    table.add_column("Keep", style="green")
    table.add_column("Drop", style="red")
    table.add_column("Exploding", justify="center")
    table.add_column("Reroll", justify="center")

    for group in expression.dice_groups:
        table.add_row(
            str(group.count),
            str(group.sides),
            f"{group.keep.mode.value} {group.keep.count}" if group.keep else "-",
            f"{group.drop.mode.value} {group.drop.count}" if group.drop else "-",
            "yes" if group.exploding else "-",
            str(group.reroll) if group.reroll is not None else "-",
        )

    console.print(table)
    console.print(f"  Modifier: {expression.modifier:+d}")
