"""Main CLI application for rollkit."""

import json
import logging
from typing import Optional

import typer

from rollkit.cli.display import (
    console,
    display_error,
    display_expression,
    display_roll_result,
    display_success,
)
from rollkit.config import get_settings
from rollkit.dice import (
    DiceParseError,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    parse_dice,
    roll_dice,
)

# Create main app
app = typer.Typer(
    name="rollkit",
    help="Roll dice from standard notation like 4d6dl1+2 or 2d20kh1+5",
    add_completion=False,
)


def _random_source(seed: int | None) -> RandomSource:
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)


@app.command()
def roll(
    notations: list[str] = typer.Argument(..., help="Dice notation(s) to roll"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible rolls"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="Roll each notation N times"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Roll one or more dice notations."""
    settings = get_settings()

    # Validate everything before rolling anything
    try:
        expressions = [(notation, parse_dice(notation)) for notation in notations]
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    rng = _random_source(seed if seed is not None else settings.seed)
    results = [
        roll_dice(expression, notation, rng=rng, max_explosions=settings.max_explosions)
        for notation, expression in expressions
        for _ in range(times)
    ]

    if as_json:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    for result in results:
        display_roll_result(result)
        console.print()


@app.command()
def parse(
    notation: str = typer.Argument(..., help="Dice notation to parse"),
) -> None:
    """Show how a notation is parsed."""
    try:
        expression = parse_dice(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_expression(expression)


@app.command()
def check(
    notation: str = typer.Argument(..., help="Dice notation to validate"),
) -> None:
    """Validate a notation without rolling it."""
    try:
        expression = parse_dice(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_success(f"Valid notation: {expression.notation}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """rollkit - a dice notation interpreter.

    Use 'rollkit roll 4d6dl1' to roll, 'rollkit parse 2d20kh1+5' to inspect.
    """
    if verbose or get_settings().debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


if __name__ == "__main__":
    app()
