from __future__ import annotations

from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from protoplay.config_env import dice_config_from_env, load_env
from protoplay.dice import Dice
from protoplay.errors import ProtoplayError
from protoplay.logging import get_logger
from protoplay.naming import Person, Starship, describe_match
from protoplay.rng import GENERATORS, OddThroughNineteen, OneThroughTen

log = get_logger(__name__)

app = typer.Typer(no_args_is_help=True, help="Protocol playground: named things, random sources and dice.")


def _fail(e: ProtoplayError) -> typer.Exit:
    typer.secho(f"ERR: {e}", fg=typer.colors.RED, err=True)
    return typer.Exit(1)


def _print_rolls(dice: Dice, times: int) -> None:
    for n in dice.roll_many(times):
        typer.echo(f"Random Dice roll is {n}")


@app.command()
def roll(
    sides: Optional[int] = typer.Option(None, "--sides", "-s", help="Number of faces (default 6)."),
    generator: Optional[str] = typer.Option(None, "--generator", "-g", help="Random source name."),
    times: Optional[int] = typer.Option(None, "--times", "-n", help="How many rolls (default 5)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for deterministic rolls."),
    fair: Optional[bool] = typer.Option(None, "--fair/--biased", help="Rejection-sample instead of plain modulo."),
):
    """Roll a die backed by one of the registered random sources."""
    load_env()
    try:
        cfg = dice_config_from_env(sides=sides, generator=generator, times=times, seed=seed, fair=fair)
        dice = cfg.build()
    except ProtoplayError as e:
        raise _fail(e)
    log.info("rolling %r %d times", dice, cfg.times)
    _print_rolls(dice, cfg.times)


@app.command()
def compare(
    name_a: str = typer.Argument(...),
    name_b: str = typer.Argument(...),
    prefix_a: Optional[str] = typer.Option(None, "--prefix-a"),
    prefix_b: Optional[str] = typer.Option(None, "--prefix-b"),
):
    """Compare two starships by their rendered full names."""
    typer.echo(describe_match(Starship(name_a, prefix_a), Starship(name_b, prefix_b)))


@app.command()
def name(ship: str = typer.Argument(...), prefix: Optional[str] = typer.Option(None, "--prefix", "-p")):
    """Print a starship's full name."""
    typer.echo(Starship(ship, prefix).full_name)


@app.command()
def generators():
    """List the registered random sources."""
    table = Table(box=box.ASCII)
    table.add_column("name")
    table.add_column("class")
    table.add_column("outputs")
    for key, cls in sorted(GENERATORS.items()):
        s = cls.support
        table.add_row(key, cls.__name__, f"{s.start}..{s[-1]} step {s.step}")
    Console().print(table)


@app.command()
def demo(seed: Optional[int] = typer.Option(None, "--seed")):
    """Walk through the playground: names, equality, then dice."""
    joe = Person(full_name="Joseph Rogers")
    typer.echo(joe.full_name)

    my_ship = Starship("Enterprise", prefix="USS")
    firefly = Starship("firefly")
    typer.echo(my_ship.full_name)
    typer.echo(firefly.full_name)
    typer.echo(describe_match(my_ship, firefly))

    _print_rolls(Dice(6, OneThroughTen(seed=seed)), 5)
    _print_rolls(Dice(6, OddThroughNineteen(seed=seed)), 5)


def main() -> None:
    app()


__all__ = ["app", "main"]
