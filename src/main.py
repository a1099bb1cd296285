"""Command line entry point for the Countdown numbers solver."""

import logging
import random
import time
from typing import Annotated, List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from config.config import Config
from countdown import CountdownSolver, ExpressionParser, Puzzle, generate_puzzle

app = typer.Typer(
    name="countdown",
    help="Find every way to reach a Countdown target from six numbers.",
    add_completion=False,
)
console = Console()

USAGE = "expected six numbers followed by the goal, e.g. 1 1 4 7 15 50 522"


@app.callback()
def main(ctx: typer.Context) -> None:
    """Countdown numbers game solver."""
    load_dotenv()
    config = Config()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    ctx.obj = config


def _parse_puzzle(values: List[int]) -> Puzzle:
    if len(values) != 7:
        raise typer.BadParameter(f"{USAGE} (got {len(values)} values)", param_hint="VALUES")
    return Puzzle(numbers=values[:6], target=values[6])


def _report(puzzle: Puzzle, top: int) -> None:
    solver = CountdownSolver()
    started = time.perf_counter()
    results = solver.solve(puzzle.numbers, puzzle.target)
    elapsed = (time.perf_counter() - started) * 1000

    console.print(f"Found {len(results)} results in {elapsed:.0f} ms, "
                  f"tried {solver.combinations} combinations.")
    if not results:
        if solver.closest is not None:
            distance = abs(puzzle.target - solver.closest.total)
            console.print(f"Closest: {solver.closest} = {solver.closest.total} (off by {distance})")
        return

    console.print(f"Top {top} results (or less if there aren't as many)")
    for result in results[:top]:
        console.print(str(result))


@app.command()
def solve(
    ctx: typer.Context,
    values: Annotated[List[int], typer.Argument(help="Six numbers followed by the goal")],
    top: Annotated[Optional[int], typer.Option("--top", "-t", min=1, help="Results to show")] = None,
) -> None:
    """Solve a puzzle given on the command line."""
    puzzle = _parse_puzzle(values)
    _report(puzzle, ctx.obj.max_top if top is None else top)


@app.command()
def puzzle(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name of a configured puzzle")],
    top: Annotated[Optional[int], typer.Option("--top", "-t", min=1, help="Results to show")] = None,
) -> None:
    """Solve a named puzzle from the puzzles file."""
    config: Config = ctx.obj
    if name not in config.puzzles:
        known = ', '.join(sorted(config.puzzles)) or 'none'
        raise typer.BadParameter(f"unknown puzzle '{name}' (known: {known})", param_hint="NAME")
    selected = config.puzzles[name]
    console.print(f"{selected.name}: {selected}")
    _report(selected, config.max_top if top is None else top)


@app.command("random")
def random_puzzle(
    ctx: typer.Context,
    large: Annotated[int, typer.Option("--large", "-l", min=0, max=4, help="Large numbers to draw")] = 2,
    top: Annotated[Optional[int], typer.Option("--top", "-t", min=1, help="Results to show")] = None,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """Generate a random puzzle and solve it."""
    generated = generate_puzzle(large, random.Random(seed))
    console.print(f"Puzzle: {generated}")
    _report(generated, ctx.obj.max_top if top is None else top)


@app.command()
def check(
    expression: Annotated[str, typer.Argument(help="Answer to check, e.g. '(1 + 7) * 4'")],
    values: Annotated[List[int], typer.Argument(help="Six numbers followed by the goal")],
) -> None:
    """Check an answer against a puzzle."""
    puzzle = _parse_puzzle(values)
    outcome = ExpressionParser().parse_and_validate(expression, puzzle.numbers)
    if not outcome['valid']:
        console.print(f"Invalid: {outcome['error']}")
        raise typer.Exit(code=1)

    distance = abs(puzzle.target - outcome['result'])
    if distance == 0:
        console.print(f"Correct! {expression} = {puzzle.target}")
    else:
        console.print(f"{expression} = {outcome['result']}, off by {distance}")


@app.command()
def bench(
    ctx: typer.Context,
    rounds: Annotated[int, typer.Option("--rounds", "-r", min=1, help="Times to solve")] = 10,
) -> None:
    """Time repeated solves of the 'stress' puzzle."""
    config: Config = ctx.obj
    if 'stress' not in config.puzzles:
        raise typer.BadParameter("no 'stress' puzzle configured")
    stress = config.puzzles['stress']

    solver = CountdownSolver()
    timings = []
    for _ in range(rounds):
        started = time.perf_counter()
        solver.solve(stress.numbers, stress.target)
        timings.append((time.perf_counter() - started) * 1000)

    console.print(f"{stress}: {len(solver.results)} results, {solver.combinations} combinations")
    console.print(f"mean {sum(timings) / len(timings):.1f} ms, best {min(timings):.1f} ms "
                  f"over {rounds} rounds")


if __name__ == "__main__":
    app()
