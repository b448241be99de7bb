"""CLI for turtlesoup."""

import logging
from functools import wraps
from pathlib import Path

import click

from .config import Config
from .errors import TurtleError
from .turtle import Point, SimpleTurtle


def _fail_cleanly(f):
    """Report library errors as a click error (exit 1) instead of a traceback."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except TurtleError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def _parse_points(ctx, param, values) -> list[Point]:
    points = []
    for value in values:
        try:
            x, y = (float(v) for v in value.split(","))
        except ValueError:
            raise click.BadParameter(f"expected X,Y, got {value!r}")
        points.append(Point(x, y))
    return points


def _export(config: Config, turtle: SimpleTurtle, output: Path | None):
    from .svg import SvgExporter

    target = SvgExporter(config).export(turtle.get_path(), output)
    click.echo(f"Visualization exported to {target}")


def _echo_stats(config: Config, turtle: SimpleTurtle):
    from .validator import PathValidator

    result = PathValidator(config).validate(turtle.get_path())
    click.echo(f"Stats: {result.stats}")


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON render config",
)
@click.option("--verbose", "-v", is_flag=True)
@click.pass_context
def main(ctx, config_path: Path | None, verbose: bool):
    """turtlesoup - turtle graphics to static SVG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if config_path is None:
        ctx.obj = Config()
        return
    try:
        ctx.obj = Config.load(config_path)
    except (ValueError, TypeError) as e:
        # bad JSON or schema; a non-object top level is a TypeError
        raise click.BadParameter(str(e), param_hint="'--config'") from e


@main.command()
@click.option("--output", "-o", type=Path)
@click.option("--stats", is_flag=True)
@click.pass_obj
@_fail_cleanly
def artwork(config: Config, output: Path | None, stats: bool):
    """Layered artwork plus a planned path through the demo waypoints."""
    from .patterns import create_geometric_artwork, plot_optimal_path

    turtle = SimpleTurtle()
    create_geometric_artwork(turtle)

    waypoints = [Point(x, y) for x, y in config.demo.waypoints]
    navigation = plot_optimal_path(turtle, waypoints)
    click.echo("Navigation Path Details:")
    for line in navigation:
        click.echo(f"  {line}")

    if stats:
        _echo_stats(config, turtle)
    _export(config, turtle, output)


@main.command()
@click.argument("side_length", type=float)
@click.argument("num_sides", type=int)
@click.option("--color", default="black")
@click.option("--output", "-o", type=Path)
@click.pass_obj
@_fail_cleanly
def polygon(config: Config, side_length: float, num_sides: int, color: str, output: Path | None):
    """Draw a regular polygon."""
    from .patterns import draw_polygon

    turtle = SimpleTurtle()
    turtle.set_color(color)
    draw_polygon(turtle, side_length, num_sides)
    _export(config, turtle, output)


@main.command()
@click.argument("radius", type=float)
@click.argument("iterations", type=int)
@click.option("--growth", default=1.05, type=float)
@click.option("--color", default="black")
@click.option("--output", "-o", type=Path)
@click.pass_obj
@_fail_cleanly
def spiral(config: Config, radius: float, iterations: int, growth: float, color: str, output: Path | None):
    """Draw an outward chord spiral."""
    from .patterns import draw_spiraling_circle

    turtle = SimpleTurtle()
    turtle.set_color(color)
    draw_spiraling_circle(turtle, radius, iterations, growth)
    _export(config, turtle, output)


@main.command()
@click.argument("points", nargs=-1, required=True, callback=_parse_points)
@click.option("--raw-turns", is_flag=True, help="Don't wrap turns into [-180, 180]")
@click.option("--output", "-o", type=Path)
@click.pass_obj
@_fail_cleanly
def path(config: Config, points: list[Point], raw_turns: bool, output: Path | None):
    """Plan a path through X,Y waypoints (put `--` before negative values)."""
    from .patterns import plot_optimal_path

    turtle = SimpleTurtle()
    for line in plot_optimal_path(turtle, points, shortest_turn=not raw_turns):
        click.echo(line)
    _export(config, turtle, output)


@main.command()
@click.option("--stats", is_flag=True)
@click.pass_obj
@_fail_cleanly
def validate(config: Config, stats: bool):
    """Check the demo artwork against the canvas."""
    from .patterns import create_geometric_artwork, plot_optimal_path
    from .validator import PathValidator

    turtle = SimpleTurtle()
    create_geometric_artwork(turtle)
    plot_optimal_path(turtle, [Point(x, y) for x, y in config.demo.waypoints])

    result = PathValidator(config).validate(turtle.get_path())

    if result.errors:
        click.echo(click.style(f"Errors: {len(result.errors)}", fg="red"))
        for e in result.errors[:10]:
            click.echo(f"  {e}")

    if result.warnings:
        click.echo(click.style(f"Warnings: {len(result.warnings)}", fg="yellow"))
        for w in result.warnings[:10]:
            click.echo(f"  {w}")

    if stats:
        click.echo(f"Stats: {result.stats}")

    if result.valid:
        click.echo(click.style("OK", fg="green"))
    else:
        raise click.ClickException("path has invalid segments")


if __name__ == "__main__":
    main()
