"""Command-line interface for pathwalk."""
import sys
import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.models import Config, PathStyle
from .core.style_guess import guess_style
from .core.walker import PathWalker


STYLE_CHOICES = [style.value for style in PathStyle] + ["guess"]

console = Console()
error_console = Console(stderr=True)


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _walker(ctx: click.Context, path: str) -> PathWalker:
    """Walker for the selected style, guessing from path if asked to."""
    style = ctx.obj["style"]
    if style == "guess":
        return PathWalker(guess_style(path))
    return PathWalker(style)


def _fail(message: str) -> None:
    error_console.print(f"[bold red]error:[/bold red] {message}")
    sys.exit(1)


@click.group()
@click.option('--style', '-s', type=click.Choice(STYLE_CHOICES, case_sensitive=False),
              help='Path style (default: PATHWALK_STYLE or the platform style)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='pathwalk')
@click.pass_context
def main(ctx: click.Context, style: Optional[str], debug: bool) -> None:
    """
    Parse and rewrite path strings without touching the filesystem.

    Examples:

        pathwalk -s unix normalize a/./b/../c

        pathwalk -s windows relative 'C:\\a\\b' 'C:\\a\\c'

        pathwalk -s guess segments /var/log/../lib
    """
    try:
        config = Config.from_env()
    except ValueError as e:
        _fail(str(e))

    setup_logging(debug or config.debug)

    ctx.ensure_object(dict)
    ctx.obj["style"] = style.lower() if style else config.style.value


@main.command()
@click.argument('path')
@click.pass_context
def normalize(ctx: click.Context, path: str) -> None:
    """Print the normalized form of PATH."""
    click.echo(_walker(ctx, path).normalize(path))


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def join(ctx: click.Context, paths) -> None:
    """Join PATHS and normalize the result."""
    click.echo(_walker(ctx, paths[0]).join_multiple(list(paths)))


@main.command()
@click.argument('base')
@click.argument('path')
@click.pass_context
def absolute(ctx: click.Context, base: str, path: str) -> None:
    """Resolve PATH against the absolute directory BASE."""
    click.echo(_walker(ctx, base).get_absolute(base, path))


@main.command()
@click.argument('base')
@click.argument('path')
@click.pass_context
def relative(ctx: click.Context, base: str, path: str) -> None:
    """Print how to reach PATH starting from BASE."""
    result = _walker(ctx, base).get_relative(base, path)
    if not result:
        _fail("paths do not share a root")
    click.echo(result)


@main.command()
@click.argument('base')
@click.argument('other')
@click.pass_context
def intersection(ctx: click.Context, base: str, other: str) -> None:
    """Print the leading part of BASE that OTHER shares."""
    length = _walker(ctx, base).get_intersection(base, other)
    click.echo(base[:length])


@main.command()
@click.argument('path')
@click.pass_context
def root(ctx: click.Context, path: str) -> None:
    """Print the root of PATH and whether it is absolute."""
    walker = _walker(ctx, path)
    kind = "absolute" if walker.is_absolute(path) else "relative"
    click.echo(f"{path[:walker.get_root(path)]}\t{kind}")


@main.command()
@click.argument('path')
@click.pass_context
def basename(ctx: click.Context, path: str) -> None:
    """Print the last segment of PATH."""
    click.echo(_walker(ctx, path).basename(path))


@main.command()
@click.argument('path')
@click.pass_context
def dirname(ctx: click.Context, path: str) -> None:
    """Print everything of PATH before its last segment."""
    click.echo(_walker(ctx, path).dirname(path))


@main.command()
@click.argument('path')
@click.pass_context
def extension(ctx: click.Context, path: str) -> None:
    """Print the extension of PATH (from the last dot)."""
    walker = _walker(ctx, path)
    if not walker.has_extension(path):
        _fail("path has no extension")
    click.echo(walker.extension(path))


@main.command('change-root')
@click.argument('path')
@click.argument('new_root')
@click.pass_context
def change_root(ctx: click.Context, path: str, new_root: str) -> None:
    """Replace the root of PATH with NEW_ROOT."""
    click.echo(_walker(ctx, path).change_root(path, new_root))


@main.command('change-basename')
@click.argument('path')
@click.argument('new_basename')
@click.pass_context
def change_basename(ctx: click.Context, path: str, new_basename: str) -> None:
    """Replace the last segment of PATH with NEW_BASENAME."""
    click.echo(_walker(ctx, path).change_basename(path, new_basename))


@main.command('change-extension')
@click.argument('path')
@click.argument('new_extension')
@click.pass_context
def change_extension(ctx: click.Context, path: str, new_extension: str) -> None:
    """Replace or add the extension of PATH."""
    click.echo(_walker(ctx, path).change_extension(path, new_extension))


@main.command()
@click.argument('path')
@click.pass_context
def segments(ctx: click.Context, path: str) -> None:
    """Show the segments of PATH with their type and offsets."""
    walker = _walker(ctx, path)

    table = Table(title=f"{escape(path)} ({walker.style.value})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Segment", style="cyan")
    table.add_column("Type")
    table.add_column("Begin", justify="right")
    table.add_column("End", justify="right")

    for index, segment in enumerate(walker.segments(path)):
        table.add_row(str(index), escape(segment.text), walker.segment_type(segment).value,
                      str(segment.begin), str(segment.end))

    console.print(table)


@main.command()
@click.argument('path')
def guess(path: str) -> None:
    """Guess the style PATH is written in."""
    click.echo(guess_style(path).value)


if __name__ == '__main__':
    main()
