"""
rustlike CLI - Run range notation through an iterator pipeline

Usage:
    rustlike range <notation> [options]
"""

import sys
import warnings
from typing import Any, Dict, List, Optional

import click

from rustlike import __version__
from rustlike.cli.formatters import get_formatter
from rustlike.core.iterator import LazyIterator, range_iter
from rustlike.core.range_parser import RangeParseError, parse_range
from rustlike.core.types import lexicographic_compare

# Values printed from an open-ended range when no --take is given
DEFAULT_UNBOUNDED_LIMIT = 100

REDUCERS = ("sum", "count", "min", "max")


def descending(a: Any, b: Any) -> int:
    """Comparator for largest-first sorting"""
    return lexicographic_compare(b, a)


def build_pipeline(
    notation: str,
    skip: Optional[int] = None,
    step_by: Optional[int] = None,
    take: Optional[int] = None,
    sort: Optional[str] = None,
    reverse: bool = False,
    window: Optional[int] = None,
    chunks: Optional[int] = None,
    enumerate_values: bool = False,
) -> LazyIterator:
    """
    Build the iterator pipeline for a range command

    Stages are applied in a fixed order: skip, step-by, take, sort,
    reverse, window or chunks, enumerate.

    Args:
        notation: Range notation, e.g. "1..=10"
        skip: Number of leading values to drop
        step_by: Keep every n-th value
        take: Maximum number of values
        sort: "asc" or "desc"
        reverse: Reverse the values
        window: Size of overlapping windows
        chunks: Size of non-overlapping chunks
        enumerate_values: Pair each value with its index

    Returns:
        LazyIterator over the result

    Raises:
        RangeParseError: If the notation is malformed
        ValueError: If window and chunks are both given, or a size is invalid
    """
    if window is not None and chunks is not None:
        raise ValueError("--window and --chunks cannot be combined")

    spec = parse_range(notation)
    pipeline = range_iter(spec.start, spec.end)

    if skip:
        pipeline.advance_by(skip)
    if step_by is not None:
        pipeline = pipeline.step_by(step_by)

    if take is not None:
        pipeline = pipeline.take(take)
    elif not spec.is_bounded:
        warnings.warn(
            f"Range '{notation}' has no end; output limited to {DEFAULT_UNBOUNDED_LIMIT} values. "
            f"Use --take to choose a limit.",
            UserWarning,
        )
        pipeline = pipeline.take(DEFAULT_UNBOUNDED_LIMIT)

    if sort == "asc":
        pipeline = pipeline.sort()
    elif sort == "desc":
        pipeline = pipeline.sort(descending)
    if reverse:
        pipeline = pipeline.reverse()

    if window is not None:
        pipeline = pipeline.window(window)
    elif chunks is not None:
        pipeline = pipeline.array_chunks(chunks)

    if enumerate_values:
        pipeline = pipeline.enumerate()

    return pipeline


def collect_rows(pipeline: LazyIterator, reducer: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Drain a pipeline into output rows

    Args:
        pipeline: Iterator built by build_pipeline()
        reducer: Optional reduction (sum, count, min, max) producing one row

    Returns:
        List of row dictionaries for the formatters
    """
    if reducer is not None:
        if reducer not in REDUCERS:
            raise ValueError(f"Unknown reducer: {reducer}")
        return [{reducer: getattr(pipeline, reducer)()}]

    rows = []
    for item in pipeline:
        if isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], int):
            rows.append({"index": item[0], "value": item[1]})
        else:
            rows.append({"value": item})
    return rows


@click.group()
@click.version_option(version=__version__, prog_name="rustlike")
def cli():
    """
    rustlike - Lazy iterator pipelines from the command line

    Evaluate range notation through lazy iterator stages and print
    the result.
    """


@cli.command(name="range")
@click.argument("notation", type=str)
@click.option("--skip", type=click.IntRange(min=0), default=None, help="Drop the first N values")
@click.option("--step-by", type=int, default=None, help="Keep every N-th value")
@click.option("--take", "-n", type=int, default=None, help="Keep at most N values")
@click.option(
    "--sort",
    type=click.Choice(["asc", "desc"], case_sensitive=False),
    default=None,
    help="Sort the values",
)
@click.option("--reverse", is_flag=True, help="Reverse the values")
@click.option("--window", type=int, default=None, help="Emit overlapping windows of N values")
@click.option("--chunks", type=int, default=None, help="Emit chunks of N values")
@click.option("--enumerate", "enumerate_values", is_flag=True, help="Pair values with their index")
@click.option(
    "--reduce",
    "reducer",
    type=click.Choice(list(REDUCERS), case_sensitive=False),
    default=None,
    help="Reduce the values to a single result",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json", "csv", "markdown"], case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Write output to file instead of stdout",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--explain", is_flag=True, help="Show the iterator pipeline instead of values")
def range_command(
    notation: str,
    skip: Optional[int],
    step_by: Optional[int],
    take: Optional[int],
    sort: Optional[str],
    reverse: bool,
    window: Optional[int],
    chunks: Optional[int],
    enumerate_values: bool,
    reducer: Optional[str],
    format: str,
    output: Optional[str],
    no_color: bool,
    explain: bool,
):
    """
    Iterate a range and print the values

    NOTATION is <start>..<end> (end excluded) or <start>..=<end>
    (end included). Either bound may be omitted.

    Examples:

        \b
        # Values 1 to 10, every third one
        $ rustlike range 1..=10 --step-by 3

        \b
        # Sliding windows as JSON
        $ rustlike range ..6 --window 3 -f json

        \b
        # Sum of the first 100 numbers
        $ rustlike range 1..=100 --reduce sum

        \b
        # Show the pipeline
        $ rustlike range 5.. --take 3 --reverse --explain
    """
    fmt = format.lower()
    del format
    try:
        pipeline = build_pipeline(
            notation,
            skip=skip,
            step_by=step_by,
            take=take,
            sort=sort.lower() if sort else None,
            reverse=reverse,
            window=window,
            chunks=chunks,
            enumerate_values=enumerate_values,
        )

        if explain:
            click.echo(pipeline.explain())
            return

        rows = collect_rows(pipeline, reducer.lower() if reducer else None)

        formatter = get_formatter(fmt)
        output_text = formatter.format(
            rows,
            no_color=no_color or not sys.stdout.isatty(),
            show_footer=not output,
        )

        if output:
            with open(output, "w") as f:
                f.write(output_text)
            click.echo(f"Results written to {output} ({fmt} format)", err=True)
        else:
            click.echo(output_text)

    except RangeParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
