import sys

import click

from pairdist.distance import calculate_total_distance
from pairdist.parse import read_pairs
from pairdist.static import INPUT_FILENAME
from pairdist.util import format_diagnostic, pl


@click.command()
def cli():
    """
    Compute the total distance between the two lists in 'input.txt'.

    Each non-blank line of the file must contain two integers separated by
    whitespace. Malformed lines are reported and skipped.
    """
    click.echo(f"Attempting to read input from '{INPUT_FILENAME}'...")

    try:
        result = read_pairs(INPUT_FILENAME)
    except OSError as e:
        click.echo(
            f"Error: Could not open file '{INPUT_FILENAME}'. Reason: {e}",
            err=True,
        )
        click.echo(
            "Please ensure the file exists in the current working directory.",
            err=True,
        )
        sys.exit(1)

    for diagnostic in result.diagnostics:
        click.echo(format_diagnostic(diagnostic), err=True)

    click.echo(
        f"Finished reading file. Found {result.pairs}"
        f" valid {pl(result.pairs, 'pair')}."
    )

    if result.pairs == 0:
        click.echo("No valid number pairs were read from the file.")
        return

    # Unreachable while the parser records both halves of a pair together.
    if len(result.left) != len(result.right):
        click.echo(
            f"Error: Internal inconsistency. Read {len(result.left)} left"
            f" numbers and {len(result.right)} right numbers. Cannot pair.",
            err=True,
        )
        sys.exit(1)

    distance = calculate_total_distance(result.left, result.right)
    click.echo(f"\nTotal distance between the lists: {distance}")
