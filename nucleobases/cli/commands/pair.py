import click

from nucleobases.model import are_complementary
from nucleobases.logging import create_logger
from .base import parse_tokens
logger = create_logger("nucleobases.cli.pair")


@click.command()
@click.argument('first')
@click.argument('second')
@click.pass_context
def main(ctx, first: str, second: str):
    """
    Print `true` if the two nucleobases form a complementary pair, `false` otherwise.
    """
    nucleobases, n_failed = parse_tokens((first, second), logger)
    if n_failed > 0:
        ctx.exit(1)

    x, y = nucleobases
    click.echo("true" if are_complementary(x, y) else "false")
