import click

from nucleobases.model import Nucleobase
from nucleobases.util import map_nucleobase_to_byte
from nucleobases.logging import create_logger
from .base import parse_tokens, echo_row
logger = create_logger("nucleobases.cli.describe")


_columns = ["letter", "name", "ring", "group", "dna", "rna", "byte"]


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def describe_row(nucleobase: Nucleobase):
    return [
        nucleobase.letter_code(),
        nucleobase.full_name,
        "purine" if nucleobase.is_purine() else "pyrimidine",
        "amine" if nucleobase.is_amine() else "ketone",
        _yes_no(nucleobase.is_dna_base()),
        _yes_no(nucleobase.is_rna_base()),
        str(int(map_nucleobase_to_byte(nucleobase)))
    ]


@click.command()
@click.argument('tokens', nargs=-1, required=True)
@click.pass_context
def main(ctx, tokens):
    """
    Print the classification of each single-letter nucleobase code (A/C/G/T/U, case-insensitive).
    """
    cfg = ctx.obj
    nucleobases, n_failed = parse_tokens(tokens, logger)

    if cfg.output_cfg.header and len(nucleobases) > 0:
        echo_row(cfg, _columns)
    for nucleobase in nucleobases:
        echo_row(cfg, describe_row(nucleobase))

    if n_failed > 0:
        ctx.exit(1)
