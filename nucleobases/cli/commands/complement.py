import click

from nucleobases.logging import create_logger
from .base import option, parse_tokens, echo_row
logger = create_logger("nucleobases.cli.complement")


@click.command()
@click.argument('tokens', nargs=-1, required=True)
@option(
    '--rna/--dna', 'rna',
    is_flag=True, default=False,
    help="Use the ribonucleotide complement instead of the deoxyribonucleotide complement."
)
@click.pass_context
def main(ctx, tokens, rna: bool):
    """
    Print the complement of each single-letter nucleobase code, one per line.
    Note that both variants map U to A; the RNA complement of A is T, not U.
    """
    cfg = ctx.obj
    nucleobases, n_failed = parse_tokens(tokens, logger)
    for nucleobase in nucleobases:
        if rna:
            comp = nucleobase.to_rna_complement()
        else:
            comp = nucleobase.to_dna_complement()
        echo_row(cfg, [nucleobase.letter_code(), comp.letter_code()])

    if n_failed > 0:
        ctx.exit(1)
