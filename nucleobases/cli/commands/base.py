from typing import List, Tuple

import click

from nucleobases.config import NucleobasesConfig
from nucleobases.model import Nucleobase, NucleobaseConversionError


def option(*deco_args, **deco_kwargs):
    if 'help' in deco_kwargs:
        help_doc = deco_kwargs['help']
        if 'default' in deco_kwargs:
            default_val = deco_kwargs['default']
            help_doc = f'{help_doc} (Default: {default_val})'
        deco_kwargs['help'] = help_doc

    return click.option(
        *deco_args,
        **deco_kwargs
    )


def parse_tokens(tokens: Tuple[str, ...], logger) -> Tuple[List[Nucleobase], int]:
    """
    Parse each token into a nucleobase. Unparseable tokens are reported through the logger and skipped.
    :return: The parsed nucleobases, and the number of tokens that failed to parse.
    """
    nucleobases = []
    n_failed = 0
    for token in tokens:
        try:
            nucleobases.append(Nucleobase.parse_from_str(token))
        except NucleobaseConversionError as e:
            logger.error("Token `{}`: {}".format(token, e))
            n_failed += 1
    return nucleobases, n_failed


def echo_row(cfg: NucleobasesConfig, fields: List[str]):
    click.echo(cfg.output_cfg.separator.join(fields))
