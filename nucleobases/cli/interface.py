from typing import Optional
from pathlib import Path

import click
from .commands import *
from nucleobases.config import NucleobasesConfig, load_config
from nucleobases.logging import create_logger, configure_logging, set_default_level
logger = create_logger("nucleobases.cli")


@click.group(
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 120
    },
    commands={
        'describe': describe,
        'complement': complement,
        'pair': pair
    }
)
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(path_type=Path, dir_okay=False, exists=True, readable=True),
    required=False,
    help="The path to a nucleobases INI configuration file."
)
@click.pass_context
def main(ctx, config_path: Optional[Path]):
    """
    Classification, conversion and complementation of nucleobases (A, C, G, T, U).
    """
    if config_path is not None:
        cfg = load_config(config_path)
    else:
        cfg = NucleobasesConfig.default()

    set_default_level(cfg.logging_cfg.level)
    if cfg.logging_cfg.ini_path is not None:
        configure_logging(cfg.logging_cfg.ini_path)
    ctx.obj = cfg


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.critical(e, exc_info=True)
        exit(1)
