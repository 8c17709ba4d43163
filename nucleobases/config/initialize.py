from pathlib import Path
from typing import Union

from configparser import ConfigParser
from .nucleobases import NucleobasesConfig
from nucleobases.logging import create_logger
logger = create_logger(__name__)


def load_config(ini_path: Union[str, Path]) -> NucleobasesConfig:
    ini_path = Path(ini_path)
    if not ini_path.exists():
        raise FileNotFoundError("Config INI path `{}` invalid.".format(str(ini_path)))

    cfg_parser = ConfigParser()
    cfg_parser.read(ini_path)

    config_dict = {}
    for section in cfg_parser.sections():
        config_dict[section] = {
            item.upper(): cfg_parser.get(section, item, raw=True)
            for item in cfg_parser.options(section)
        }
    _config = NucleobasesConfig(config_dict)
    logger.debug("Loaded nucleobases INI from {}.".format(ini_path))
    return _config
