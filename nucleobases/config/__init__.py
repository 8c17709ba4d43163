from .base import AbstractConfig, ConfigurationParseError
from .logging import LoggingConfig
from .output import OutputConfig
from .nucleobases import NucleobasesConfig
from .initialize import load_config

__all__ = [
    "AbstractConfig", "ConfigurationParseError",
    "LoggingConfig", "OutputConfig", "NucleobasesConfig",
    "load_config"
]
