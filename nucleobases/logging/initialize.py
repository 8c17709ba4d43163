import sys
from pathlib import Path
from typing import Dict, Union

import logging
import logging.config
from .filters import LoggingLevelFilter


_log_format = "%(asctime)s [%(levelname)s - %(name)s] - %(message)s"
_file_config_loaded = False
_default_loggers: Dict[str, logging.Logger] = {}


def default_logger(name: str) -> logging.Logger:
    if name in _default_loggers:
        return _default_loggers[name]

    logger = logging.getLogger(name=name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(LoggingLevelFilter([logging.INFO, logging.DEBUG]))
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.setFormatter(logging.Formatter(_log_format))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(LoggingLevelFilter([logging.ERROR, logging.WARNING, logging.CRITICAL]))
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter(_log_format))

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    _default_loggers[name] = logger
    return logger


def set_default_level(level: int):
    """
    Set the threshold of every logger handed out by default_logger().
    """
    for logger in _default_loggers.values():
        logger.setLevel(level)


def configure_logging(ini_path: Union[str, Path]):
    """
    Load a logging configuration (logging.config.fileConfig format). From then on every nucleobases logger,
    including those already handed out by default_logger(), is governed by the file.
    """
    global _file_config_loaded
    ini_path = Path(ini_path)
    if not ini_path.exists():
        raise FileNotFoundError("Logging INI file `{}` not found.".format(ini_path))
    logging.config.fileConfig(ini_path, disable_existing_loggers=False)

    # Loggers handed out before this call must defer to the file configuration.
    for logger in _default_loggers.values():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
    _file_config_loaded = True
    logging.getLogger(__name__).debug("Using logging configuration {}".format(str(ini_path)))


def create_logger(module_name: str) -> logging.Logger:
    if _file_config_loaded:
        return logging.getLogger(name=module_name)
    return default_logger(name=module_name)
