from .initialize import create_logger, configure_logging, default_logger, set_default_level
from .filters import LoggingLevelFilter

__all__ = ["create_logger", "configure_logging", "default_logger", "set_default_level", "LoggingLevelFilter"]
