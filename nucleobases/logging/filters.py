import logging
from typing import Iterable


class LoggingLevelFilter(logging.Filter):
    """
    Passes only the records whose level is one of the specified levels.
    """
    def __init__(self, levels: Iterable[int]):
        super().__init__()
        self.levels = frozenset(levels)

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno in self.levels
