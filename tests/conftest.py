import logging

import pytest

from nucleobases.logging import initialize


@pytest.fixture
def isolated_logging(monkeypatch):
    """Restore the root logger and every default logger after a test that loads a logging INI file."""
    monkeypatch.setattr(initialize, "_file_config_loaded", False)
    monkeypatch.setattr(initialize, "_default_loggers", dict(initialize._default_loggers))
    root_handlers = list(logging.root.handlers)
    root_level = logging.root.level
    saved = {
        name: (list(logger.handlers), logger.level, logger.propagate)
        for name, logger in initialize._default_loggers.items()
    }
    yield
    for handler in logging.root.handlers:
        if handler not in root_handlers:
            handler.close()
    logging.root.handlers[:] = root_handlers
    logging.root.setLevel(root_level)
    for name, (handlers, level, propagate) in saved.items():
        logger = initialize._default_loggers[name]
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate


@pytest.fixture
def file_logging_ini(tmp_path):
    """A logging INI file that sends every record to a file on the root logger. Returns (ini path, log path)."""
    ini_path = tmp_path / "log_config.ini"
    log_path = tmp_path / "nucleobases.log"
    ini_path.write_text(
        "[loggers]\n"
        "keys=root\n"
        "\n"
        "[handlers]\n"
        "keys=file\n"
        "\n"
        "[formatters]\n"
        "keys=\n"
        "\n"
        "[logger_root]\n"
        "level=DEBUG\n"
        "handlers=file\n"
        "\n"
        "[handler_file]\n"
        "class=FileHandler\n"
        "args=({!r}, 'a')\n".format(str(log_path))
    )
    return ini_path, log_path
