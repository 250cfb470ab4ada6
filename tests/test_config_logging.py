from __future__ import annotations

import logging
from typing import Iterator

import pytest

from user_directory_api.app.core import logging_config
from user_directory_api.app.core.config import Settings


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.project_name
    assert isinstance(settings.port, int)
    assert isinstance(settings.debug, bool)


@pytest.fixture
def bare_logger(request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    logger = logging.getLogger(f"tests.logging.{request.node.name}")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_setup_logging_adds_console_and_file_handlers(bare_logger, tmp_path) -> None:
    logfile = tmp_path / "directory.log"

    logging_config.setup_logging("debug", str(logfile), logger=bare_logger)

    assert bare_logger.level == logging.DEBUG
    kinds = {type(handler) for handler in bare_logger.handlers}
    assert kinds == {logging.StreamHandler, logging.FileHandler}


def test_setup_logging_unknown_level_falls_back_to_info(bare_logger) -> None:
    logging_config.setup_logging("chatty", logger=bare_logger)

    assert bare_logger.level == logging.INFO
    assert len(bare_logger.handlers) == 1


def test_setup_logging_runs_once(bare_logger) -> None:
    logging_config.setup_logging("INFO", logger=bare_logger)
    logging_config.setup_logging("DEBUG", logger=bare_logger)

    assert len(bare_logger.handlers) == 1
    assert bare_logger.level == logging.INFO
