from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from sqlevents import ParserConfig, SQLEventParser

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def parser() -> SQLEventParser:
    return SQLEventParser()


@pytest.fixture
def verbose_parser() -> SQLEventParser:
    return SQLEventParser(ParserConfig(log_statements=True, sql_truncation_length=40))


@pytest.fixture(autouse=True)
def reset_sqlevents_logger() -> Generator[None, None, None]:
    """Undo logger changes made by ``configure_logging`` so caplog keeps working."""
    logger = logging.getLogger("sqlevents")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
