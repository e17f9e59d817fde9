"""Tests for engine logging."""
import logging

import pytest

from draftflow.logging_config import configure_logging
from draftflow.services.possibility_tree import generate_possibility_tree


@pytest.fixture
def draftflow_logger():
    logger = logging.getLogger("draftflow")
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(logging.NOTSET)


def _console_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_build_logs_summary(caplog, champions_by_name, team_pools):
    with caplog.at_level(logging.INFO, logger="draftflow"):
        generate_possibility_tree({"Mid": "Azir"}, "TTT", team_pools, champions_by_name, max_depth=1)

    assert any("Built possibility tree for team TTT" in r.getMessage() for r in caplog.records)


def test_configure_logging_adds_single_handler(draftflow_logger):
    configure_logging("debug")
    configure_logging("debug")

    assert len(_console_handlers(draftflow_logger)) == 1
    assert draftflow_logger.level == logging.DEBUG


def test_configure_logging_alongside_file_handler(draftflow_logger, tmp_path):
    draftflow_logger.addHandler(logging.FileHandler(tmp_path / "draftflow.log"))

    configure_logging("info")

    assert len(_console_handlers(draftflow_logger)) == 1
