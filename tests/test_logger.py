"""
Unit tests for logger setup.
"""

import logging
from logging.handlers import TimedRotatingFileHandler

from marketplace_common.config import LoggingConfig
from marketplace_common.utils.logger import create_repository_logger, setup_logger


def reset_logger(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_setup_logger_streams_by_default(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
    logger = setup_logger("marketplace_test.stream", LoggingConfig(level="DEBUG"))
    try:
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

        setup_logger("marketplace_test.stream", LoggingConfig(level="DEBUG"))
        assert len(logger.handlers) == 1
    finally:
        reset_logger(logger)


def test_repository_logger_writes_to_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
    config = LoggingConfig(service_path="logs/service.log", level="DEBUG")

    logger = create_repository_logger(config)
    try:
        assert isinstance(logger.handlers[0], TimedRotatingFileHandler)
        logging.getLogger("marketplace_common.repositories.user.components.relation").debug("追加消息")
        logger.handlers[0].flush()

        content = (tmp_path / "logs" / "service.log").read_text(encoding="utf-8")
        assert "追加消息" in content
    finally:
        reset_logger(logger)
