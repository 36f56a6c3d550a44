import logging

from rich.logging import RichHandler

from fen_reader.log import LOG_LEVEL_ENV, configure_logging, get_logger, resolve_level


def test_get_logger_is_namespaced() -> None:
    assert get_logger("board").name == "fen_reader.board"
    assert get_logger("fen_reader.fen").name == "fen_reader.fen"
    assert get_logger().name == "fen_reader"


def test_resolve_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    assert resolve_level() == logging.INFO
    monkeypatch.setenv(LOG_LEVEL_ENV, "nonsense")
    assert resolve_level() == logging.WARNING
    assert resolve_level(verbose=True) == logging.DEBUG


def test_configure_logging_attaches_one_rich_handler() -> None:
    logger = configure_logging()
    configure_logging(verbose=True)
    handlers = [handler for handler in logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
