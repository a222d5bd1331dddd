import logging

from query_collector.util.log_config import configure_package_logging, setup_logger


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_setup_logger_closes_replaced_handlers(tmp_path):
    log_file = tmp_path / "collector.log"
    logger = setup_logger("query_collector.tests.reconfigure", log_file=log_file)
    [old_handler] = _file_handlers(logger)

    logger = setup_logger("query_collector.tests.reconfigure", log_file=log_file)
    [new_handler] = _file_handlers(logger)

    assert old_handler.stream is None
    assert new_handler is not old_handler
    assert len(logger.handlers) == 2
    new_handler.close()


def test_configure_package_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "collector.log"
    logger = setup_logger("query_collector.tests.package")

    configure_package_logging(logging.DEBUG, log_file)
    logger.debug("recorded statement")

    assert "recorded statement" in log_file.read_text(encoding="utf-8")
    configure_package_logging(logging.INFO)
    assert _file_handlers(logger) == []
