import logging

import pytest

from qaterial import logger


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def sink():
    handler = _ListHandler()
    logger.register_sink(handler)
    yield handler
    logger.unregister_sink(handler)


def test_logger_names(sink):
    assert set(logger.LOGGERS) == {logger.UTILS, logger.FILE, logger.QATERIAL}
    assert all(sink in log.handlers for log in logger.LOGGERS)
    logger.UTILS.warning("u")
    logger.FILE.warning("f")
    logger.info("q")
    assert [r.name for r in sink.records] == [
        "qaterial.utils",
        "qaterial.file",
        "qaterial",
    ]


def test_info_reaches_sink(sink):
    logger.info("hello")
    assert [(r.name, r.levelno, r.getMessage()) for r in sink.records] == [
        ("qaterial", logging.INFO, "hello")
    ]


def test_levels_of_helpers(sink):
    logger.warn("careful")
    logger.error("broken")
    assert [r.levelno for r in sink.records] == [logging.WARNING, logging.ERROR]
    assert [r.getMessage() for r in sink.records] == ["careful", "broken"]


def test_debug_is_below_default_level(sink):
    logger.debug("hidden")
    assert sink.records == []


def test_file_logger_delivers_once(sink):
    logger.FILE.warning("disk full")
    assert len(sink.records) == 1
    assert sink.records[0].name == "qaterial.file"


def test_utils_logger_reaches_sink(sink):
    logger.UTILS.info("tick")
    assert [r.name for r in sink.records] == ["qaterial.utils"]


def test_unregister_stops_delivery():
    handler = _ListHandler()
    logger.register_sink(handler)
    logger.info("first")
    logger.unregister_sink(handler)
    logger.info("second")
    logger.FILE.error("third")
    assert [r.getMessage() for r in handler.records] == ["first"]
    assert all(handler not in log.handlers for log in logger.LOGGERS)


def test_unregister_unknown_sink_leaves_others(sink):
    logger.unregister_sink(_ListHandler())
    logger.info("still here")
    assert [r.getMessage() for r in sink.records] == ["still here"]