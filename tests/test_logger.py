import logging

import pytest
from loguru import logger

from config.logger import InterceptHandler, _resolve_level, configure_loguru


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_loguru_routes_stdlib_and_quiets_http_libraries(restore_root_logger):
    configure_loguru()

    root = logging.getLogger()
    assert any(isinstance(handler, InterceptHandler) for handler in root.handlers)
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING

    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG", format="{message}")
    try:
        logging.getLogger("catalog.tests").warning("catalog %s", "refreshed")
    finally:
        logger.remove(sink_id)

    assert any("catalog refreshed" in message for message in messages)


def test_resolve_level():
    assert _resolve_level("info") == logging.INFO
    assert _resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        _resolve_level("chatty")
