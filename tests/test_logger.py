"""Test the shared service logger."""
import logging

from calculator_service.common.logger import HANDLER_NAME, LOGGER_NAME, configure_logging, logger


def _service_handlers() -> list:
    """Handlers added by configure_logging, ignoring any attached by the test runner."""
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


def test_configure_logging_sets_level() -> None:
    """configure_logging applies the requested level to the service logger."""
    configured = configure_logging("debug")
    assert configured is logger
    assert configured.name == LOGGER_NAME
    assert configured.level == logging.DEBUG


def test_configure_logging_is_idempotent() -> None:
    """Repeated configuration never stacks handlers."""
    configure_logging("INFO")
    configure_logging("WARNING")
    handlers = _service_handlers()
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler
    assert logger.level == logging.WARNING


def test_configure_logging_ignores_foreign_handlers() -> None:
    """A handler attached by someone else does not stop the service handler from being added."""
    foreign = logging.NullHandler()
    for handler in _service_handlers():
        logger.removeHandler(handler)
    logger.addHandler(foreign)
    try:
        configure_logging("INFO")
        assert len(_service_handlers()) == 1
    finally:
        logger.removeHandler(foreign)
