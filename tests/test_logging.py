import logging

from app.core.logging import setup_logging


def test_setup_logging_uses_configured_level_by_default():
    setup_logging()
    setup_logging(None)
    setup_logging("debug")

    assert logging.getLogger().handlers
