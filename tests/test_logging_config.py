"""Tests for logging setup."""
import logging

import pytest

from minibank.config.settings import Settings
from minibank.logging_config import configure_logging
from minibank.models.exceptions import AccountNotFoundError
from minibank.services.bank import Bank


@pytest.fixture
def minibank_logger():
    """Yield the package logger and strip its handlers afterwards."""
    logger = logging.getLogger('minibank')
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def test_configure_logging_stream(minibank_logger):
    """Without a log file a StreamHandler is installed."""
    logger = configure_logging(Settings(log_level='WARNING'))

    assert logger is minibank_logger
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler


def test_configure_logging_file(minibank_logger, tmp_path):
    """Bank operations are written to the configured file."""
    log_file = tmp_path / 'minibank.log'
    configure_logging(Settings(log_level='DEBUG', log_file=str(log_file)))

    bank = Bank()
    bank.add_account('savings')
    bank.deposit('savings', 10)
    with pytest.raises(AccountNotFoundError):
        bank.withdraw('cheque', 1)
    for handler in minibank_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding='utf-8')
    assert "DEBUG:minibank.services.bank: Added account 'savings'" in content
    assert "Deposited 10 into 'savings'" in content
    assert "WARNING:minibank.services.bank: Lookup failed for account 'cheque'" in content


def test_configure_logging_replaces_handlers(minibank_logger):
    """Calling twice does not stack handlers."""
    configure_logging(Settings())
    configure_logging(Settings(log_level='ERROR'))

    assert len(minibank_logger.handlers) == 1
    assert minibank_logger.level == logging.ERROR


def test_configure_logging_keeps_foreign_handlers(minibank_logger):
    """Only the handler installed by configure_logging is replaced."""
    other = logging.NullHandler()
    minibank_logger.addHandler(other)

    configure_logging(Settings())
    configure_logging(Settings())

    assert other in minibank_logger.handlers
    assert len(minibank_logger.handlers) == 2
    assert [h.get_name() for h in minibank_logger.handlers if h is not other] == ['minibank']
