"""Logging setup for minibank."""
import logging

from minibank.config.settings import Settings

LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'
HANDLER_NAME = 'minibank'


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a handler to the ``minibank`` logger according to settings.

    Handlers installed by an earlier call are removed first.
    """
    logger = logging.getLogger('minibank')
    logger.setLevel(settings.log_level)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    if settings.log_file:
        handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(HANDLER_NAME)
    logger.addHandler(handler)
    return logger
