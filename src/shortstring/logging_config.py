import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "shortstring-stdout"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Send shortstring logs to stdout at the given level.

    Only the "shortstring" logger is configured; handlers on the root logger
    are left alone, and calling this again replaces the previous handler.
    """
    logger = logging.getLogger("shortstring")
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
