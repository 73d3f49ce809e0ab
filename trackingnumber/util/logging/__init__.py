import logging
import sys

from trackingnumber.util.logging.JsonLogFormatter import JsonLogFormatter


def _setup_json_handler(handler):
    handler.setFormatter(JsonLogFormatter())
    return handler


def set_up_logging(level: int | str = logging.INFO):
    """
    Routes log records to stdout as JSON lines. The library never calls this
    itself; applications opt in.

    :param level: root logger level
    """
    logging.basicConfig(**{
        "handlers": [
            _setup_json_handler(
                logging.StreamHandler(sys.stdout)
            )
        ],
        "level": level
    })
    logging.getLogger(__name__).info(
        "Logging with JSON formatting is active."
    )
