"""Default values for collectkit."""

from enum import IntEnum


class EXITCODES(IntEnum):
    """Exit codes for collectkit."""

    SUCCESS = 0
    """Successful execution."""
    ERROR = 1
    """General unspecified error."""
    CONFIGURATION_ERROR = 2
    """An error in the configuration."""
    PRECONDITION_ERROR = 3
    """A command was called with arguments violating a precondition."""


DEFAULT_BATCH_SIZE = 3
DEFAULT_DEMO_TEXT = "abcdefg"
DEFAULT_LOG_FORMAT = "%(asctime)-15s %(name)-10s %(levelname)-8s: %(message)s"
DEFAULT_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# dictconfig as described in
# https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
DEFAULT_LOG_CONFIG: dict = {
    "version": 1,
    "formatters": {
        "collectkit": {
            "class": "collectkit.util.logging.CollectkitFormatter",
            "format": DEFAULT_LOG_FORMAT,
            "datefmt": DEFAULT_LOG_DATE_FORMAT,
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "collectkit",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "root": {"level": "INFO", "handlers": ["console"]},
        "FIFOQueue": {"level": "INFO"},
        "Batching": {"level": "INFO"},
    },
    "filters": {},
    "disable_existing_loggers": False,
}
