"""Logging setup for the loop driver."""

import logging
import sys
from pathlib import Path

from ralph_loop.constants import LOG_DATE_FORMAT, LOG_FORMAT, OUTPUT_LOGGER_NAME

ROOT_LOGGER_NAME = "ralph_loop"


def _reset_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()


def _attach(target: logging.Logger, log_file: Path, formatter: logging.Formatter) -> None:
    _reset_handlers(target)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    target.addHandler(console_handler)

    # Append only: previous runs stay in the transcript
    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(formatter)
    target.addHandler(file_handler)

    target.setLevel(logging.INFO)


def setup_logging(log_file: Path) -> None:
    """Send driver logs and raw agent output to the console and the log file.

    Driver messages are timestamped; agent and verification output is written
    through ``ralph_loop.output`` verbatim.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    _attach(
        logging.getLogger(ROOT_LOGGER_NAME),
        log_file,
        logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT),
    )

    output_logger = logging.getLogger(OUTPUT_LOGGER_NAME)
    _attach(output_logger, log_file, logging.Formatter("%(message)s"))
    output_logger.propagate = False


def teardown_logging() -> None:
    """Close handlers installed by setup_logging."""
    _reset_handlers(logging.getLogger(OUTPUT_LOGGER_NAME))
    _reset_handlers(logging.getLogger(ROOT_LOGGER_NAME))
    logging.getLogger(OUTPUT_LOGGER_NAME).propagate = True
