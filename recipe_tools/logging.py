# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging
import sys
import typing as t

from colorama import Fore

from recipe_tools import HINT_LEVEL, get_logger
from recipe_tools.environment import RecipeManagerSettings


class RecipeManagerLevelRangeFilter(logging.Filter):
    """
    Pass records with `low <= level < high`.

    Debug, hint and notice messages go to stdout, warnings and errors to stderr.
    """

    def __init__(self, low: int = logging.NOTSET, high: t.Optional[int] = None) -> None:
        super().__init__()

        self.low = low
        self.high = high

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.low:
            return False

        return self.high is None or record.levelno < self.high


class RecipeManagerFormatter(logging.Formatter):
    """
    Prefix each message with the name of its level:

    -  10 -> DEBUG
    -  15 -> HINT (custom level, default)
    -  20 -> NOTICE (info)
    -  30 -> WARNING
    -  40 -> ERROR
    -  50 -> FATAL

    Colored only when both stdout and stderr are terminals.
    """

    PREFIX = {
        logging.DEBUG: 'DEBUG',
        HINT_LEVEL: 'HINT',
        logging.INFO: 'NOTICE',
        logging.WARNING: 'WARNING',
        logging.ERROR: 'ERROR',
        logging.CRITICAL: 'FATAL',
    }

    COLOR = {
        logging.DEBUG: Fore.LIGHTBLACK_EX,
        HINT_LEVEL: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED,
    }

    def __init__(self, colored: bool = True) -> None:
        super().__init__(fmt='%(message)s')

        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        line = f'{self.PREFIX.get(record.levelno, record.levelname)}: {super().format(record)}'

        if self.colored and sys.stdout.isatty() and sys.stderr.isatty():
            return f'{self.COLOR.get(record.levelno, "")}{line}{Fore.RESET}'

        return line


def _handler(
    stream: t.TextIO, colored: bool, low: int = logging.NOTSET, high: t.Optional[int] = None
) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.addFilter(RecipeManagerLevelRangeFilter(low, high))
    handler.setFormatter(RecipeManagerFormatter(colored=colored))
    return handler


def setup_logging() -> None:
    """
    Print the messages of recipe_tools and recipe_manager to the console.

    The level follows RECIPE_MANAGER_DEBUG_MODE and RECIPE_MANAGER_NO_HINTS,
    calling it again replaces the handlers installed before.
    """
    logger = get_logger()
    settings = RecipeManagerSettings()

    if settings.DEBUG_MODE:
        logger.setLevel(logging.DEBUG)
    elif settings.NO_HINTS:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(HINT_LEVEL)

    colored = not settings.NO_COLORS

    logger.handlers.clear()
    logger.addHandler(_handler(sys.stdout, colored, high=logging.WARNING))
    logger.addHandler(_handler(sys.stderr, colored, low=logging.WARNING))

    # library code, don't propagate to the root logger
    logger.propagate = False
