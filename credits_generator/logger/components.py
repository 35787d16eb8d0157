import logging
from typing import Any, ClassVar

from colorama import Back, Fore, Style

from .constants import PRINT_LEVEL, SUCCESS_LEVEL


# Custom logger class that adds a .success() method and .print() method
class AppLogger(logging.Logger):
    """Custom logger that adds a .success() method."""

    def success(self, msg: str, *args: Any, **kwargs: Any) -> None:  # noqa: ANN401
        if self.isEnabledFor(SUCCESS_LEVEL):
            self._log(SUCCESS_LEVEL, msg, args, **kwargs)

    def print(self, msg: str, *args: Any, **kwargs: Any) -> None:  # noqa: ANN401
        if self.isEnabledFor(PRINT_LEVEL):
            self._log(PRINT_LEVEL, msg, args, **kwargs)


class LogStatusFilter(logging.Filter):
    """A logger filter to track whether any warnings or errors were logged."""

    def __init__(self) -> None:
        super().__init__()
        self.had_error = False
        self.had_warning = False

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= logging.ERROR:
            self.had_error = True

        if record.levelno == logging.WARNING:
            self.had_warning = True

        return True

    def reset(self) -> None:
        self.had_error = False
        self.had_warning = False


class ColorFormatter(logging.Formatter):
    """Color formatter for the logger."""

    COLOR_MAP: ClassVar = {
        PRINT_LEVEL: Style.BRIGHT,
        logging.DEBUG: Fore.LIGHTBLACK_EX,
        logging.INFO: Fore.BLUE,
        SUCCESS_LEVEL: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Back.RED + Fore.WHITE,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLOR_MAP.get(record.levelno, "")
        base = super().format(record)

        # Strip the [PRINT] prefix for PRINT level
        if record.levelno == PRINT_LEVEL:
            return f"{color}{record.getMessage()}{Style.RESET_ALL}"

        return f"{color}{base}{Style.RESET_ALL}"
