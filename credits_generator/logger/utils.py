from collections.abc import Generator
from contextlib import contextmanager

from .singleton import get_app_logger


def print_section(section: str) -> None:
    logger = get_app_logger()
    logger.print("=" * 50)
    logger.print("Generating %s...", section)
    logger.print("=" * 50 + "\n")


@contextmanager
def log_operation(operation_name: str) -> Generator[None, None, None]:
    """
    Context manager to log when an operation starts, finishes, or fails.

    A failure is logged with its traceback and does not propagate, so the
    caller carries on with its next operation.
    """
    logger = get_app_logger()
    logger.info("Starting to %s...", operation_name)
    try:
        yield
        logger.success("Successfully %s.\n", operation_name)
    except Exception:
        logger.exception("Failed to %s", operation_name)
