import logging
import sys
from typing import TextIO


def _render(message: str, context: dict[str, object]) -> str:
    if not context:
        return message
    fields = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} | {fields}"


class Log:
    """Process-wide logger. Keyword arguments are appended as key=value context."""

    _logger: logging.Logger = logging.getLogger("seteuk")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler (stdout by default)."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(_render(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(_render(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(_render(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(_render(message, context))
