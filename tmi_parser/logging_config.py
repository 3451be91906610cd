r"""
Logging configuration module for the TMI parser command line.

Provides a clean, configurable console logging setup using the colorlog
library. The parsing library itself never calls this; applications opt in.
"""

import logging
import os
import sys

import colorlog

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def build_formatter() -> colorlog.ColoredFormatter:
    """Create the colored console formatter shared by every handler."""
    return colorlog.ColoredFormatter(
        "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        secondary_log_colors={
            "message": {
                "ERROR": "red",
                "CRITICAL": "magenta",
            }
        },
        reset=True,
    )


class ConsoleHandler(logging.StreamHandler):
    """Stream handler installed by LoggerConfigurator (recognizable on re-configure)."""


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, level: int | None = None, stream=None):
        """Initialize the configurator.

        Args:
            level: Explicit log level; overrides the DEBUG environment variable.
            stream: Output stream for the console handler (defaults to stderr so
                decoded output on stdout stays machine-readable).
        """
        self.level = level
        self.stream = stream

    def resolve_level(self) -> int:
        """Return the configured level, falling back to the DEBUG variable."""
        if self.level is not None:
            return self.level
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def configure(self) -> logging.Handler:
        """Configure root logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO

        Returns:
            The installed console handler.
        """
        log_level = self.resolve_level()

        handler = ConsoleHandler(self.stream or sys.stderr)
        handler.setFormatter(build_formatter())

        root_logger = logging.getLogger()
        # Replace a previously installed console handler; leave foreign handlers alone
        for existing in list(root_logger.handlers):
            if isinstance(existing, ConsoleHandler):
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)
        logging.getLogger("tmi_parser").setLevel(log_level)
        return handler
