# utils/logger.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Session output and debug tracing on top of the standard logging module

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Verbosity levels understood by the proof assistant."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


class ProoferLogger:
    """Logger shared by the parser, the rule engine and the session.

    Regular session output (INFO) and debug traces go to stdout; rejected
    input and failures (WARNING and above) go to stderr.
    """

    def __init__(self, name: str = "proofer", level: LogLevel = LogLevel.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = ProoferFormatter()

        output = logging.StreamHandler(sys.stdout)
        output.addFilter(_BelowWarning())
        output.setFormatter(formatter)

        problems = logging.StreamHandler(sys.stderr)
        problems.setLevel(logging.WARNING)
        problems.setFormatter(formatter)

        self.logger.addHandler(output)
        self.logger.addHandler(problems)

    @property
    def level(self) -> LogLevel:
        return LogLevel(self.logger.level)

    def set_level(self, level: LogLevel):
        """Change the verbosity; the stderr handler always keeps WARNING."""
        self.logger.setLevel(level.value)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Session output shown to the user."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Rejected input, failed rule applications and fatal errors."""
        self.logger.error(message, **kwargs)

    # Proof session traces

    def command_received(self, command: str, mode: str):
        self.debug(f"Command '{command}' in {mode.lower()} mode")

    def rule_applied(self, rule: str, produced: int, silent: bool):
        """Trace the outcome of one batch rule application."""
        mode = "silent" if silent else "strict"
        self.debug(f"    {rule} ({mode}) produced {produced} result(s)")

    def rule_skipped(self, rule: str, arguments: str, reason: str):
        self.debug(f"    {rule} skipped {arguments}: {reason}")

    def fact_added(self, index: int, formula: str):
        self.debug(f"      + fact {index}: {formula}")

    def fact_rejected(self, formula: str):
        self.debug(f"      = duplicate suppressed: {formula}")

    def conclusion_status(self, conclusion: Optional[str], proven: bool):
        """Trace a 'done' check against the current conclusion."""
        state = "reached" if proven else "not reached"
        self.debug(f"Conclusion {conclusion} {state}")


class ProoferFormatter(logging.Formatter):
    """Print session output bare and tag everything else with its level."""

    def format(self, record):
        message = record.getMessage()

        if record.levelno in (logging.INFO, logging.ERROR):
            return message

        return f"[{record.levelname}] {message}"


_global_logger: Optional[ProoferLogger] = None


def get_logger(name: str = "proofer") -> ProoferLogger:
    """Return the process-wide logger, creating it on first use.

    Args:
        name: Name of the underlying logging.Logger

    Returns:
        Shared ProoferLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ProoferLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Apply the command line verbosity flags.

    Session output is logged at INFO, so INFO is the floor for an
    interactive session; ``debug`` adds the internal traces.

    Args:
        verbose: INFO output; already the default for a session
        debug: Enable DEBUG output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)
