"""Centralized logging for flowcut.

All package loggers hang off a single ``flowcut`` logger that owns exactly
one handler. Algorithm modules only ever log; they never print.

The initial level comes from the ``FLOWCUT_LOG_LEVEL`` environment variable
(a level name such as ``DEBUG``) when set, otherwise INFO. Augmenting paths
are logged at DEBUG, so ``FLOWCUT_LOG_LEVEL=DEBUG`` traces every round of
the max-flow loop without code changes.
"""

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "flowcut"
LEVEL_ENV_VAR = "FLOWCUT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _package_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def default_level() -> int:
    """Level named by ``FLOWCUT_LOG_LEVEL``; INFO when unset or unknown."""
    env_level = os.getenv(LEVEL_ENV_VAR)
    if not env_level:
        return logging.INFO
    value = logging.getLevelName(env_level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_root_logger(
    level: Union[int, str, None] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the ``flowcut`` logger.

    Subsequent calls are no-ops until ``reset_logging`` is called.

    Args:
        level: Logging level (int or name such as ``"DEBUG"``). Defaults to
            ``default_level()``.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stdout ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    root = _package_logger()
    root.setLevel(default_level() if level is None else _coerce_level(level))
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Propagate so pytest's caplog sees package records
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger that inherits the ``flowcut`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``flowcut`` logger and its handlers."""
    setup_root_logger()
    value = _coerce_level(level)
    root = _package_logger()
    root.setLevel(value)
    for handler in root.handlers:
        handler.setLevel(value)


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Apply the ``--verbose``/``--quiet`` command-line flags.

    ``verbose`` wins over ``quiet``; with neither flag the level falls back
    to ``default_level()``.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = default_level()
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Switch every flowcut logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return every flowcut logger to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget prior setup (used by tests)."""
    global _configured
    _configured = False

    root = _package_logger()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
