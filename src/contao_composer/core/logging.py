from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "contao_composer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_INSTALLED_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "INFO", log_path: Path | None = None) -> None:
    """Attach a single handler to the package logger (no stderr handler).

    Logs go to ``log_path`` when given; otherwise a NullHandler swallows them,
    since every user-facing message already reaches the terminal through
    PluginIO. The installed handler also keeps logging's lastResort handler
    from echoing warnings to stderr. Idempotent per-process: reconfiguring for
    the same target only adjusts the level.
    """
    global _INSTALLED_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path is not None else "<null>"
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level_from_name(level))

    if _INSTALLED_HANDLER is not None and _CONFIGURED_TARGET == target:
        _INSTALLED_HANDLER.setLevel(_level_from_name(level))
        return

    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
        _INSTALLED_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    _INSTALLED_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler and restore propagation."""
    global _INSTALLED_HANDLER, _CONFIGURED_TARGET
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _INSTALLED_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["PACKAGE_LOGGER", "configure_logging", "reset_logging_for_tests"]
