"""Contao installation root detection.

Resolution order for the root directory:
1. A root already memoized on the context (never re-probed)
2. ``extra.contao.root`` of the root package, relative to the project directory
3. ``vendor/contao/core`` below the project directory, when it exists
4. The parent of the project directory

After the root is known, the bootstrap files are read once per context:

- constants: ``system/config/constants.php`` (Contao 3+) or
  ``system/constants.php`` (Contao 2); one of them must exist
- config: ``system/config/default.php`` for Contao >= 3, otherwise
  ``system/config/config.php``, followed by ``system/config/localconfig.php``
  when present
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from contao_composer.core.context import PluginContext
from contao_composer.core.exceptions import LegacyConfigError, RootResolutionError
from contao_composer.core.io import PluginIO
from contao_composer.core.legacy.parser import parse_legacy_file
from contao_composer.core.settings import (
    PluginSettings,
    contao_extra,
    load_settings,
    validate_contao_extra,
)

logger = logging.getLogger(__name__)

SYSTEM_DIR = "system"
CONFIG_DIR = "config"
CONSTANTS_FILE = "constants.php"
DEFAULT_CONFIG_FILE = "default.php"
LEGACY_CONFIG_FILE = "config.php"
LOCAL_CONFIG_FILE = "localconfig.php"


def constants_candidates(root: Path) -> tuple[Path, Path]:
    """Constants file locations in probe order (Contao 3+, then Contao 2)."""
    system_dir = root / SYSTEM_DIR
    return (
        system_dir / CONFIG_DIR / CONSTANTS_FILE,
        system_dir / CONSTANTS_FILE,
    )


def config_dir(root: Path) -> Path:
    return root / SYSTEM_DIR / CONFIG_DIR


def select_root(
    cwd: Path,
    extra: Mapping[str, Any],
    *,
    settings: Optional[PluginSettings] = None,
    io: Optional[PluginIO] = None,
) -> Path:
    """Pick the installation root candidate for ``cwd`` without memoizing it."""
    settings = settings or load_settings()

    errors = validate_contao_extra(extra)
    if errors:
        for error in errors:
            message = f"Ignoring invalid Contao root configuration: {error}"
            if io is not None:
                io.warning(message)
            else:
                logger.warning(message)
        explicit = None
    else:
        explicit = contao_extra(extra).get("root")

    if explicit and explicit != "0":
        # Always relative to the project directory, even when written as an absolute path.
        root = cwd / str(explicit).lstrip("/\\")
        logger.debug("Using Contao root from extra.contao.root: %s", root)
        return root

    vendor_root = cwd / settings.vendor_core_path
    if vendor_root.is_dir():
        logger.debug("Using vendored Contao core: %s", vendor_root)
        return vendor_root

    root = cwd.parent
    logger.debug("Using parent of project directory as Contao root: %s", root)
    return root


def load_constants(context: PluginContext, root: Path) -> None:
    """Apply the first existing constants file to ``context``.

    Raises:
        RootResolutionError: If neither constants file exists under ``root``
        LegacyConfigError: If the constants file does not define VERSION
    """
    if context.constants_loaded:
        return

    candidates = constants_candidates(root)
    constants_file = next((path for path in candidates if path.is_file()), None)
    if constants_file is None:
        raise RootResolutionError(
            f"Could not find constants.php in {root}",
            context={"root": str(root), "probed": [str(p) for p in candidates]},
        )

    context.legacy.apply_constants(parse_legacy_file(constants_file))
    if context.legacy.version is None:
        raise LegacyConfigError(
            f"{constants_file} does not define the VERSION constant",
            context={"root": str(root), "path": str(constants_file)},
        )
    context.constants_loaded = True
    logger.debug("Loaded Contao %s constants from %s", context.legacy.version, constants_file)


def load_config(
    context: PluginContext,
    root: Path,
    *,
    settings: Optional[PluginSettings] = None,
) -> None:
    """Apply the version-specific config file and localconfig.php to ``context``.

    Raises:
        LegacyConfigError: If the version-selected config file is missing
    """
    if context.config_loaded:
        return
    settings = settings or load_settings()

    directory = config_dir(root)
    if context.legacy.version_at_least(settings.version_threshold):
        main_file = directory / DEFAULT_CONFIG_FILE
    else:
        main_file = directory / LEGACY_CONFIG_FILE

    if not main_file.is_file():
        raise LegacyConfigError(
            f"Could not find {main_file.name} in {directory}",
            context={"root": str(root), "path": str(main_file), "version": context.legacy.version},
        )
    context.legacy.apply_settings(parse_legacy_file(main_file))

    local_file = directory / LOCAL_CONFIG_FILE
    if local_file.is_file():
        context.legacy.apply_settings(parse_legacy_file(local_file))

    context.config_loaded = True
    logger.debug(
        "Loaded %d Contao settings from %s",
        len(context.legacy.settings),
        ", ".join(str(p) for p in context.legacy.files[1:]),
    )


def resolve_root(
    context: PluginContext,
    extra: Mapping[str, Any],
    *,
    settings: Optional[PluginSettings] = None,
    io: Optional[PluginIO] = None,
) -> Path:
    """Resolve the Contao installation root and load its bootstrap state.

    The first resolved root is memoized on ``context`` and returned on every
    later call, even if the directory layout changed in between. Constants
    and config are loaded afterwards, each only if not yet loaded.

    Args:
        context: Activation context holding the memoized state
        extra: The root package's ``extra`` section
        settings: Plugin settings (bundled defaults when omitted)
        io: IO channel for warnings about an invalid ``extra.contao`` section

    Returns:
        Path to the Contao installation root

    Raises:
        RootResolutionError: If no constants file exists under the root
        LegacyConfigError: If a bootstrap file is unusable
    """
    settings = settings or load_settings()

    if context.root is None:
        context.root = select_root(context.cwd, extra, settings=settings, io=io)
    root = context.root

    load_constants(context, root)
    load_config(context, root, settings=settings)
    return root


__all__ = [
    "constants_candidates",
    "config_dir",
    "select_root",
    "load_constants",
    "load_config",
    "resolve_root",
]
