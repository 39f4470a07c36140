"""Invalidation of Contao's internal cache after updates."""
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from contao_composer.core.exceptions import CacheInvalidationError
from contao_composer.core.io import PluginIO
from contao_composer.core.settings import PluginSettings, load_settings

logger = logging.getLogger(__name__)


def cache_dir(root: Path) -> Path:
    return root / "system" / "cache"


@dataclass(frozen=True, slots=True)
class CacheCleanResult:
    """Outcome of a cache clean run.

    Attributes:
        removed: Cache subdirectory names that were deleted
        skipped: Cache subdirectory names that did not exist
        failures: (name, error message) for each directory that could not be deleted
    """

    removed: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    failures: tuple[tuple[str, str], ...] = ()

    @property
    def success(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise CacheInvalidationError if any directory failed."""
        if self.failures:
            names = ", ".join(name for name, _ in self.failures)
            raise CacheInvalidationError(
                f"Could not clean Contao cache directories: {names}",
                failures=dict(self.failures),
            )


def clean_cache(
    io: PluginIO,
    root: Path,
    *,
    settings: Optional[PluginSettings] = None,
) -> CacheCleanResult:
    """Delete Contao's internal cache directories below ``<root>/system/cache``.

    Every directory is attempted independently; a failure is recorded and the
    remaining directories are still processed. Missing directories are skipped.
    """
    settings = settings or load_settings()
    base = cache_dir(root)

    removed: list[str] = []
    skipped: list[str] = []
    failures: list[tuple[str, str]] = []
    for name in settings.cache_directories:
        path = base / name
        if not path.is_dir():
            skipped.append(name)
            continue
        io.write(f"Clean contao internal {name} cache")
        try:
            if path.is_symlink():
                path.unlink()
            else:
                shutil.rmtree(path)
        except OSError as exc:
            logger.debug("Failed to remove %s", path, exc_info=True)
            failures.append((name, str(exc)))
            continue
        removed.append(name)

    return CacheCleanResult(
        removed=tuple(removed),
        skipped=tuple(skipped),
        failures=tuple(failures),
    )


__all__ = ["CacheCleanResult", "cache_dir", "clean_cache"]
