"""Per-activation state shared by every plugin component."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from contao_composer.core.legacy.models import LegacyConfig


@dataclass(slots=True)
class PluginContext:
    """Installation root and legacy bootstrap state for one plugin activation.

    Created once when the plugin is activated and threaded through every
    component call. The root is memoized on first resolution and never
    changes afterwards; ``constants_loaded`` and ``config_loaded`` guard the
    two bootstrap loads so they run at most once.

    Attributes:
        cwd: Composer project directory the root is resolved against
        root: Memoized Contao installation root (None until resolved)
        legacy: Constants and TL_CONFIG settings read from the installation
        constants_loaded: Whether the constants file has been applied
        config_loaded: Whether the config files have been applied
    """

    cwd: Path = field(default_factory=Path.cwd)
    root: Path | None = None
    legacy: LegacyConfig = field(default_factory=LegacyConfig)
    constants_loaded: bool = False
    config_loaded: bool = False

    @property
    def version(self) -> str | None:
        return self.legacy.version


__all__ = ["PluginContext"]
