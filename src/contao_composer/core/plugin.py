"""Composer plugin entry point for legacy Contao installations.

On activation the plugin registers the package installer, injects the
implicit ``contao-community-alliance/composer`` requirement and adds the
local artifact and remote legacy repositories. Afterwards it reacts to
the host's lifecycle events through :class:`LifecycleOrchestrator`.

Activation is not transactional: if root resolution fails, the
requirement injected before it stays in place.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from contao_composer.core.context import PluginContext
from contao_composer.core.host import Composer
from contao_composer.core.io import PluginIO
from contao_composer.core.lifecycle.cache import CacheCleanResult
from contao_composer.core.lifecycle.collaborators import Collaborators
from contao_composer.core.lifecycle.events import LifecycleEvent, LifecycleEventKind
from contao_composer.core.lifecycle.orchestrator import LifecycleOrchestrator
from contao_composer.core.manifest import ensure_requirement
from contao_composer.core.repositories.registrar import (
    register_artifact_repository_if_present,
    register_legacy_repository,
)
from contao_composer.core.settings import PluginSettings, load_settings

logger = logging.getLogger(__name__)


class Plugin:
    """Installs Contao extensions and maintains the Contao installation."""

    def __init__(
        self,
        collaborators: Optional[Collaborators] = None,
        *,
        context: Optional[PluginContext] = None,
        settings: Optional[PluginSettings] = None,
    ) -> None:
        self.collaborators = collaborators or Collaborators()
        self.settings = settings or load_settings()
        self.context = context
        self.composer: Optional[Composer] = None
        self.io: Optional[PluginIO] = None
        self._orchestrator: Optional[LifecycleOrchestrator] = None

    def activate(self, composer: Composer, io: PluginIO) -> None:
        """Wire the plugin into the host.

        Raises:
            RootResolutionError: If no Contao installation can be found
        """
        self.composer = composer
        self.io = io
        if self.context is None:
            self.context = PluginContext(cwd=composer.project_dir)
        self._orchestrator = LifecycleOrchestrator(
            composer,
            io,
            self.context,
            self.collaborators,
            settings=self.settings,
        )

        factory = self.collaborators.installer_factory
        if factory is not None:
            composer.installation_manager.add_installer(factory(io, composer))
        else:
            logger.debug("No installer factory configured; skipping installer registration")

        self.inject_requires()
        self.add_local_artifacts_repository()
        self.add_legacy_packages_repository()

    @staticmethod
    def get_subscribed_events() -> dict[str, str]:
        return {
            LifecycleEventKind.PRE_UPDATE.value: "handle_command",
            LifecycleEventKind.POST_UPDATE.value: "handle_command",
            LifecycleEventKind.POST_AUTOLOAD_DUMP.value: "handle_command",
            LifecycleEventKind.PRE_FILE_DOWNLOAD.value: "handle_pre_download",
        }

    def get_contao_root(self) -> Path:
        """Resolve (or return the memoized) Contao installation root."""
        return self._require_orchestrator().resolve_root()

    def inject_requires(self) -> None:
        """Add the implicit Contao Composer requirement to the root package."""
        composer, _ = self._require_active()
        ensure_requirement(
            composer.package,
            self.settings.requirement_name,
            self.settings.requirement_constraint,
        )

    def add_local_artifacts_repository(self) -> None:
        composer, _ = self._require_active()
        root = self.get_contao_root()
        register_artifact_repository_if_present(
            composer.repository_manager, root, settings=self.settings
        )

    def add_legacy_packages_repository(self) -> None:
        composer, _ = self._require_active()
        register_legacy_repository(composer.repository_manager, settings=self.settings)

    def handle_command(self, event: LifecycleEvent) -> None:
        self._require_orchestrator().handle(event)

    def handle_pre_download(self, event: LifecycleEvent) -> None:
        self._require_orchestrator().handle(event)

    def create_runonce(self, root: Path) -> None:
        """Create the global runonce script after updates were installed."""
        self._require_orchestrator().create_runonce(root)

    def clean_cache(self, root: Path) -> CacheCleanResult:
        """Clean Contao's internal cache after updates were installed."""
        return self._require_orchestrator().clean_cache(root)

    def _require_active(self) -> tuple[Composer, PluginIO]:
        if self.composer is None or self.io is None:
            raise RuntimeError("Plugin has not been activated")
        return self.composer, self.io

    def _require_orchestrator(self) -> LifecycleOrchestrator:
        if self._orchestrator is None:
            raise RuntimeError("Plugin has not been activated")
        return self._orchestrator


__all__ = ["Plugin"]
