"""Dispatch of host lifecycle events to the plugin's maintenance steps.

| Event               | Action                                            |
|---------------------|---------------------------------------------------|
| pre-update-cmd      | run the config manipulator                        |
| post-update-cmd     | resolve the root, write runonce, clean the cache  |
| post-autoload-dump  | hand the event to the autoload dump handler       |
| pre-file-download   | accepted, nothing to do yet                       |

Any other event is ignored.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from contao_composer.core.context import PluginContext
from contao_composer.core.io import PluginIO
from contao_composer.core.lifecycle.cache import CacheCleanResult, clean_cache
from contao_composer.core.lifecycle.collaborators import Collaborators
from contao_composer.core.lifecycle.events import LifecycleEvent, LifecycleEventKind
from contao_composer.core.root import resolve_root
from contao_composer.core.settings import PluginSettings, load_settings

if TYPE_CHECKING:
    from contao_composer.core.host import Composer

logger = logging.getLogger(__name__)


class LifecycleOrchestrator:
    """Runs the action registered for each lifecycle event, synchronously."""

    def __init__(
        self,
        composer: Composer,
        io: PluginIO,
        context: PluginContext,
        collaborators: Optional[Collaborators] = None,
        *,
        settings: Optional[PluginSettings] = None,
    ) -> None:
        self.composer = composer
        self.io = io
        self.context = context
        self.collaborators = collaborators or Collaborators()
        self.settings = settings or load_settings()

    def handle(self, event: LifecycleEvent) -> None:
        """Dispatch ``event`` to its action; unknown events are ignored."""
        kind = event.kind
        action = _ACTIONS.get(kind) if kind is not None else None
        if action is None:
            logger.debug("Ignoring lifecycle event %s", event.name)
            return
        logger.debug("Handling lifecycle event %s", event.name)
        action(self, event)

    def resolve_root(self) -> Path:
        return resolve_root(
            self.context,
            self.composer.package.extra,
            settings=self.settings,
            io=self.io,
        )

    def create_runonce(self, root: Path) -> None:
        writer = self.collaborators.runonce_writer
        if writer is None:
            logger.debug("No runonce writer configured; skipping runonce creation")
            return
        writer.create_runonce(self.io, root)

    def clean_cache(self, root: Path) -> CacheCleanResult:
        result = clean_cache(self.io, root, settings=self.settings)
        for name, error in result.failures:
            self.io.warning(f"Could not clean contao internal {name} cache: {error}")
        return result


def _pre_update(orchestrator: LifecycleOrchestrator, event: LifecycleEvent) -> None:
    manipulator = orchestrator.collaborators.config_manipulator
    if manipulator is None:
        logger.debug("No config manipulator configured; skipping")
        return
    manipulator.run(orchestrator.io, orchestrator.composer)


def _post_update(orchestrator: LifecycleOrchestrator, event: LifecycleEvent) -> None:
    root = orchestrator.resolve_root()
    orchestrator.create_runonce(root)
    orchestrator.clean_cache(root)


def _post_autoload_dump(orchestrator: LifecycleOrchestrator, event: LifecycleEvent) -> None:
    handler = orchestrator.collaborators.autoload_dump_handler
    if handler is None:
        logger.debug("No autoload dump handler configured; skipping")
        return
    handler.post_autoload_dump(event)


def _pre_file_download(orchestrator: LifecycleOrchestrator, event: LifecycleEvent) -> None:
    logger.debug("pre-file-download received; no action registered")


_ACTIONS: dict[LifecycleEventKind, Callable[[LifecycleOrchestrator, LifecycleEvent], None]] = {
    LifecycleEventKind.PRE_UPDATE: _pre_update,
    LifecycleEventKind.POST_UPDATE: _post_update,
    LifecycleEventKind.POST_AUTOLOAD_DUMP: _post_autoload_dump,
    LifecycleEventKind.PRE_FILE_DOWNLOAD: _pre_file_download,
}


__all__ = ["LifecycleOrchestrator"]
