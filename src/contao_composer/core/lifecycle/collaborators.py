"""Interfaces of the external collaborators driven by the plugin.

The package installer, config manipulator, runonce writer and autoload
dump handler are provided by the embedding host. Any of them may be left
unset, in which case the corresponding step is skipped.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

from contao_composer.core.io import PluginIO
from contao_composer.core.lifecycle.events import LifecycleEvent

if TYPE_CHECKING:
    from contao_composer.core.host import Composer


class ConfigManipulator(Protocol):
    def run(self, io: PluginIO, composer: Composer) -> None: ...


class RunonceWriter(Protocol):
    def create_runonce(self, io: PluginIO, root: Path) -> None: ...


class AutoloadDumpHandler(Protocol):
    def post_autoload_dump(self, event: LifecycleEvent) -> None: ...


InstallerFactory = Callable[[PluginIO, "Composer"], Any]


@dataclass(slots=True)
class Collaborators:
    """External collaborators handed to the plugin."""

    config_manipulator: Optional[ConfigManipulator] = None
    runonce_writer: Optional[RunonceWriter] = None
    autoload_dump_handler: Optional[AutoloadDumpHandler] = None
    installer_factory: Optional[InstallerFactory] = None


__all__ = [
    "ConfigManipulator",
    "RunonceWriter",
    "AutoloadDumpHandler",
    "InstallerFactory",
    "Collaborators",
]
