"""Minimal in-process model of the Composer host.

The plugin only needs a handful of host services: the root package, the
repository set, the installer set and an event dispatcher. ``load_composer``
builds them from a project's composer.json.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from contao_composer.core.lifecycle.events import LifecycleEvent
from contao_composer.core.manifest import RootPackage, read_manifest
from contao_composer.core.repositories.manager import RepositoryManager

logger = logging.getLogger(__name__)


class InstallationManager:
    """Ordered set of package installers."""

    def __init__(self) -> None:
        self._installers: list[Any] = []

    def add_installer(self, installer: Any) -> None:
        logger.debug("Adding installer %s", type(installer).__name__)
        self._installers.append(installer)

    @property
    def installers(self) -> tuple[Any, ...]:
        return tuple(self._installers)


@dataclass(slots=True)
class Composer:
    """Host context handed to the plugin and its collaborators.

    Attributes:
        package: Root package of the project
        repository_manager: Repositories available for resolution
        installation_manager: Registered package installers
        config: Host configuration (the manifest's ``config`` section)
        project_dir: Directory containing composer.json
    """

    package: RootPackage = field(default_factory=RootPackage)
    repository_manager: RepositoryManager = field(default_factory=RepositoryManager)
    installation_manager: InstallationManager = field(default_factory=InstallationManager)
    config: dict[str, Any] = field(default_factory=dict)
    project_dir: Path = field(default_factory=Path.cwd)


class EventSubscriber(Protocol):
    def get_subscribed_events(self) -> dict[str, str]: ...


class EventDispatcher:
    """Delivers lifecycle events to subscribers, one at a time."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Any]] = {}

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, method_name in subscriber.get_subscribed_events().items():
            self._listeners.setdefault(event_name, []).append(getattr(subscriber, method_name))

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def dispatch(self, event_name: str, payload: Any = None) -> LifecycleEvent:
        """Call every listener registered for ``event_name``.

        Returns:
            The event that was delivered
        """
        event = LifecycleEvent(name=event_name, payload=payload)
        for listener in self._listeners.get(event_name, []):
            listener(event)
        return event


def load_composer(project_dir: Path) -> Composer:
    """Build a host context from ``<project_dir>/composer.json``.

    Raises:
        ManifestError: If composer.json is malformed
    """
    data = read_manifest(project_dir)
    config = data.get("config") or {}
    return Composer(
        package=RootPackage.from_manifest(data),
        config=dict(config) if isinstance(config, dict) else {},
        project_dir=project_dir,
    )


__all__ = [
    "InstallationManager",
    "Composer",
    "EventSubscriber",
    "EventDispatcher",
    "load_composer",
]
