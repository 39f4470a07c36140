"""Lifecycle events emitted by the host."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LifecycleEventKind(str, Enum):
    """Host lifecycle events the plugin reacts to."""

    PRE_UPDATE = "pre-update-cmd"
    POST_UPDATE = "post-update-cmd"
    POST_AUTOLOAD_DUMP = "post-autoload-dump"
    PRE_FILE_DOWNLOAD = "pre-file-download"

    @classmethod
    def from_name(cls, name: str) -> LifecycleEventKind | None:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class LifecycleEvent:
    """An event delivered by the host.

    Attributes:
        name: Event identifier, e.g. ``post-update-cmd``
        payload: Host-specific data attached to the event
    """

    name: str
    payload: Any = None

    @property
    def kind(self) -> LifecycleEventKind | None:
        return LifecycleEventKind.from_name(self.name)


__all__ = ["LifecycleEventKind", "LifecycleEvent"]
