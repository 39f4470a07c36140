"""Lifecycle handling: events, collaborators, cache invalidation and dispatch."""
from __future__ import annotations

from contao_composer.core.lifecycle.cache import CacheCleanResult, clean_cache
from contao_composer.core.lifecycle.collaborators import (
    AutoloadDumpHandler,
    Collaborators,
    ConfigManipulator,
    InstallerFactory,
    RunonceWriter,
)
from contao_composer.core.lifecycle.events import LifecycleEvent, LifecycleEventKind
from contao_composer.core.lifecycle.orchestrator import LifecycleOrchestrator

__all__ = [
    "CacheCleanResult",
    "clean_cache",
    "AutoloadDumpHandler",
    "Collaborators",
    "ConfigManipulator",
    "InstallerFactory",
    "RunonceWriter",
    "LifecycleEvent",
    "LifecycleEventKind",
    "LifecycleOrchestrator",
]
