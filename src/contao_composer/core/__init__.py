"""Contao Composer core library.

Key components:
- Plugin: host entry point (activation and lifecycle event subscription)
- PluginContext: per-activation installation root and legacy bootstrap state
- resolve_root: Contao installation root detection
- LifecycleOrchestrator: event-to-action dispatch
"""
from __future__ import annotations

from contao_composer.core import exceptions  # noqa: F401
from contao_composer.core.context import PluginContext
from contao_composer.core.plugin import Plugin
from contao_composer.core.root import resolve_root

__all__ = ["Plugin", "PluginContext", "resolve_root", "exceptions"]
