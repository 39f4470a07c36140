from __future__ import annotations

from typing import Any, Dict, Mapping


class ContaoComposerError(Exception):
    """Base exception for the Contao Composer plugin."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class RootResolutionError(ContaoComposerError, RuntimeError):
    """Raised when no usable Contao installation exists under the resolved root."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ContaoComposerError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class LegacyConfigError(RootResolutionError):
    """Raised when a legacy constants/config file cannot be loaded."""


class ManifestError(ContaoComposerError, ValueError):
    """Raised when composer.json cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ContaoComposerError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class CacheInvalidationError(ContaoComposerError):
    """Raised after a cache clean run in which one or more directories failed."""

    def __init__(
        self,
        message: str,
        *,
        failures: Mapping[str, str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        self.failures = dict(failures or {})
        if self.failures:
            ctx["failures"] = self.failures
        super().__init__(message, context=ctx)


__all__ = [
    "ContaoComposerError",
    "RootResolutionError",
    "LegacyConfigError",
    "ManifestError",
    "CacheInvalidationError",
]
