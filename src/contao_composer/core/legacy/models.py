"""Legacy configuration data models."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from packaging.version import InvalidVersion, Version

from contao_composer.core.exceptions import LegacyConfigError


@dataclass(frozen=True, slots=True)
class RawExpression:
    """A PHP expression that could not be reduced to a literal value.

    Attributes:
        text: Source text of the expression
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True)
class LegacySource:
    """Definitions read from a single legacy PHP file.

    Attributes:
        path: File the definitions were read from
        constants: ``define()`` calls in file order (first definition wins)
        assignments: ``$GLOBALS['TL_CONFIG']`` assignments as (key path, value) in file order
    """

    path: Path
    constants: dict[str, Any] = field(default_factory=dict)
    assignments: list[tuple[tuple[str, ...], Any]] = field(default_factory=list)

    @property
    def settings(self) -> dict[str, Any]:
        """Settings produced by replaying this file's assignments on an empty config."""
        result: dict[str, Any] = {}
        for key_path, value in self.assignments:
            _assign(result, key_path, value)
        return result


@dataclass(slots=True)
class LegacyConfig:
    """Typed view of the Contao bootstrap state.

    Attributes:
        constants: Constants defined by the loaded constants file
        settings: The ``TL_CONFIG`` mapping after all config files were applied
        files: Files applied, in load order
    """

    constants: dict[str, Any] = field(default_factory=dict)
    settings: dict[str, Any] = field(default_factory=dict)
    files: list[Path] = field(default_factory=list)

    @property
    def version(self) -> str | None:
        value = self.constants.get("VERSION")
        if value is None or isinstance(value, RawExpression):
            return None
        return str(value)

    def apply_constants(self, source: LegacySource) -> None:
        # PHP constants cannot be redefined; keep the first definition.
        for name, value in source.constants.items():
            self.constants.setdefault(name, value)
        self.files.append(source.path)

    def apply_settings(self, source: LegacySource) -> None:
        for key_path, value in source.assignments:
            _assign(self.settings, key_path, value)
        self.files.append(source.path)

    def version_at_least(self, threshold: str) -> bool:
        """Return True when the framework version is >= ``threshold``.

        Raises:
            LegacyConfigError: If no version is known or it cannot be compared
        """
        if self.version is None:
            raise LegacyConfigError(
                "Contao version is unknown; the constants file must be loaded first",
                context={"files": [str(p) for p in self.files]},
            )
        return compare_version(self.version, threshold) >= 0


def compare_version(version: str, other: str) -> int:
    """Compare two version strings, returning -1, 0 or 1.

    Ordering follows PEP 440, which differs from PHP version_compare for
    pre-releases (PHP treats "3.0-beta1" as >= "3"). Contao VERSION
    constants are plain "X.Y" values, where both agree.
    """
    try:
        left, right = Version(str(version).strip()), Version(str(other).strip())
    except InvalidVersion as exc:
        raise LegacyConfigError(
            f"Cannot compare Contao version {version!r} with {other!r}: {exc}",
            context={"version": version, "threshold": other},
        ) from exc
    return (left > right) - (left < right)


def _assign(target: dict[str, Any], key_path: tuple[str, ...], value: Any) -> None:
    node = target
    for key in key_path[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[key_path[-1]] = value


__all__ = [
    "RawExpression",
    "LegacySource",
    "LegacyConfig",
    "compare_version",
]
