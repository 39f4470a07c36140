"""Root package manifest (composer.json) model and requirement injection."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from contao_composer.core.exceptions import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "composer.json"


@dataclass(slots=True)
class RootPackage:
    """In-memory view of the project's root package.

    Attributes:
        name: Package name, if the manifest declares one
        requires: Package name -> version constraint
        extra: Free-form ``extra`` section
    """

    name: str | None = None
    requires: dict[str, str] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_manifest(cls, data: Mapping[str, Any]) -> RootPackage:
        """Create a RootPackage from parsed composer.json content.

        Raises:
            ManifestError: If ``require`` or ``extra`` is not an object
        """
        requires = data.get("require") or {}
        extra = data.get("extra") or {}
        if not isinstance(requires, Mapping):
            raise ManifestError("composer.json 'require' must be an object")
        if not isinstance(extra, Mapping):
            raise ManifestError("composer.json 'extra' must be an object")
        name = data.get("name")
        return cls(
            name=str(name) if name else None,
            requires={str(k): str(v) for k, v in requires.items()},
            extra=dict(extra),
        )


def read_manifest(project_dir: Path) -> dict[str, Any]:
    """Read ``composer.json`` from ``project_dir``.

    Returns:
        Parsed manifest, or an empty dict when the file does not exist

    Raises:
        ManifestError: If the file is not valid JSON or not an object
    """
    path = project_dir / MANIFEST_FILENAME
    if not path.exists():
        logger.debug("No %s in %s; using an empty root package", MANIFEST_FILENAME, project_dir)
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Could not read {path}: {exc}", context={"path": str(path)}) from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object", context={"path": str(path)})
    return data


def ensure_requirement(package: RootPackage, name: str, constraint: str) -> bool:
    """Add ``name: constraint`` to the package requirements unless already present.

    An existing requirement is never overwritten.

    Returns:
        True if the requirement was added
    """
    requires = dict(package.requires)
    if name in requires:
        return False
    requires[name] = constraint
    package.requires = requires
    logger.debug("Injected requirement %s: %s", name, constraint)
    return True


__all__ = [
    "MANIFEST_FILENAME",
    "RootPackage",
    "read_manifest",
    "ensure_requirement",
]
