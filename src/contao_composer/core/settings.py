"""Plugin settings.

Bundled defaults live in ``contao_composer/data/config/defaults.yaml``.
The per-project ``extra.contao`` section of composer.json is validated
against ``data/schemas/contao-extra.schema.yaml`` before it is used.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from jsonschema import Draft202012Validator

from contao_composer.data import read_yaml

LOG_LEVEL_ENV = "CONTAO_COMPOSER_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class PluginSettings:
    """Resolved plugin defaults.

    Attributes:
        requirement_name: Package implicitly required by every root package
        requirement_constraint: Version constraint used for the implicit requirement
        legacy_repository_url: Remote legacy package repository endpoint
        artifact_path: Artifact repository directory, relative to the Contao root
        vendor_core_path: Vendored Contao core, relative to the project directory
        version_threshold: First Contao version that uses ``default.php``
        cache_directories: Subdirectories of ``system/cache`` cleaned after updates
        log_level: Default logging level name
    """

    requirement_name: str
    requirement_constraint: str
    legacy_repository_url: str
    artifact_path: str
    vendor_core_path: str
    version_threshold: str
    cache_directories: tuple[str, ...]
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PluginSettings:
        section = data.get("contao", {}) or {}
        requirement = section.get("requirement", {}) or {}
        repositories = section.get("repositories", {}) or {}
        logging_cfg = section.get("logging", {}) or {}
        return cls(
            requirement_name=str(requirement["name"]),
            requirement_constraint=str(requirement.get("constraint", "*")),
            legacy_repository_url=str(repositories["legacy"]),
            artifact_path=str(repositories.get("artifactPath", "composer/packages")),
            vendor_core_path=str(section.get("vendorCorePath", "vendor/contao/core")),
            version_threshold=str(section.get("versionThreshold", "3")),
            cache_directories=tuple(str(d) for d in section.get("cacheDirectories", ())),
            log_level=str(logging_cfg.get("level", "INFO")).upper(),
        )


@lru_cache(maxsize=1)
def load_settings() -> PluginSettings:
    """Load bundled plugin settings (cached)."""
    return PluginSettings.from_dict(read_yaml("config", "defaults.yaml"))


def effective_log_level(settings: Optional[PluginSettings] = None) -> str:
    """Return the logging level, honouring the environment override."""
    env_level = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if env_level:
        return env_level.upper()
    return (settings or load_settings()).log_level


@lru_cache(maxsize=1)
def _extra_validator() -> Draft202012Validator:
    return Draft202012Validator(read_yaml("schemas", "contao-extra.schema.yaml"))


def validate_contao_extra(extra: Mapping[str, Any]) -> List[str]:
    """Validate the ``extra.contao`` section of a root package.

    Args:
        extra: The full ``extra`` mapping of the root package

    Returns:
        List of human-readable error messages; empty when valid or absent
    """
    section = extra.get("contao") if isinstance(extra, Mapping) else None
    if section is None:
        return []
    errors: List[str] = []
    for err in sorted(_extra_validator().iter_errors(section), key=lambda e: [str(p) for p in e.path]):
        if err.path:
            location = ".".join(str(p) for p in err.path)
            errors.append(f"extra.contao.{location}: {err.message}")
        else:
            errors.append(f"extra.contao: {err.message}")
    return errors


def contao_extra(extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the ``extra.contao`` section, or an empty dict."""
    section = extra.get("contao") if isinstance(extra, Mapping) else None
    return dict(section) if isinstance(section, Mapping) else {}


__all__ = [
    "LOG_LEVEL_ENV",
    "PluginSettings",
    "load_settings",
    "effective_log_level",
    "validate_contao_extra",
    "contao_extra",
]
