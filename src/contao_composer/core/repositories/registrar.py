"""Registration of the Contao package repositories."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from contao_composer.core.repositories.manager import RepositoryManager
from contao_composer.core.repositories.models import ArtifactRepository, ComposerRepository
from contao_composer.core.settings import PluginSettings, load_settings

logger = logging.getLogger(__name__)


def register_artifact_repository_if_present(
    manager: RepositoryManager,
    root: Path,
    *,
    settings: Optional[PluginSettings] = None,
) -> Optional[ArtifactRepository]:
    """Register ``<root>/composer/packages`` as an artifact repository if it exists.

    Returns:
        The registered repository, or None when the directory is absent
    """
    settings = settings or load_settings()
    path = root / settings.artifact_path
    if not path.is_dir():
        logger.debug("No artifact repository at %s", path)
        return None
    repository = ArtifactRepository(url=str(path))
    manager.add_repository(repository)
    return repository


def register_legacy_repository(
    manager: RepositoryManager,
    *,
    settings: Optional[PluginSettings] = None,
) -> ComposerRepository:
    """Register the remote legacy Contao package repository.

    Always registered; reachability is only checked when packages are resolved.
    """
    settings = settings or load_settings()
    repository = ComposerRepository(url=settings.legacy_repository_url)
    manager.add_repository(repository)
    return repository


__all__ = ["register_artifact_repository_if_present", "register_legacy_repository"]
