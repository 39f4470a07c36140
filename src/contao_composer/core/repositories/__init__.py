"""Package repositories contributed by the plugin.

Key components:
- ArtifactRepository / ComposerRepository: repository descriptors
- RepositoryManager: host-owned, append-only repository set
- register_*: registration of the local artifact and remote legacy repositories
"""
from __future__ import annotations

from contao_composer.core.repositories.manager import RepositoryManager
from contao_composer.core.repositories.models import (
    ArtifactRepository,
    ComposerRepository,
    Repository,
)
from contao_composer.core.repositories.registrar import (
    register_artifact_repository_if_present,
    register_legacy_repository,
)

__all__ = [
    "ArtifactRepository",
    "ComposerRepository",
    "Repository",
    "RepositoryManager",
    "register_artifact_repository_if_present",
    "register_legacy_repository",
]
