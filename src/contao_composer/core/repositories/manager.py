"""Host-owned repository set."""
from __future__ import annotations

import logging

from contao_composer.core.repositories.models import Repository

logger = logging.getLogger(__name__)


class RepositoryManager:
    """Ordered collection of repositories.

    Repositories are only ever appended; existing entries keep their order.
    """

    def __init__(self, repositories: list[Repository] | None = None) -> None:
        self._repositories: list[Repository] = list(repositories or [])

    def add_repository(self, repository: Repository) -> None:
        logger.debug("Adding %s repository %s", repository.type, repository.url)
        self._repositories.append(repository)

    @property
    def repositories(self) -> tuple[Repository, ...]:
        return tuple(self._repositories)

    def __len__(self) -> int:
        return len(self._repositories)


__all__ = ["RepositoryManager"]
