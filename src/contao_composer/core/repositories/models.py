"""Repository descriptors registered into the host."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class ArtifactRepository:
    """Local directory of installable package archives.

    Attributes:
        url: Absolute path of the artifact directory
    """

    url: str
    type: ClassVar[str] = "artifact"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "url": self.url}


@dataclass(frozen=True, slots=True)
class ComposerRepository:
    """Remote Composer-style package repository.

    Attributes:
        url: Repository endpoint
    """

    url: str
    type: ClassVar[str] = "composer"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "url": self.url}


Repository = ArtifactRepository | ComposerRepository


__all__ = ["ArtifactRepository", "ComposerRepository", "Repository"]
