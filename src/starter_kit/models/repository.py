"""Composer repository descriptor models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class RepositoryDescriptor(BaseModel):
    """A repository the locator found for a dependency.

    Only `vcs` descriptors are produced. Entries already in composer.json are
    never parsed into this model; the reconciler keeps them as raw dicts.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate url is non-empty."""
        if not v.strip():
            msg = "repository url cannot be empty"
            raise ValueError(msg)
        return v

    @staticmethod
    def vcs(url: str) -> "RepositoryDescriptor":
        """Create a version-control repository descriptor."""
        return RepositoryDescriptor(type="vcs", url=url)

    def identity(self) -> tuple[str, str]:
        """Key used to detect duplicate repositories."""
        return (self.type, self.url)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a composer.json `repositories` entry."""
        return {"type": self.type, "url": self.url}
