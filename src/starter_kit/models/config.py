"""Starter kit descriptor model (starter-kit.yaml)."""

from pathlib import PurePosixPath
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)


class KitConfig(BaseModel):
    """Parsed contents of a kit's starter-kit.yaml.

    export_paths are relative to the kit root and are copied in the order
    they are declared. dependencies and dependencies_dev map a composer
    package name to a version constraint.
    """

    model_config = ConfigDict(frozen=True)

    export_paths: list[str] = Field(default_factory=list)
    export_as: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dependencies_dev: dict[str, str] = Field(default_factory=dict)

    @field_validator("export_paths", "export_as", "dependencies", "dependencies_dev", mode="before")
    @classmethod
    def empty_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat a key present with no value (`dependencies:`) as empty."""
        if v is None:
            return [] if info.field_name == "export_paths" else {}
        return v

    @field_validator("dependencies", "dependencies_dev", mode="before")
    @classmethod
    def stringify_constraints(cls, v: Any) -> Any:
        """YAML reads `1.0` as a float; constraints are always strings."""
        if not isinstance(v, dict):
            return v
        return {
            name: str(constraint) if isinstance(constraint, int | float) else constraint
            for name, constraint in v.items()
        }

    @field_validator("export_paths")
    @classmethod
    def validate_export_paths(cls, v: list[str]) -> list[str]:
        """Export paths must be non-empty and unique."""
        seen: set[str] = set()
        for path in v:
            if not path.strip():
                msg = "export_paths cannot contain empty paths"
                raise ValueError(msg)
            if path in seen:
                msg = f"export path [{path}] is declared more than once"
                raise ValueError(msg)
            seen.add(path)
        return v

    @model_validator(mode="after")
    def validate_export_as(self) -> "KitConfig":
        """Every renamed export must also be declared in export_paths."""
        for source, destination in self.export_as.items():
            if source not in self.export_paths:
                msg = f"export_as entry [{source}] is not listed in export_paths"
                raise ValueError(msg)
            if not is_relative_inside(destination):
                msg = f"export_as destination [{destination}] must stay inside the project"
                raise ValueError(msg)
        return self

    def destination_for(self, export_path: str) -> str:
        """Relative destination path for a declared export path."""
        if export_path in self.export_as:
            return self.export_as[export_path]
        return export_path

    def all_dependencies(self) -> list[tuple[str, str, bool]]:
        """Regular then dev dependencies as (package, constraint, dev) in declaration order."""
        regular = [(name, constraint, False) for name, constraint in self.dependencies.items()]
        dev = [(name, constraint, True) for name, constraint in self.dependencies_dev.items()]
        return regular + dev


def is_relative_inside(path: str) -> bool:
    """Check that a kit-relative path is non-empty, relative and has no `..` parts."""
    pure = PurePosixPath(path)
    if not path.strip() or pure.is_absolute():
        return False
    return ".." not in pure.parts
