"""Where prompts live: directory, project, project-local and user levels."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .filesystem import Filesystem


@dataclass(frozen=True)
class PromptLocation:
    """A directory holding prompts and the level it belongs to."""

    kind: str
    path: str


class LocationResolver(Protocol):
    """Lists prompt directories in order of precedence."""

    def prompt_paths(self) -> list[PromptLocation]: ...


class DefaultLocationResolver:
    """Resolves the four-level prompt hierarchy against a filesystem."""

    def __init__(self, filesystem: Filesystem) -> None:
        self.filesystem = filesystem

    def _is_dir(self, path: str) -> bool:
        try:
            return self.filesystem.stat(path).is_dir
        except OSError:
            return False

    def _find_project_root(self) -> Optional[str]:
        """Search upward from the working directory for ``.git`` or ``prompts``."""
        try:
            current = self.filesystem.getcwd()
        except OSError:
            return None
        while True:
            if self._is_dir(os.path.join(current, ".git")):
                return current
            if self._is_dir(os.path.join(current, "prompts")):
                return current
            parent = os.path.dirname(current)
            if parent == current:
                return None
            current = parent

    def prompt_paths(self) -> list[PromptLocation]:
        """Existing prompt directories, highest precedence first; the user level always."""
        locations: list[PromptLocation] = []

        if self._is_dir("prompts"):
            locations.append(PromptLocation("directory", "prompts"))

        root = self._find_project_root()
        if root is not None:
            project = os.path.join(root, "prompts")
            if self._is_dir(project):
                locations.append(PromptLocation("project", project))
            project_local = os.path.join(root, ".git", "info", "prompts")
            if self._is_dir(project_local):
                locations.append(PromptLocation("project-local", project_local))

        try:
            config_dir = self.filesystem.user_config_dir()
        except OSError:
            pass
        else:
            locations.append(PromptLocation("user", os.path.join(config_dir, "proompt", "prompts")))

        return locations


@dataclass
class FakeLocationResolver:
    """Returns a preset list of locations."""

    locations: list[PromptLocation] = field(default_factory=list)

    def prompt_paths(self) -> list[PromptLocation]:
        return list(self.locations)