"""Listing, reading, creating and deleting prompts across all levels."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol

from .filesystem import Filesystem
from .picker import PickerItem
from .resolver import LocationResolver

_PROMPT_EXTENSIONS = (".md", ".txt")


class PromptNotFoundError(LookupError):
    """Raised when no prompt has the requested name."""

    def __init__(self, name: str = "") -> None:
        super().__init__("prompt not found")
        self.name = name


class InvalidLocationError(ValueError):
    """Raised when a prompt is to be created at an unknown or missing level."""

    def __init__(self, location: str = "") -> None:
        super().__init__("invalid location")
        self.location = location


@dataclass(frozen=True)
class PromptInfo:
    """A prompt's name, text, level and file path."""

    name: str
    content: str
    source: str
    path: str


class Manager(Protocol):
    """Manages prompts."""

    def list_prompts(self) -> list[PromptInfo]: ...

    def get(self, name: str) -> PromptInfo: ...

    def create(self, name: str, content: str, location: str) -> None: ...

    def delete(self, name: str) -> None: ...

    def picker_items(self) -> list[PickerItem]: ...


def _extension(filename: str) -> str:
    """The suffix from the last dot of the final path element, or an empty string."""
    base = filename.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def is_prompt_file(filename: str) -> bool:
    """Whether the file has a ``.md`` or ``.txt`` extension, in any case."""
    return _extension(filename).lower() in _PROMPT_EXTENSIONS


def remove_extension(filename: str) -> str:
    """The filename without its last extension."""
    ext = _extension(filename)
    return filename[: -len(ext)] if ext else filename


class DefaultManager:
    """Prompt management over a filesystem and a location resolver."""

    def __init__(self, filesystem: Filesystem, resolver: LocationResolver) -> None:
        self.filesystem = filesystem
        self.resolver = resolver

    def list_prompts(self) -> list[PromptInfo]:
        """All prompts; a name found at a higher level hides the same name below it."""
        prompts: list[PromptInfo] = []
        seen_paths: set[str] = set()
        seen_names: set[str] = set()

        for location in self.resolver.prompt_paths():
            try:
                entries = self.filesystem.list_dir(location.path)
            except OSError:
                continue
            for entry in entries:
                if entry.is_dir or not is_prompt_file(entry.name):
                    continue
                full_path = f"{location.path}/{entry.name}"
                absolute = os.path.abspath(full_path)
                if absolute in seen_paths:
                    continue
                seen_paths.add(absolute)

                name = remove_extension(entry.name)
                if name in seen_names:
                    continue
                seen_names.add(name)

                try:
                    data = self.filesystem.read_file(full_path)
                except OSError:
                    continue
                prompts.append(
                    PromptInfo(
                        name=name,
                        content=data.decode("utf-8", errors="replace"),
                        source=location.kind,
                        path=full_path,
                    )
                )
        return prompts

    def get(self, name: str) -> PromptInfo:
        """The highest-precedence prompt with this name."""
        for prompt in self.list_prompts():
            if prompt.name == name:
                return prompt
        raise PromptNotFoundError(name)

    def create(self, name: str, content: str, location: str) -> None:
        """Write ``<name>.md`` into the directory of the given level."""
        target = next(
            (loc.path for loc in self.resolver.prompt_paths() if loc.kind == location), ""
        )
        if not target:
            raise InvalidLocationError(location)
        self.filesystem.make_dirs(target, 0o755)
        self.filesystem.write_file(f"{target}/{name}.md", content, 0o644)

    def delete(self, name: str) -> None:
        """Remove the file of the prompt with this name."""
        self.filesystem.remove(self.get(name).path)

    def picker_items(self) -> list[PickerItem]:
        """All prompts as items for a picker."""
        return [PickerItem(name=p.name, source=p.source, path=p.path) for p in self.list_prompts()]