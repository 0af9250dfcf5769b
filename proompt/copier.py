"""Copying text to the clipboard through an external command."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Protocol


class CopyError(Exception):
    """Raised when content could not be copied."""


class Copier(Protocol):
    """Something that puts text on the clipboard."""

    def copy(self, content: str) -> None: ...


@dataclass
class RealCopier:
    """Pipes content into a shell command such as ``pbcopy``."""

    command: str

    def copy(self, content: str) -> None:
        """Run the copy command with ``content`` on its standard input."""
        if not self.command:
            return
        try:
            result = subprocess.run(["sh", "-c", self.command], input=content, text=True)
        except OSError as exc:
            raise CopyError(f"copy command failed: {exc}") from exc
        if result.returncode != 0:
            raise CopyError(f"copy command failed: exit status {result.returncode}")


@dataclass
class FakeCopier:
    """Records copied content in memory."""

    copied_content: list[str] = field(default_factory=list)
    should_fail: bool = False

    def copy(self, content: str) -> None:
        """Record ``content``, or fail when ``should_fail`` is set."""
        if self.should_fail:
            raise CopyError("copy failed")
        self.copied_content.append(content)

    def last_copied(self) -> str:
        """The most recently copied content, or an empty string."""
        return self.copied_content[-1] if self.copied_content else ""

    def copy_count(self) -> int:
        """How many times content was copied."""
        return len(self.copied_content)