"""Opening files in an editor."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol


class EditorError(Exception):
    """Raised when the editor could not be run or failed."""


class Editor(Protocol):
    """Something that lets the user edit a file."""

    def edit(self, path: str) -> None: ...


@dataclass
class RealEditor:
    """Runs an editor command on a file, attached to the terminal."""

    command: str

    def edit(self, path: str) -> None:
        """Open ``path`` in the editor and wait for it to exit."""
        try:
            result = subprocess.run([self.command, path])
        except OSError as exc:
            raise EditorError(f"failed to start editor {self.command!r}: {exc}") from exc
        if result.returncode != 0:
            raise EditorError(f"editor exited with status {result.returncode}")


@dataclass
class FakeEditor:
    """Records which files were edited."""

    edited_files: list[str] = field(default_factory=list)
    write_content: Optional[Callable[[str], bytes]] = None
    should_fail: bool = False

    def edit(self, path: str) -> None:
        """Record ``path`` and call ``write_content`` with it when set."""
        if self.should_fail:
            raise EditorError("editor failed")
        self.edited_files.append(path)
        if self.write_content is not None:
            # The produced content is not written anywhere; callers own the filesystem.
            self.write_content(path)