"""Filesystem access, on disk or in memory."""

from __future__ import annotations

import errno
import os
import stat as stat_module
import sys
import tempfile
from dataclasses import dataclass
from typing import Optional, Protocol, Union

Data = Union[bytes, str]


@dataclass(frozen=True)
class FileInfo:
    """Name, size, permission bits and kind of a filesystem entry."""

    name: str
    size: int
    mode: int
    is_dir: bool


class Filesystem(Protocol):
    """Read and write operations used by the prompt manager."""

    def stat(self, path: str) -> FileInfo: ...

    def read_file(self, path: str) -> bytes: ...

    def list_dir(self, path: str) -> list[FileInfo]: ...

    def write_file(self, path: str, data: Data, mode: int = 0o644) -> None: ...

    def make_dirs(self, path: str, mode: int = 0o755) -> None: ...

    def remove(self, path: str) -> None: ...

    def temp_file(self, directory: str = "", pattern: str = "") -> str: ...

    def getcwd(self) -> str: ...

    def user_config_dir(self) -> str: ...


def _as_bytes(data: Data) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


class RealFilesystem:
    """The operating system's filesystem; relative paths resolve against ``root``."""

    def __init__(self, root: Optional[str] = None) -> None:
        self.root = root if root is not None else os.getcwd()

    def _resolve(self, path: str) -> str:
        return path if os.path.isabs(path) else os.path.join(self.root, path)

    def stat(self, path: str) -> FileInfo:
        st = os.stat(self._resolve(path))
        return FileInfo(
            name=os.path.basename(os.path.normpath(path)),
            size=st.st_size,
            mode=stat_module.S_IMODE(st.st_mode),
            is_dir=stat_module.S_ISDIR(st.st_mode),
        )

    def read_file(self, path: str) -> bytes:
        with open(self._resolve(path), "rb") as handle:
            return handle.read()

    def list_dir(self, path: str) -> list[FileInfo]:
        """Entries of a directory, sorted by name."""
        with os.scandir(self._resolve(path)) as entries:
            infos = [
                FileInfo(
                    name=entry.name,
                    size=entry.stat(follow_symlinks=False).st_size,
                    mode=stat_module.S_IMODE(entry.stat(follow_symlinks=False).st_mode),
                    is_dir=entry.is_dir(follow_symlinks=False),
                )
                for entry in entries
            ]
        return sorted(infos, key=lambda info: info.name)

    def write_file(self, path: str, data: Data, mode: int = 0o644) -> None:
        fd = os.open(self._resolve(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as handle:
            handle.write(_as_bytes(data))

    def make_dirs(self, path: str, mode: int = 0o755) -> None:
        os.makedirs(self._resolve(path), mode=mode, exist_ok=True)

    def remove(self, path: str) -> None:
        target = self._resolve(path)
        if os.path.isdir(target) and not os.path.islink(target):
            os.rmdir(target)
        else:
            os.remove(target)

    def temp_file(self, directory: str = "", pattern: str = "") -> str:
        """Create an empty temporary file and return its path.

        The last ``*`` in ``pattern`` is replaced by a random string.
        """
        prefix, star, suffix = pattern.rpartition("*")
        if not star:
            prefix, suffix = pattern, ""
        fd, path = tempfile.mkstemp(
            prefix=prefix, suffix=suffix, dir=self._resolve(directory) if directory else None
        )
        os.close(fd)
        return path

    def getcwd(self) -> str:
        return os.getcwd()

    def user_config_dir(self) -> str:
        """The per-user configuration directory of the platform."""
        if sys.platform == "win32":
            appdata = os.environ.get("APPDATA")
            if not appdata:
                raise OSError("%AppData% is not defined")
            return appdata
        if sys.platform == "darwin":
            home = os.environ.get("HOME")
            if not home:
                raise OSError("$HOME is not defined")
            return home + "/Library/Application Support"
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            if not os.path.isabs(xdg):
                raise OSError("path in $XDG_CONFIG_HOME is relative")
            return xdg
        home = os.environ.get("HOME")
        if not home:
            raise OSError("neither $XDG_CONFIG_HOME nor $HOME are defined")
        return home + "/.config"


class FakeFilesystem:
    """An in-memory filesystem keyed by slash-separated paths.

    Directories exist wherever a stored path lies below them, and wherever
    ``make_dirs`` has created them.
    """

    def __init__(self, cwd: str = "/", config_dir: str = "/home/user/.config") -> None:
        self.files: dict[str, bytes] = {}
        self.cwd = cwd
        self.config_dir = config_dir
        self.temp_dir = "/tmp"
        self._modes: dict[str, int] = {}
        self._dirs: dict[str, int] = {}

    def _is_dir(self, path: str) -> bool:
        if path in ("", "."):
            return True
        trimmed = path.rstrip("/") or "/"
        if trimmed in self._dirs:
            return True
        prefix = trimmed.rstrip("/") + "/"
        return any(key.startswith(prefix) for key in self.files) or any(
            key.startswith(prefix) for key in self._dirs
        )

    def stat(self, path: str) -> FileInfo:
        name = path.rstrip("/").rsplit("/", 1)[-1] or path
        if path in self.files:
            return FileInfo(
                name=name,
                size=len(self.files[path]),
                mode=self._modes.get(path, 0o644),
                is_dir=False,
            )
        if self._is_dir(path):
            mode = self._dirs.get(path.rstrip("/") or "/", 0o555)
            return FileInfo(name=name, size=0, mode=mode, is_dir=True)
        raise _not_found(path)

    def read_file(self, path: str) -> bytes:
        if path in self.files:
            return self.files[path]
        if self._is_dir(path):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        raise _not_found(path)

    def list_dir(self, path: str) -> list[FileInfo]:
        """Immediate children of a directory, sorted by name."""
        if path in self.files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        if not self._is_dir(path):
            raise _not_found(path)
        prefix = "" if path in ("", ".") else path.rstrip("/") + "/"
        entries: dict[str, FileInfo] = {}
        for key in self._dirs:
            if not key.startswith(prefix):
                continue
            head = key[len(prefix):].partition("/")[0]
            if head:
                mode = self._dirs.get(prefix + head, 0o555)
                entries[head] = FileInfo(name=head, size=0, mode=mode, is_dir=True)
        for key, data in self.files.items():
            if not key.startswith(prefix):
                continue
            head, sep, _ = key[len(prefix):].partition("/")
            if not head:
                continue
            if sep:
                entries.setdefault(head, FileInfo(name=head, size=0, mode=0o555, is_dir=True))
            else:
                entries.setdefault(
                    head,
                    FileInfo(
                        name=head,
                        size=len(data),
                        mode=self._modes.get(key, 0o644),
                        is_dir=False,
                    ),
                )
        return [entries[name] for name in sorted(entries)]

    def write_file(self, path: str, data: Data, mode: int = 0o644) -> None:
        self.files[path] = _as_bytes(data)
        self._modes[path] = mode

    def make_dirs(self, path: str, mode: int = 0o755) -> None:
        """Record ``path`` and each of its parents as a directory."""
        if path in self.files:
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)
        trimmed = path.rstrip("/")
        if trimmed in ("", "."):
            return
        parts = trimmed.split("/")
        for end in range(1, len(parts) + 1):
            current = "/".join(parts[:end]) or "/"
            if current in ("/", "."):
                continue
            self._dirs.setdefault(current, mode)

    def remove(self, path: str) -> None:
        if path not in self.files:
            raise _not_found(path)
        del self.files[path]
        self._modes.pop(path, None)

    def temp_file(self, directory: str = "", pattern: str = "") -> str:
        """Create an empty file with a fixed name and return its path."""
        prefix, star, suffix = pattern.rpartition("*")
        name = prefix + "123456" + suffix if star else pattern + "123456"
        path = f"{(directory or self.temp_dir).rstrip('/')}/{name}"
        self.write_file(path, b"", 0o600)
        return path

    def getcwd(self) -> str:
        return self.cwd

    def user_config_dir(self) -> str:
        return self.config_dir