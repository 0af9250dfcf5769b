import os
import sys

import pytest

from proompt.filesystem import FakeFilesystem, FileInfo, RealFilesystem


@pytest.fixture
def fake():
    fs = FakeFilesystem()
    fs.write_file("test.txt", b"hello world", 0o644)
    fs.write_file("dir/file.txt", b"nested file", 0o644)
    return fs


def test_fake_read_file(fake):
    assert fake.read_file("test.txt") == b"hello world"


def test_fake_read_missing_file(fake):
    with pytest.raises(FileNotFoundError):
        fake.read_file("nonexistent.txt")


def test_fake_stat_file(fake):
    info = fake.stat("test.txt")
    assert info.name == "test.txt"
    assert info.mode == 0o644
    assert info.is_dir is False
    assert info.size == 11


def test_fake_stat_implicit_directory(fake):
    info = fake.stat("dir")
    assert info.is_dir is True
    assert info.name == "dir"


def test_fake_stat_missing(fake):
    with pytest.raises(FileNotFoundError):
        fake.stat("missing")


def test_fake_list_dir(fake):
    fake.write_file("dir/sub/deep.md", b"x")
    names = [(info.name, info.is_dir) for info in fake.list_dir("dir")]
    assert names == [("file.txt", False), ("sub", True)]


def test_fake_list_root(fake):
    assert [info.name for info in fake.list_dir(".")] == ["dir", "test.txt"]


def test_fake_list_missing_dir(fake):
    with pytest.raises(FileNotFoundError):
        fake.list_dir("nowhere")


def test_fake_list_file_is_not_dir(fake):
    with pytest.raises(NotADirectoryError):
        fake.list_dir("test.txt")


def test_fake_write_then_read():
    fs = FakeFilesystem()
    fs.write_file("test.txt", b"test content", 0o644)
    assert fs.read_file("test.txt") == b"test content"


def test_fake_write_accepts_text():
    fs = FakeFilesystem()
    fs.write_file("note.md", "héllo")
    assert fs.read_file("note.md") == "héllo".encode("utf-8")


def test_fake_make_dirs_leaves_files_unchanged():
    fs = FakeFilesystem()
    fs.make_dirs("path/to/dir", 0o755)
    assert fs.files == {}


def test_fake_remove_existing():
    fs = FakeFilesystem()
    fs.write_file("to_remove.txt", b"content", 0o644)
    assert fs.read_file("to_remove.txt") == b"content"
    fs.remove("to_remove.txt")
    with pytest.raises(FileNotFoundError):
        fs.read_file("to_remove.txt")


def test_fake_remove_missing():
    with pytest.raises(FileNotFoundError):
        FakeFilesystem().remove("nonexistent.txt")


def test_fake_temp_file():
    fs = FakeFilesystem()
    path = fs.temp_file("", "temp-*.txt")
    assert path == "/tmp/temp-123456.txt"
    assert fs.read_file(path) == b""
    assert fs.stat(path).mode == 0o600


def test_fake_default_cwd_and_config():
    fs = FakeFilesystem()
    assert fs.getcwd() == "/"
    assert fs.user_config_dir() == "/home/user/.config"


def test_fake_changed_cwd_and_config():
    fs = FakeFilesystem()
    fs.cwd = "/custom/path"
    fs.config_dir = "/custom/config"
    assert fs.getcwd() == "/custom/path"
    assert fs.user_config_dir() == "/custom/config"


def test_real_write_read_relative_to_root(tmp_path):
    fs = RealFilesystem(str(tmp_path))
    fs.make_dirs("prompts")
    fs.write_file("prompts/a.md", b"alpha")
    assert (tmp_path / "prompts" / "a.md").read_bytes() == b"alpha"
    assert fs.read_file("prompts/a.md") == b"alpha"
    assert fs.read_file(str(tmp_path / "prompts" / "a.md")) == b"alpha"


def test_real_stat(tmp_path):
    fs = RealFilesystem(str(tmp_path))
    fs.make_dirs("prompts")
    fs.write_file("prompts/a.md", b"alpha", 0o600)
    assert fs.stat("prompts") == FileInfo(name="prompts", size=fs.stat("prompts").size, mode=fs.stat("prompts").mode, is_dir=True)
    info = fs.stat("prompts/a.md")
    assert (info.name, info.size, info.is_dir) == ("a.md", 5, False)
    assert info.mode & 0o077 == 0


def test_real_list_dir_sorted(tmp_path):
    fs = RealFilesystem(str(tmp_path))
    fs.write_file("b.txt", b"b")
    fs.write_file("a.md", b"a")
    fs.make_dirs("sub")
    listing = [(info.name, info.is_dir) for info in fs.list_dir(".")]
    assert listing == [("a.md", False), ("b.txt", False), ("sub", True)]


def test_real_remove(tmp_path):
    fs = RealFilesystem(str(tmp_path))
    fs.write_file("gone.md", b"x")
    fs.remove("gone.md")
    assert not (tmp_path / "gone.md").exists()
    with pytest.raises(FileNotFoundError):
        fs.remove("gone.md")


def test_real_temp_file(tmp_path):
    fs = RealFilesystem(str(tmp_path))
    path = fs.temp_file(str(tmp_path), "proompt-*.md")
    name = os.path.basename(path)
    assert name.startswith("proompt-")
    assert name.endswith(".md")
    assert fs.read_file(path) == b""


def test_real_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RealFilesystem(str(tmp_path)).read_file("missing.md")


def test_real_user_config_dir_xdg(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg/config")
    assert RealFilesystem("/").user_config_dir() == "/xdg/config"


def test_real_user_config_dir_home(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", "/home/someone")
    assert RealFilesystem("/").user_config_dir() == "/home/someone/.config"


def test_real_user_config_dir_relative_xdg(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/config")
    with pytest.raises(OSError, match="relative"):
        RealFilesystem("/").user_config_dir()


def test_real_user_config_dir_undefined(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(OSError, match="neither"):
        RealFilesystem("/").user_config_dir()