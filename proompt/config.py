"""Application configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_EDITOR = "nano"
DEFAULT_PICKER = "fzf"


@dataclass(frozen=True)
class Config:
    """Commands used to edit files and to pick prompts."""

    editor: str
    picker: str


def get_env(key: str, default: str) -> str:
    """Return the environment variable ``key``, or ``default`` when unset or empty."""
    return os.environ.get(key) or default


def load() -> Config:
    """Build a configuration from ``EDITOR`` and ``PROOMPT_PICKER``."""
    return Config(
        editor=get_env("EDITOR", DEFAULT_EDITOR),
        picker=get_env("PROOMPT_PICKER", DEFAULT_PICKER),
    )