"""Choosing one prompt out of many."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Protocol, Sequence


class PickerError(Exception):
    """Raised when no item could be picked."""


@dataclass(frozen=True)
class PickerItem:
    """A selectable prompt: its name, source level and file path."""

    name: str
    source: str
    path: str


class Picker(Protocol):
    """Something that lets the user choose one item."""

    def pick(self, items: Sequence[PickerItem]) -> PickerItem: ...


def _label(item: PickerItem) -> str:
    return f"{item.name} ({item.source})"


@dataclass
class RealPicker:
    """Feeds item labels to a shell command such as ``fzf`` and reads the choice back."""

    command: str

    def pick(self, items: Sequence[PickerItem]) -> PickerItem:
        """Run the picker command and return the item matching its output."""
        if not items:
            raise PickerError("no items to pick from")
        lines = "".join(f"{_label(item)}\n" for item in items)
        try:
            result = subprocess.run(
                ["sh", "-c", self.command], input=lines, stdout=subprocess.PIPE, text=True
            )
        except OSError as exc:
            raise PickerError(f"picker command failed: {exc}") from exc
        if result.returncode != 0:
            raise PickerError(f"picker command failed: exit status {result.returncode}")
        selected = result.stdout.strip()
        if not selected:
            raise PickerError("no selection made")
        for item in items:
            if _label(item) == selected:
                return item
        raise PickerError(f"selected item not found: {selected}")


@dataclass
class FakePicker:
    """Picks the item at ``selected_index`` and records every selection."""

    selected_index: int = 0
    selections: list[PickerItem] = field(default_factory=list)
    should_fail: bool = False

    def pick(self, items: Sequence[PickerItem]) -> PickerItem:
        if self.should_fail:
            raise PickerError("picker failed")
        if not items:
            raise PickerError("no items to pick from")
        if not 0 <= self.selected_index < len(items):
            raise PickerError(f"invalid selection index: {self.selected_index}")
        selected = items[self.selected_index]
        self.selections.append(selected)
        return selected