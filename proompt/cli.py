"""The ``proompt`` command line: list, show, edit, rm and pick prompts."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from . import config
from .copier import RealCopier
from .editor import Editor, EditorError, RealEditor
from .filesystem import RealFilesystem
from .manager import (
    DefaultManager,
    InvalidLocationError,
    Manager,
    PromptInfo,
    PromptNotFoundError,
)
from .parser import DefaultParser
from .pick import PickError, run_pick
from .picker import Picker, PickerError, RealPicker
from .resolver import DefaultLocationResolver

DEFAULT_COPY_COMMAND = "pbcopy"
LOCATIONS = ("directory", "project", "project-local", "user")


class CommandError(Exception):
    """Raised when a command cannot do what was asked."""


def list_command(manager: Manager) -> list[PromptInfo]:
    """Print every available prompt with its level and path."""
    try:
        prompts = manager.list_prompts()
    except OSError as exc:
        raise CommandError(f"failed to list prompts: {exc}") from exc

    if not prompts:
        print("No prompts found")
        return prompts

    print(f"Found {len(prompts)} prompt(s):\n")
    for prompt in prompts:
        source = f"({prompt.source})"
        print(f"{prompt.name:<20} {source:<15} {prompt.path}")
    return prompts


def show_command(manager: Manager, name: str) -> PromptInfo:
    """Print a prompt's name, level, path and content."""
    try:
        prompt = manager.get(name)
    except (PromptNotFoundError, OSError) as exc:
        raise CommandError(f"failed to get prompt '{name}': {exc}") from exc

    print(f"Name: {prompt.name}")
    print(f"Source: {prompt.source}")
    print(f"Path: {prompt.path}")
    print(f"\nContent:\n{prompt.content}")
    return prompt


def _pick_name(manager: Manager, picker: Picker, nothing_found: str) -> str:
    try:
        items = manager.picker_items()
    except OSError as exc:
        raise CommandError(f"failed to get prompts for picker: {exc}") from exc
    if not items:
        raise CommandError(nothing_found)
    try:
        return picker.pick(items).name
    except PickerError as exc:
        raise CommandError(f"picker failed: {exc}") from exc


def edit_command(
    manager: Manager,
    picker: Picker,
    editor: Editor,
    name: Optional[str] = None,
    location: Optional[str] = None,
) -> PromptInfo:
    """Open a prompt in the editor, creating it at ``location`` when it is new.

    Without a name the prompt is chosen with the picker.
    """
    prompt: Optional[PromptInfo]
    if name:
        try:
            prompt = manager.get(name)
        except PromptNotFoundError:
            prompt = None
        except OSError as exc:
            raise CommandError(f"failed to get prompt: {exc}") from exc

        if prompt is None and not location:
            raise CommandError(
                f"prompt '{name}' not found. Use a location flag "
                "(--directory, --project, --project-local, --user) to create it"
            )
        if prompt is not None and location:
            raise CommandError(
                f"prompt '{name}' already exists at {prompt.source}. "
                "Cannot specify location flag for existing prompts"
            )
    else:
        if location:
            raise CommandError("cannot use location flags without providing a prompt name")
        name = _pick_name(manager, picker, "no prompts found to edit")
        try:
            prompt = manager.get(name)
        except (PromptNotFoundError, OSError) as exc:
            raise CommandError(f"failed to get selected prompt: {exc}") from exc

    if prompt is None:
        try:
            manager.create(name, "", location or "")
        except (InvalidLocationError, OSError) as exc:
            raise CommandError(f"failed to create prompt: {exc}") from exc
        try:
            prompt = manager.get(name)
        except (PromptNotFoundError, OSError) as exc:
            raise CommandError(f"failed to get newly created prompt: {exc}") from exc

    try:
        editor.edit(prompt.path)
    except EditorError as exc:
        raise CommandError(f"editor failed: {exc}") from exc

    print(f"Edited prompt: {prompt.name} ({prompt.source})")
    return prompt


def rm_command(manager: Manager, picker: Picker, name: Optional[str] = None) -> PromptInfo:
    """Delete a prompt, chosen with the picker when no name is given."""
    if not name:
        name = _pick_name(manager, picker, "no prompts found to remove")

    try:
        prompt = manager.get(name)
    except PromptNotFoundError as exc:
        raise CommandError(f"prompt '{name}' not found") from exc
    except OSError as exc:
        raise CommandError(f"failed to get prompt: {exc}") from exc

    try:
        manager.delete(name)
    except (PromptNotFoundError, OSError) as exc:
        raise CommandError(f"failed to remove prompt: {exc}") from exc

    print(f"Removed prompt: {prompt.name} ({prompt.source})")
    return prompt


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proompt",
        description=(
            "Proompt is a CLI tool that helps you manage and use prompts "
            "with placeholder substitution."
        ),
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser(
        "list",
        help="List all available prompts",
        description=(
            "List all available prompts from all configured locations "
            "(directory, project, project-local, user)"
        ),
    )

    show = commands.add_parser(
        "show", help="Show a specific prompt", description="Show the content of a specific prompt by name"
    )
    show.add_argument("name")

    edit = commands.add_parser(
        "edit",
        help="Edit a prompt",
        description=(
            "Edit a prompt. If no name is provided, a picker will be used to select one. "
            "Use location flags to create new prompts at specific levels."
        ),
    )
    edit.add_argument("name", nargs="?")
    edit.add_argument("--directory", action="store_true",
                      help="Create prompt in directory level (./prompts/)")
    edit.add_argument("--project", action="store_true",
                      help="Create prompt in project level (project root/prompts/)")
    edit.add_argument("--project-local", action="store_true",
                      help="Create prompt in project-local level (.git/info/prompts/)")
    edit.add_argument("--user", action="store_true",
                      help="Create prompt in user level (config directory)")

    rm = commands.add_parser(
        "rm",
        help="Remove a prompt",
        description="Remove a prompt. If no name is provided, a picker will be used to select one.",
    )
    rm.add_argument("name", nargs="?")

    commands.add_parser(
        "pick",
        help="Pick and process a prompt",
        description="Select a prompt, fill in placeholders, and output the final result.",
    )
    return parser


def _chosen_location(args: argparse.Namespace) -> Optional[str]:
    chosen = [loc for loc in LOCATIONS if getattr(args, loc.replace("-", "_"))]
    if len(chosen) > 1:
        raise CommandError("only one location flag can be specified")
    return chosen[0] if chosen else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    cfg = config.load()
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"Failed to get current directory: {exc}", file=sys.stderr)
        return 1

    filesystem = RealFilesystem(cwd)
    manager = DefaultManager(filesystem, DefaultLocationResolver(filesystem))
    picker = RealPicker(cfg.picker)
    editor = RealEditor(cfg.editor)

    try:
        if args.command == "list":
            list_command(manager)
        elif args.command == "show":
            show_command(manager, args.name)
        elif args.command == "edit":
            edit_command(manager, picker, editor, args.name, _chosen_location(args))
        elif args.command == "rm":
            rm_command(manager, picker, args.name)
        elif args.command == "pick":
            copier = RealCopier(os.environ.get("PROOMPT_COPY_COMMAND") or DEFAULT_COPY_COMMAND)
            run_pick(manager, picker, editor, DefaultParser(), filesystem, copier)
    except (CommandError, PickError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0