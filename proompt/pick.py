"""Choosing a prompt, filling in its placeholders and emitting the result."""

from __future__ import annotations

import sys
from typing import Iterable

import yaml

from .copier import Copier, CopyError
from .editor import Editor, EditorError
from .filesystem import Filesystem
from .manager import Manager, PromptNotFoundError
from .parser import Parser, Placeholder
from .picker import Picker, PickerError

FRONTMATTER_DELIMITER = "---"


class PickError(Exception):
    """Raised when the pick workflow cannot complete."""


class _FrontmatterDumper(yaml.SafeDumper):
    """Writes multi-line strings as literal blocks so they are easy to edit."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    style = "|" if "\n" in value else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", value, style=style)


_FrontmatterDumper.add_representer(str, _represent_str)


def _warn_copy_failure(exc: Exception) -> None:
    print(f"Warning: failed to copy to clipboard: {exc}", file=sys.stderr)


def _emit(content: str, copier: Copier) -> None:
    sys.stdout.write(content)
    sys.stdout.flush()
    try:
        copier.copy(content)
    except CopyError as exc:
        _warn_copy_failure(exc)


def run_pick(
    manager: Manager,
    picker: Picker,
    editor: Editor,
    parser: Parser,
    filesystem: Filesystem,
    copier: Copier,
) -> str:
    """Let the user pick a prompt and fill it in; print, copy and return the result."""
    try:
        items = manager.picker_items()
    except OSError as exc:
        raise PickError(f"failed to get prompts: {exc}") from exc
    if not items:
        raise PickError("no prompts found")

    try:
        selected = picker.pick(items)
    except PickerError as exc:
        raise PickError(f"failed to pick prompt: {exc}") from exc

    try:
        prompt = manager.get(selected.name)
    except (PromptNotFoundError, OSError) as exc:
        raise PickError(f"failed to get prompt content: {exc}") from exc

    placeholders = parser.parse_placeholders(prompt.content)
    if not placeholders:
        _emit(prompt.content, copier)
        return prompt.content

    temp_content = generate_markdown_placeholder_file(placeholders, prompt.content)
    try:
        temp_path = filesystem.temp_file("", "proompt-*.md")
    except OSError as exc:
        raise PickError(f"failed to create temporary file: {exc}") from exc

    try:
        try:
            filesystem.write_file(temp_path, temp_content, 0o600)
        except OSError as exc:
            raise PickError(f"failed to write to temporary file: {exc}") from exc

        try:
            editor.edit(temp_path)
        except EditorError as exc:
            raise PickError(f"failed to edit file: {exc}") from exc

        try:
            edited = filesystem.read_file(temp_path).decode("utf-8", errors="replace")
        except OSError as exc:
            raise PickError(f"failed to read edited file: {exc}") from exc
    finally:
        try:
            filesystem.remove(temp_path)
        except OSError:
            pass

    try:
        values, template = parse_markdown_edited_values(edited)
    except PickError as exc:
        raise PickError(f"failed to parse edited content: {exc}") from exc

    if not edited.strip():
        raise PickError("operation aborted (empty file)")

    final = parser.substitute_placeholders(template, values)
    _emit(final, copier)
    return final


def generate_placeholder_file(
    placeholders: Iterable[Placeholder], original_content: str
) -> str:
    """Build a ``NAME=value`` editing file followed by a commented preview."""
    lines = [
        "# Edit the values below and save the file",
        "# Lines starting with # are ignored",
        "# Save empty file to abort",
        "",
    ]
    lines.extend(f"{p.name}={p.default_value}" for p in placeholders)
    lines.append("")
    lines.append("### Full prompt preview:")
    lines.extend(f"# {line}" for line in original_content.split("\n"))
    return "\n".join(lines) + "\n"


def parse_edited_values(content: str) -> dict[str, str]:
    """Read ``NAME=value`` lines, skipping blank lines and ``#`` comments."""
    values: dict[str, str] = {}
    for raw in content.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep:
            values[key] = value
    return values


def generate_markdown_placeholder_file(
    placeholders: Iterable[Placeholder], original_content: str
) -> str:
    """Build a Markdown file whose YAML frontmatter holds the placeholder defaults."""
    variables = {p.name: p.default_value for p in placeholders}
    parts = [FRONTMATTER_DELIMITER + "\n"]
    if variables:
        parts.append(
            yaml.dump(
                variables,
                Dumper=_FrontmatterDumper,
                default_flow_style=False,
                sort_keys=True,
                allow_unicode=True,
                width=2**31 - 1,
            )
        )
    parts.append(FRONTMATTER_DELIMITER + "\n")
    parts.append(original_content)
    return "".join(parts)


def parse_markdown_edited_values(content: str) -> tuple[dict[str, str], str]:
    """Split edited Markdown into its frontmatter values and its template text."""
    content = content.strip()
    if not content:
        return {}, ""
    if not content.startswith(FRONTMATTER_DELIMITER + "\n"):
        return {}, content

    lines = content.split("\n")
    end = next(
        (i for i, line in enumerate(lines) if i >= 1 and line == FRONTMATTER_DELIMITER),
        None,
    )
    if end is None:
        raise PickError("unclosed frontmatter delimiter")

    frontmatter = "\n".join(lines[1:end])
    body = "\n".join(lines[end + 1 :])

    values: dict[str, str] = {}
    if frontmatter.strip():
        try:
            loaded = yaml.load(frontmatter, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise PickError(f"invalid YAML frontmatter: {exc}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise PickError("invalid YAML frontmatter: expected a mapping")
        for key, value in loaded.items():
            if not isinstance(value, str):
                raise PickError(
                    f"invalid YAML frontmatter: value of {key!r} is not a string"
                )
            values[str(key)] = value
    return values, body