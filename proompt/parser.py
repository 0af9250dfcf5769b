"""Finding and filling ``${NAME}`` and ``${NAME:-default}`` placeholders."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping, Protocol

_PLACEHOLDER = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")
_LITERAL_DOLLAR = "\x00LITERAL_DOLLAR\x00"


@dataclass(frozen=True)
class Placeholder:
    """A named placeholder and the default value it was written with, if any."""

    name: str
    default_value: str = ""
    has_default: bool = False


class Parser(Protocol):
    """Finds placeholders in a prompt and fills them in."""

    def parse_placeholders(self, content: str) -> list[Placeholder]: ...

    def substitute_placeholders(self, content: str, values: Mapping[str, str]) -> str: ...


class DefaultParser:
    """Shell-style placeholder handling, with ``$$`` standing for a literal ``$``."""

    def parse_placeholders(self, content: str) -> list[Placeholder]:
        """Placeholders in order of first appearance; repeated names are listed once."""
        placeholders: list[Placeholder] = []
        seen: set[str] = set()
        for match in _PLACEHOLDER.finditer(content):
            name, default = match.group(1), match.group(2)
            if name in seen:
                continue
            seen.add(name)
            placeholders.append(
                Placeholder(
                    name=name,
                    default_value=default or "",
                    has_default=default is not None,
                )
            )
        return placeholders

    def substitute_placeholders(self, content: str, values: Mapping[str, str]) -> str:
        """Replace every placeholder by its value, else its default, else nothing."""

        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in values:
                return values[name]
            return match.group(2) or ""

        escaped = content.replace("$$", _LITERAL_DOLLAR)
        return _PLACEHOLDER.sub(replace, escaped).replace(_LITERAL_DOLLAR, "$")


@dataclass
class FakeParser:
    """Returns preset placeholders and substitutes by plain string replacement."""

    placeholders: list[Placeholder] = field(default_factory=list)

    def parse_placeholders(self, content: str) -> list[Placeholder]:
        return self.placeholders

    def substitute_placeholders(self, content: str, values: Mapping[str, str]) -> str:
        result = content
        for key, value in values.items():
            result = result.replace("${" + key + "}", value)
            result = result.replace("${" + key + ":-", value + "}")
        return result