"""Markdown/MDX documentation pages generated from command help text."""

from __future__ import annotations

import json
import re
from typing import Iterable, Optional

GEN_DOCS_COMMAND = "gen-cli-docs"

_ANSI = re.compile(
    r"[\x1b\x9b][\[\]()#;?]*"
    r"(?:(?:(?:[a-zA-Z\d]*(?:;[a-zA-Z\d]*)*)?\x07)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PRZcf-ntqry=><~]))",
    re.ASCII,
)
_USAGE = re.compile(r"nomad-pack (?P<cmd>.*)$")
_ALIAS = re.compile(r"Alias: ")
_OPTIONS = re.compile(r" Options:")


def clean_name(name: str) -> str:
    """Turn a command name into a file-name friendly slug."""
    return name.replace(" ", "-")


def strip_ansi(text: str) -> str:
    """Remove terminal colour and control sequences."""
    return _ANSI.sub("", text)


def nav_data(keys: Iterable[str]) -> str:
    """JSON navigation data listing each documented command, sorted by name."""
    entries = [
        "{" + f'"title":{json.dumps(key)},"path":{json.dumps(clean_name(key))}' + "}"
        for key in sorted(keys)
        if key != GEN_DOCS_COMMAND
    ]
    return "[" + ",\n".join(entries) + "\n]"


def _usage_section(name: str, help_text: str) -> str:
    lines = help_text.split("\n")
    usage = lines[0]
    optional_alias = lines[1] if len(lines) > 1 else ""

    match = _USAGE.search(usage)
    if match is None:
        return f"## Usage\n\nUsage: `nomad-pack {name} [options]`\n"

    parts = [f"## Usage\n\nUsage: `nomad-pack {match.group('cmd')}`\n"]

    has_alias = False
    if optional_alias and _ALIAS.search(optional_alias):
        has_alias = True
        alias_match = _USAGE.search(optional_alias)
        if alias_match is not None:
            parts.append(f"\nAlias: `nomad-pack {alias_match.group('cmd')}`\n")

    options_index = next(
        (index for index, line in enumerate(lines) if _OPTIONS.search(line)), 0
    )
    if options_index > 1:
        start = 2 if has_alias else 1
        message = strip_ansi("\n".join(lines[start:options_index])).lstrip(" ")
        parts.append(f"\n{message}")
    return "".join(parts)


def command_doc(
    name: str, synopsis: str, help_text: Optional[str] = None, mode: str = "mdx"
) -> str:
    """The documentation page for one command.

    ``help_text`` is the command's (possibly coloured) help; when it is None the
    page has no usage section. In "mdx" mode the page includes description and
    extra-content partials named after the command.
    """
    if name == GEN_DOCS_COMMAND or not name:
        return ""

    slug = clean_name(name)
    capital = name[0].upper() + name[1:]
    parts = [
        "---\n"
        "layout: commands\n"
        f'page_title: "Commands: {capital}"\n'
        f'sidebar_title: "{name}"\n'
        f'description: "{synopsis}"\n'
        "---\n\n",
        f"# Nomad-Pack {capital}\n\nCommand: `nomad-pack {name}`\n\n{synopsis}\n\n",
    ]
    if mode == "mdx":
        parts.append(f'@include "commands/{slug}_desc.mdx"\n\n')
    if help_text is not None:
        parts.append(_usage_section(name, help_text))
    if mode == "mdx":
        parts.append(f'\n@include "commands/{slug}_more.mdx"\n')
    return "".join(parts)