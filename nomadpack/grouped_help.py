"""Top-level help listing the available commands in groups."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

ENV_LOG_LEVEL = "NOMAD_PACK_LOG_LEVEL"
ENV_PLAIN = "NOMAD_PACK_PLAIN"

CLI_NAME = "nomad-pack"

COMMON_COMMANDS: tuple[str, ...] = (
    "plan",
    "render",
    "run",
    "destroy",
    "info",
    "status",
    "registry add",
    "registry delete",
    "registry list",
)

HIDDEN_COMMANDS: frozenset[str] = frozenset()

COMMAND_SYNOPSES: dict[str, str] = {
    "render": "Render the templates within a pack",
    "run": "Run a new pack or update an existing pack",
    "plan": "Dry-run a pack update to determine its effects",
    "info": "Get information on a pack",
    "list": "List packs available in the local environment.",
    "destroy": "Delete an existing pack",
    "status": "Get information on deployed packs",
    "registry": "Add, delete, or list registries and packs in the local environment.",
    "registry add": "Add registries or packs to the local environment.",
    "registry delete": "Delete registries or packs from the local environment.",
    "registry list": "List registries configured in the local environment.",
    "generate": "Generate a sample nomad-pack registry, pack, or variable overrides file for a pack.",
    "generate pack": "Generate a new pack.",
    "generate registry": "Generate a new registry.",
    "generate var-file": "Generate a variable override file for a pack",
    "deps": "Manage dependencies for pack.",
    "deps vendor": "Vendor dependencies for a pack.",
}

_BOLD = "\x1b[1m"
_LIGHT_MAGENTA = "\x1b[95m"
_LIGHT_BLUE = "\x1b[94m"
_GREEN = "\x1b[32m"
_RESET = "\x1b[0m"

_COLUMN_PADDING = 6
_INDENT = "  "


def _style(text: str, code: str) -> str:
    return f"{code}{text}{_RESET}"


def normalize_args(args: Sequence[str]) -> list[str]:
    """Treat a lone '-v' as '--version'; anything else is returned unchanged."""
    result = list(args)
    if len(result) == 2 and result[1] == "-v":
        result[1] = "--version"
    return result


def help_commands_section(
    header: str, commands: Iterable[str], synopses: Mapping[str, str]
) -> str:
    """A bold header followed by aligned 'command  synopsis' rows.

    Commands without a synopsis are left out.
    """
    rows = [(name, synopses[name]) for name in commands if name in synopses]
    lines = [_style(header, _BOLD)]
    if rows:
        width = max(len(name) for name, _ in rows) + _COLUMN_PADDING
        lines.extend(f"{_INDENT}{name.ljust(width)}{synopsis}" for name, synopsis in rows)
    return "\n".join(lines)


def grouped_help(synopses: Optional[Mapping[str, str]], version: str) -> str:
    """The top-level help: header, usage, then common and other commands."""
    commands = COMMAND_SYNOPSES if synopses is None else synopses

    ignored = set(HIDDEN_COMMANDS) | set(COMMON_COMMANDS)
    others = sorted(name for name in commands if name not in ignored)

    lines = [
        _style("Welcome to Nomad Pack", _BOLD),
        _style("Docs:", _LIGHT_BLUE) + " ",
        _style("Version:", _GREEN) + " " + version,
        "",
        _style("Usage:", _LIGHT_MAGENTA)
        + f" {CLI_NAME} [--version] [--help] [--autocomplete-(un)install] <command> [args]",
        "",
        help_commands_section("Common commands", COMMON_COMMANDS, commands),
        help_commands_section("Other commands", others, commands),
    ]
    return "\n".join(lines) + "\n"