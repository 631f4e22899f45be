"""Help text colouring and the static help command."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAGENTA = "\x1b[95m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

_HELP_HEADER = re.compile(r"^[a-zA-Z0-9_-].*:$")
_COMMAND = re.compile(r'"nomad-pack (\w\s?)+"', re.ASCII)
_FLAG = re.compile(r'(\s|^|")(-[\w-]+)(\s|$|"|=)', re.ASCII)

_PREFIXES = ("Usage: ", "Alias: ", "Examples:")


def _highlight(text: str) -> str:
    return f"{_MAGENTA}{text}{_RESET}"


def _bold(text: str) -> str:
    return f"{_BOLD}{text}{_RESET}"


def _highlight_spans(line: str, spans: list[tuple[int, int]]) -> str:
    pieces = []
    position = 0
    for start, end in spans:
        pieces.append(line[position:start])
        pieces.append(_highlight(line[start:end]))
        position = end
    pieces.append(line[position:])
    return "".join(pieces)


def format_help(text: str) -> str:
    """Colourise raw help text: prefixes, headers, quoted commands and flags."""
    rendered = []
    seen_header = False
    for line in text.strip().split("\n"):
        prefix = next((p for p in _PREFIXES if line.startswith(p)), None)
        if prefix is not None:
            rendered.append(_highlight(prefix) + line[len(prefix):])
            continue

        if _HELP_HEADER.match(line):
            seen_header = True
            rendered.append(_bold(line))
            continue

        commands = [(m.start() + 1, m.end() - 1) for m in _COMMAND.finditer(line)]
        if commands:
            rendered.append(_highlight_spans(line, commands))
            continue

        if not seen_header:
            flags = [m.span(2) for m in _FLAG.finditer(line)]
            if flags:
                rendered.append(_highlight_spans(line, flags))
                continue

        rendered.append(line)
    return "\n".join(rendered)


HELP_TEMPLATE = """
Usage: {{.Name}} {{.SubcommandName}} SUBCOMMAND

{{indent 2 (trim .Help)}}{{if gt (len .Subcommands) 0}}

Subcommands:
{{- range $value := .Subcommands }}
    {{ $value.NameAligned }}    {{ $value.Synopsis }}{{ end }}

{{- end }}
"""


HELP_TEXT: dict[str, tuple[str, str]] = {
    "run": (
        "Run one or more Nomad packs",
        """The "run" command is used to install a Nomad Pack to a configured Nomad
\t\tcluster. Nomad Pack will search for packs in local repositories to match
\t\tthe pack name(s) specified in the run command.""",
    ),
    "plan": (
        "Plan invokes a dry-run of the scheduler",
        """The "plan" command invokes a dry-run of the scheduler to determine the
\t\teffects of submitting either a new or updated version of a job. The plan
\t\twill not result in any changes to the cluster but gives insight into
\t\twhether the pack could be run successfully and how it would affect
\t\texisting allocations.""",
    ),
    "stop": (
        "Stop a running pack",
        """The "stop" command stops a running pack. The --purge flag is used to
\t\tstop the pack and purge it from the system. If not set, the job(s) in
\t\tthe pack will still be queryable and will be purged by Nomad's garbage
\t\tcollector. The --global flag will stop a multi-region job in all its
\t\tregions. By default, stop will stop only a single region at a time.
\t\tIgnored for single-region packs. After the deregister command is
\t\tsubmitted, a new evaluation ID is printed to the screen, which can be
\t\tused to examine the evaluation.""",
    ),
    "info": (
        "Info gets information on a pack",
        """The "info" command reads from a pack's metadata.hcl and variables.hcl
\t\tfiles and prints out the details of a pack.""",
    ),
    "destroy": (
        "Delete an existing pack",
        """The "destroy" command stops a running pack and purges it from the system.
\t\tIf the pack is already stopped, destroy will delete it from the cluster.
\t\tThis is the equivalent of using the stop command with the purge option.""",
    ),
    "status": (
        "Status gets information on deployed packs",
        """The "status" command returns information on packs deployed in a Nomad
\t\tcluster. If no pack name is specified, it will return a list of all
\t\tdeployed packs. If pack name is provided, it will return a list of the
\t\tjobs in that pack, along with their status, and the pack deployment they
\t\tbelong to. The --name flag can be used with pack name to limit the list
\t\tof jobs to a specific deployment of the pack.""",
    ),
    "registry add": (
        "Adds a pack registry or a specific pack from a registry",
        """The "registry add" command can be used to add a registry or a specific
\t\tpack from a registry at the latest ref or at a specific ref (tag/SHA).""",
    ),
    "registry delete": (
        "Deletes a pack registry or specific pack from a registry",
        """The "registry delete" command can be used used to delete a registry or
\t\ta specific pack from a registry at the latest ref or at a specific ref
\t\t(tag/SHA).""",
    ),
    "registry list": (
        "Lists all downloaded registries and packs",
        """The "registry list" command lists all registries and associated packs
\t\tthat have been downloaded to the local environment.""",
    ),
}


@dataclass
class HelpCommand:
    """A command that only exists to show help for a group of subcommands."""

    summary: str
    text: str = ""

    def synopsis(self) -> str:
        """The one-line summary, trimmed."""
        return self.summary.strip()

    def help(self) -> str:
        """The formatted help, or the raw summary when no help text is set."""
        if self.text == "":
            return self.summary
        return format_help(self.text)

    def help_template(self) -> str:
        """The formatted subcommand help template."""
        return format_help(HELP_TEMPLATE)