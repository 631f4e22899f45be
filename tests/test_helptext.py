import re

from nomadpack.helptext import (
    HELP_TEMPLATE,
    HELP_TEXT,
    HelpCommand,
    _bold,
    _highlight,
    format_help,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")

SAMPLE = """
\tUsage: nomad-pack run <pack-name> [options]

\tInstall the pack. Use --name to pick a deployment.
\tSee "nomad-pack status example" for more.

Examples:
\tnomad-pack run example

Run Options:
\t--registry=<string>
"""


def _plain(text):
    return _ANSI.sub("", text)


def test_stripping_styles_gives_trimmed_input():
    assert _plain(format_help(SAMPLE)) == SAMPLE.strip()


def test_line_count_is_preserved():
    out = format_help(SAMPLE)
    assert len(out.split("\n")) == len(SAMPLE.strip().split("\n"))


def test_usage_prefix_highlighted():
    out = format_help("Usage: nomad-pack run")
    assert out == _highlight("Usage: ") + "nomad-pack run"


def test_examples_prefix_highlighted():
    out = format_help("Examples:\n  nomad-pack list")
    assert out.split("\n")[0] == _highlight("Examples:")


def test_header_is_bold():
    out = format_help("intro\nGlobal Options:\n  x")
    assert out.split("\n")[1] == _bold("Global Options:")


def test_quoted_command_highlighted_without_quotes():
    line = 'Run "nomad-pack status example" now'
    out = format_help(line)
    assert _highlight("nomad-pack status example") in out
    assert out.startswith('Run "')
    assert out.endswith('" now')


def test_flag_highlighted_before_header_only():
    out = format_help("Use --purge to stop.\nOptions:\nUse --purge to stop.")
    first, _, last = out.split("\n")
    assert _highlight("--purge") in first
    assert last == "Use --purge to stop."


def test_help_command_synopsis_trims():
    command = HelpCommand("  Manage things  ")
    assert command.synopsis() == "Manage things"


def test_help_command_help_falls_back_to_summary():
    command = HelpCommand(" raw summary ")
    assert command.help() == " raw summary "


def test_help_command_help_formats_text():
    command = HelpCommand("summary", "Usage: nomad-pack registry")
    assert command.help() == format_help("Usage: nomad-pack registry")
    assert command.help().startswith(_highlight("Usage: "))


def test_help_template():
    out = HelpCommand("summary").help_template()
    assert _plain(out) == HELP_TEMPLATE.strip()
    assert out.startswith(_highlight("Usage: "))


def test_help_text_entries_have_synopsis_and_body():
    assert HELP_TEXT["destroy"][0] == "Delete an existing pack"
    for synopsis, body in HELP_TEXT.values():
        assert synopsis
        assert body.startswith('The "')