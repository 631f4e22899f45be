from nomadpack.docgen import strip_ansi
from nomadpack.grouped_help import (
    COMMON_COMMANDS,
    grouped_help,
    help_commands_section,
    normalize_args,
)


def test_normalize_args_turns_v_into_version():
    assert normalize_args(["nomad-pack", "-v"]) == ["nomad-pack", "--version"]


def test_normalize_args_leaves_other_uses_of_v():
    args = ["nomad-pack", "plan", "-v"]
    assert normalize_args(args) == args


def test_normalize_args_does_not_mutate_input():
    args = ["nomad-pack", "-v"]
    normalize_args(args)
    assert args == ["nomad-pack", "-v"]


def test_section_aligns_synopses():
    synopses = {"run": "Run it", "registry add": "Add it"}
    text = strip_ansi(help_commands_section("Header", ["run", "registry add"], synopses))
    lines = text.split("\n")
    assert lines[0] == "Header"
    offsets = {line.index(synopses[line.split()[0] if "registry" not in line else "registry add"]) for line in lines[1:]}
    assert len(offsets) == 1


def test_section_skips_unknown_commands():
    text = strip_ansi(help_commands_section("H", ["run", "missing"], {"run": "Run it"}))
    assert "missing" not in text
    assert text.count("\n") == 1


def test_section_indents_rows():
    text = strip_ansi(help_commands_section("H", ["run"], {"run": "Run it"}))
    assert text.split("\n")[1].startswith("  run")
    assert text.split("\n")[1].endswith("Run it")


def test_grouped_help_orders_common_then_sorted_others():
    synopses = {name: f"about {name}" for name in [*COMMON_COMMANDS, "zeta", "alpha"]}
    text = strip_ansi(grouped_help(synopses, "1.2.3"))
    common_at = text.index("Common commands")
    other_at = text.index("Other commands")
    assert common_at < other_at
    positions = [text.index(f"about {name}") for name in COMMON_COMMANDS]
    assert positions == sorted(positions)
    assert other_at < text.index("about alpha") < text.index("about zeta")


def test_grouped_help_header_and_version():
    text = strip_ansi(grouped_help({}, "1.2.3"))
    assert text.startswith("Welcome to Nomad Pack\n")
    assert "Version: 1.2.3" in text
    assert "Usage: nomad-pack [--version] [--help]" in text


def test_grouped_help_default_synopses_include_run():
    text = strip_ansi(grouped_help(None, "0"))
    assert "Run a new pack or update an existing pack" in text
    assert "Vendor dependencies for a pack." in text