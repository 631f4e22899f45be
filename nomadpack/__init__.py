"""Building blocks for a command-line tool that manages packs of Nomad jobs."""

__version__ = "0.1.0"

__all__ = [
    "args",
    "deployed",
    "docgen",
    "formatters",
    "grouped_help",
    "helptext",
    "renders",
]