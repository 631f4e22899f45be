"""Rendered templates: ordering, terminal display and writing to disk."""

from __future__ import annotations

import contextlib
import os
import posixpath
import sys
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

_TEMPLATES_SEGMENT = "/templates/"
_TEMPLATE_SUFFIX = ".tpl"
_VARFILE_SUFFIX = ".hcl"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)


@dataclass
class OverwriteConfirmer:
    """Decides whether an existing output file may be overwritten.

    Non-interactive sessions go by ``auto_approved`` alone. Interactive ones
    prompt with y/n, or y/n/a when ``allow_all`` is set; answering "a" approves
    every later file without asking again.
    """

    interactive: bool = True
    auto_approved: bool = False
    allow_all: bool = True
    overwrite_all: bool = False
    ask: Callable[[str], str] = field(default=input, repr=False)
    tell: Callable[[str], None] = field(default=_write_stdout, repr=False)

    def confirm(self, path: str) -> bool:
        """Return True when ``path`` may be overwritten."""
        if not self.interactive:
            return self.auto_approved
        if self.auto_approved or self.overwrite_all:
            return True

        choices = "[y/n/a]" if self.allow_all else "[y/n]"
        while True:
            answer = self.ask(f'Output file "{path}" exists, overwrite? {choices} ').lower()
            if answer == "a" and self.allow_all:
                self.overwrite_all = True
                return True
            if answer == "y":
                return True
            if answer == "n":
                return False
            self.tell("Please select a valid option.\n")

    def __call__(self, path: str) -> bool:
        return self.confirm(path)


def validate_out_dir(path: str) -> None:
    """Check that ``path`` is a directory or does not exist yet."""
    if path == "":
        return
    try:
        is_dir = os.path.isdir(path) if os.stat(path) else False
    except FileNotFoundError:
        return
    except OSError as err:
        raise OSError(f"unexpected error validating --to-dir path: {err}") from err
    if not is_dir:
        raise NotADirectoryError("--to-dir must be a directory")


def validate_out_file(path: str) -> str:
    """Give ``path`` a single .hcl extension and check it is not a directory."""
    if path == "":
        return ""
    path = path.removesuffix(_VARFILE_SUFFIX) + _VARFILE_SUFFIX
    try:
        is_dir = os.path.isdir(path) if os.stat(path) else False
    except FileNotFoundError:
        return path
    except OSError as err:
        raise OSError(f"unexpected error validating --to-file path: {err}") from err
    if is_dir:
        raise IsADirectoryError("--to-file must be a file")
    return path


def write_file(path: str, content: str, confirm: Callable[[str], bool]) -> None:
    """Write ``content`` to ``path``, asking ``confirm`` first if it exists."""
    if os.path.exists(path) and not confirm(path):
        raise FileExistsError("destination file exists and overwrite is unset")
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as err:
        raise OSError(f"failed to write rendered template to file: {err}") from err


@dataclass(frozen=True)
class Render:
    """One rendered template: its pack-relative name and its content."""

    name: str
    content: str

    def to_terminal(self) -> str:
        """The render as shown on the terminal: name, blank line, content."""
        return f"{self.name}:\n\n{self.content}"

    def to_file(self, out_dir: str, confirm: Callable[[str], bool]) -> str:
        """Write the render below ``out_dir`` and return the file path."""
        root = posixpath.normpath(out_dir)
        validate_out_dir(root)
        directory, filename = posixpath.split(self.name)
        target_dir = posixpath.join(root, directory) if directory else root
        target_dir = posixpath.normpath(target_dir)
        target = posixpath.join(target_dir, filename)
        with contextlib.suppress(OSError):
            os.makedirs(target_dir, exist_ok=True)
        write_file(target, self.content, confirm)
        return target


def range_renders(renders: Mapping[str, str]) -> list[Render]:
    """Order rendered templates by pack key, then by filename.

    Keys are pack-relative paths; the '/templates/' segment and a trailing
    '.tpl' are dropped from the resulting names.
    """
    by_pack: dict[str, dict[str, str]] = {}
    for key, content in renders.items():
        pack_key, _, rest = key.partition(_TEMPLATES_SEGMENT)
        filename = rest.removesuffix(_TEMPLATE_SUFFIX)
        by_pack.setdefault(pack_key, {})[filename] = content

    return [
        Render(name=f"{pack_key}/{filename}", content=by_pack[pack_key][filename])
        for pack_key in sorted(by_pack)
        for filename in sorted(by_pack[pack_key])
    ]


def delete_message(name: str, target: Optional[str] = "", ref: Optional[str] = "") -> str:
    """Message reported after deleting a registry, pack or ref."""
    parts = [f"\nregistry {name}"]
    if target:
        parts.append(f" pack {target}")
    if ref:
        parts.append(f" at ref {ref}")
    parts.append(" deleted")
    return "".join(parts)