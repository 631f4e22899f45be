# nomadpack

Building blocks for a command-line tool that renders, plans, runs and
inspects packs of Nomad jobs. The package is a library of the pieces such a
tool is made of, and has no dependencies outside the standard library.

## Modules

| Module | Purpose |
| --- | --- |
| `nomadpack.args` | Positional-argument validators (`no_args`, `minimum_n_args`, `maximum_n_args`, `exact_args`) raising `ArgumentError`, and option functions (`with_exact_args`, `with_no_config`, `with_client`, ...) that `apply_options` folds into a `BaseConfig`. |
| `nomadpack.formatters` | `format_list` (column alignment, blanks shown as `<none>`), `format_time` (ISO 8601), `format_time_difference` (truncated durations such as `6s`) and `format_sha1_reference` (short SHA-1 refs). |
| `nomadpack.helptext` | `format_help`, which colours usage lines, headers, quoted commands and flags in help text; `HelpCommand`; the built-in `HELP_TEXT` table. |
| `nomadpack.deployed` | Finding deployed packs and their jobs through a `JobsClient` (`get_deployed_packs`, `get_pack_jobs_by_deploy`, `get_deployed_pack_jobs`), `validate_status_args`, `registry_name`, and the status tables built by `format_deployed_packs`, `format_deployed_pack_jobs` and `format_deployed_pack_errors`. |
| `nomadpack.renders` | `range_renders` orders rendered templates by pack and file name; `Render` shows them or writes them to disk; `write_file` asks an `OverwriteConfirmer` before replacing a file; `validate_out_dir`, `validate_out_file` and `delete_message`. |
| `nomadpack.docgen` | Command reference pages (`command_doc`), navigation JSON (`nav_data`), `clean_name` and `strip_ansi`. |
| `nomadpack.grouped_help` | The top-level help screen (`grouped_help`) with common and other commands, and `normalize_args`, which turns a lone `-v` into `--version`. |

## Examples

Validating positional arguments:

```python
from nomadpack.args import exact_args, ArgumentError

check = exact_args(1)
try:
    check(None, [])
except ArgumentError as err:
    print(err)  # this command requires exactly 1 args(s), received 0
```

Formatting values for tables:

```python
from nomadpack.formatters import format_list, format_sha1_reference

format_list(["a", "b", "c"])          # "a\nb\nc"
format_sha1_reference("0123456789abcdef0123456789abcdef01234567")  # "01234567"
```

Ordering rendered templates:

```python
from nomadpack.renders import range_renders

renders = range_renders({
    "example/templates/b.nomad.tpl": "job b",
    "example/templates/a.nomad.tpl": "job a",
})
[r.name for r in renders]  # ["example/a.nomad", "example/b.nomad"]
```

Messages and names used by the registry and docs commands:

```python
from nomadpack.renders import delete_message
from nomadpack.docgen import clean_name

delete_message("community", "traefik", "v0.0.1")
# "\nregistry community pack traefik at ref v0.0.1 deleted"
clean_name("registry add")  # "registry-add"
```

## What the package does not do

- It installs no command; there is nothing to run from a shell.
- It does not talk to a Nomad cluster. `deployed.JobsClient` is an in-memory
  collection of `Job` objects that the lookup functions query.
- It does not build client connection settings from the environment or from
  flags.
- It does not download, cache or list registries and packs, and it does not
  render templates itself; it orders, shows and writes renders it is given.

## Tests

The test suite uses pytest and is installed with the `test` extra.