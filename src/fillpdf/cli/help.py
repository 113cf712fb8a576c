# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/cli/help.py

"""Help and version output, rendered with rich"""

import sys

from fillpdf.core.registry import registry

_SYNOPSIS = """\
# fillpdf

Fill PDF forms using the `pdftk` command line toolkit.

```
fillpdf <input> <operation> [<args>...] [output <file>] [<keywords>...]
fillpdf help [<operation>]
```

Global flags: `--verbose`, `--debug`, `--version`, `--help`.

## Operations

"""


def _general_help_markdown():
    lines = [_SYNOPSIS]
    for name in sorted(registry.operations):
        lines.append(f"* `{name}`: {registry.operations[name].desc}")
    return "\n".join(lines) + "\n"


def _operation_help_markdown(operation):
    text = f"# {operation.name}\n\n{operation.desc}\n\n```\nfillpdf {operation.usage}\n```\n"
    if operation.long_desc:
        text += operation.long_desc.rstrip() + "\n"
    if operation.examples:
        text += "\n## Examples\n\n"
        for example in operation.examples:
            text += f"{example['desc']}:\n\n```\nfillpdf {example['cmd']}\n```\n\n"
    return text


def find_operator_topic_command(topic):
    return topic if topic in registry.operations else None


def print_help(command=None, dest=None, raw=False):
    """Print general help, or help for one operation."""
    dest = dest or sys.stdout
    operation = registry.operations.get(command) if command else None
    text = _operation_help_markdown(operation) if operation else _general_help_markdown()

    if raw or not getattr(dest, "isatty", lambda: False)():
        dest.write(text)
        return

    from rich.console import Console
    from rich.markdown import Markdown

    Console(file=dest).print(Markdown(text))


def print_version(dest=None):
    from fillpdf import __version__

    dest = dest or sys.stdout
    print(f"fillpdf {__version__}", file=dest)
