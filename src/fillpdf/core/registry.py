# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/core/registry.py

"""Registry of command line operations"""

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class Operation:
    name: str
    function: Callable[..., Any]
    desc: str
    usage: str
    long_desc: str = ""
    examples: list[dict] = field(default_factory=list)
    cli_hook: Callable[..., None] | None = None
    # Bare keywords the operation accepts after its arguments
    flags: tuple[str, ...] = ()
    # Keywords taking exactly one argument, e.g. "output <file>"
    keywords: tuple[str, ...] = ("output",)


class Registry:
    def __init__(self):
        self.operations: dict[str, Operation] = {}

    def add(self, operation: Operation):
        if operation.name in self.operations:
            raise ValueError(f"Operation '{operation.name}' is already registered")
        self.operations[operation.name] = operation


registry = Registry()


def register_operation(name, desc, usage, **kwargs):
    """Decorator registering a function as a command line operation."""

    def decorator(func):
        registry.add(Operation(name=name, function=func, desc=desc, usage=usage, **kwargs))
        return func

    return decorator
