# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/core/types.py

"""Value types used by fillpdf"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple, Union

# A form maps field names to values. Mappings are emitted sorted by name,
# sequences of pairs in their given order.
Form = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


@dataclass(frozen=True)
class Options:
    """
    Options controlling how a form is filled.

    overwrite: replace an existing destination file (default False)
    flatten: make the filled fields non-editable (default True)
    remove_metadata: strip document metadata from the result (default False)
    use_xfdf: send XFDF instead of FDF to pdftk (default False)
    timeout: seconds allowed for each external tool run (default no limit)
    """

    overwrite: bool = False
    flatten: bool = True
    remove_metadata: bool = False
    use_xfdf: bool = False
    timeout: float | None = None


@dataclass(frozen=True)
class FieldDescriptor:
    """One interactive form field as reported by pdftk dump_data_fields."""

    type: str = ""
    name: str = ""
    alt_name: str = ""
    flags: str = ""


@dataclass(frozen=True)
class DocInfoEntry:
    key: str
    value: str


class OpResult(NamedTuple):
    success: bool = True
    data: Any = None
    summary: str | None = None


def form_items(form: Form) -> list[tuple[str, Any]]:
    """Return the (name, value) pairs of a form in emission order."""
    if isinstance(form, Mapping):
        return sorted(form.items(), key=lambda item: item[0])
    return list(form)
