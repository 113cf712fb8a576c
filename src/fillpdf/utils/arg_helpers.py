# src/fillpdf/utils/arg_helpers.py
import json
import sys
from collections.abc import Mapping
from pathlib import Path

from fillpdf.exceptions import InvalidArgumentError

# Optional: Support YAML if PyYAML is installed
try:
    import yaml

    HAS_YAML = True
except ImportError:
    HAS_YAML = False


def load_form_data(path_str):
    """
    Loads form values for fill_form from a JSON or YAML file, or JSON on
    stdin when `path_str` is '-'.

    The document must be an object of {field name: value}, or a list of
    [name, value] pairs when the emission order matters.
    """
    if path_str == "-":
        data = json.load(sys.stdin)
    else:
        data = _load_data_file(path_str)
    return _as_form(data)


def _load_data_file(path_str):
    path = Path(path_str)
    if not path.exists():
        raise FileNotFoundError(f"Form data file not found: {path}")

    with open(path, encoding="utf-8") as f:
        # Simple extension check
        if path.suffix.lower() in (".yaml", ".yml"):
            if not HAS_YAML:
                raise ImportError(
                    "PyYAML is required to load .yaml files. Install it with: pip install pyyaml"
                )
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise InvalidArgumentError(f"Invalid YAML in {path}: {exc}") from exc
        # Default to JSON
        return json.load(f)


def _as_form(data):
    if isinstance(data, Mapping):
        return dict(data)
    if isinstance(data, list) and all(
        isinstance(item, (list, tuple)) and len(item) == 2 for item in data
    ):
        return [(str(name), value) for name, value in data]
    raise InvalidArgumentError(
        "Form data must be an object of field values or a list of [name, value] pairs"
    )
