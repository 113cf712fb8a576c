# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/registry_init.py

"""Import every operation module so that its operations get registered"""

import importlib
import logging
import pkgutil

logger = logging.getLogger(__name__)


def _discover_modules(packages, label):
    loaded = []
    for package in packages:
        for _, name, _ in pkgutil.iter_modules(package.__path__):
            full_name = f"{package.__name__}.{name}"
            importlib.import_module(full_name)
            loaded.append(full_name)
    logger.debug("Loaded %d %s modules: %s", len(loaded), label, loaded)
    return loaded


def initialize_registry():
    if getattr(initialize_registry, "initialized", False):
        return
    import fillpdf.operations

    _discover_modules([fillpdf.operations], "operation")
    initialize_registry.initialized = True
