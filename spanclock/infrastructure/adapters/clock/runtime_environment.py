"""Runtime environment helpers.

Classification is a side-effect-free inspection of interpreter markers:
Pyodide runs on the ``emscripten`` platform and registers a ``pyodide``
module, everything else is treated as a server-side interpreter.
"""

from __future__ import annotations

import importlib
import sys
from types import ModuleType
from typing import Any

# sys.platform values of in-browser interpreters
BROWSER_PLATFORMS = frozenset({"emscripten"})

# Modules whose presence marks an in-browser interpreter
BROWSER_MARKER_MODULES = ("pyodide",)


def is_server_env() -> bool:
    """Whether the interpreter runs on a host OS rather than in a browser."""
    if sys.platform in BROWSER_PLATFORMS:
        return False
    return not any(name in sys.modules for name in BROWSER_MARKER_MODULES)


def dynamic_import(module_name: str) -> ModuleType:
    """Import a module by dotted path at call time.

    Raises whatever the import raises; callers decide how to handle it.
    """
    return importlib.import_module(module_name)


def get_global_object(module_name: str = "js") -> Any | None:
    """Return the JavaScript global object bridge, or None outside a browser.

    Args:
        module_name: Module exposing ``globalThis`` (``js`` under Pyodide).
    """
    try:
        return importlib.import_module(module_name)
    except Exception:
        # A bridge that fails to load means no browser global is reachable
        return None
