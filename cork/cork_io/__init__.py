# cork/cork_io/__init__.py
# IO helpers: shared console & JSON file utilities

from .console import console, get_console, configure_console, reset_console
from .generics import ensure_parent, read_json_safe, write_json_safe, exit_with_error

__all__ = [
    "console",
    "get_console",
    "configure_console",
    "reset_console",
    "ensure_parent",
    "read_json_safe",
    "write_json_safe",
    "exit_with_error",
]
