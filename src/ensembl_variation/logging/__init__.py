"""
Logging package for ``ensembl_variation``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import (
    attach_file_handler,
    detach_handler,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "attach_file_handler",
    "detach_handler",
    "get_logger",
    "list_active_loggers",
]
