"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``ensembl_variation.logging`` directly:
    from ensembl_variation.logging import get_logger
"""

from ensembl_variation.logging import (
    attach_file_handler,
    detach_handler,
    get_logger,
)

__all__ = [
    "attach_file_handler",
    "detach_handler",
    "get_logger",
]
