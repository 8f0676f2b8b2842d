"""
Exporter package.

Re-exports the JSON export entry points.
"""

from __future__ import annotations

from .json_exporter import (
    build_individuals_dict,
    export_individuals_json,
    serialize_individuals_to_json_string,
)

__all__ = [
    "build_individuals_dict",
    "export_individuals_json",
    "serialize_individuals_to_json_string",
]
