from __future__ import annotations

from .base import BasePhenotypeAnnotation
from .database_conf import read_database_conf
from .import_ega import ImportEGA
from .import_rnai import ImportRNAi

__all__ = [
    "BasePhenotypeAnnotation",
    "ImportEGA",
    "ImportRNAi",
    "read_database_conf",
]
