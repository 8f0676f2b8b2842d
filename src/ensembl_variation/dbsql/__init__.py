from __future__ import annotations

from .base_adaptor import BaseAdaptor
from .connection import connect, create_schema, run_sql_file
from .individual_adaptor import IndividualAdaptor
from .population_adaptor import PopulationAdaptor
from .sample_adaptor import SampleAdaptor

__all__ = [
    "BaseAdaptor",
    "IndividualAdaptor",
    "PopulationAdaptor",
    "SampleAdaptor",
    "connect",
    "create_schema",
    "run_sql_file",
]
