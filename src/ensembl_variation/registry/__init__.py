from __future__ import annotations

from .entities import (
    FEMALE,
    MALE,
    UNKNOWN,
    Individual,
    IndividualRegistry,
    IndividualRow,
    Population,
    normalize_gender,
)
from .link_entities import link_entities
from .materialize import build_registry, materialize_individuals

__all__ = [
    "FEMALE",
    "MALE",
    "UNKNOWN",
    "Individual",
    "IndividualRegistry",
    "IndividualRow",
    "Population",
    "build_registry",
    "link_entities",
    "materialize_individuals",
    "normalize_gender",
]
