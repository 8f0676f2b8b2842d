from __future__ import annotations

from typing import Any, Iterable, List

from ensembl_variation.core.exceptions import IndividualConflictError
from ensembl_variation.logger import get_logger
from ensembl_variation.registry.entities import (
    Individual,
    IndividualRegistry,
    IndividualRow,
    normalize_gender,
)
from ensembl_variation.registry.link_entities import link_entities

log = get_logger("registry.materialize")


def _conflicts(ind: Individual, row: IndividualRow) -> List[str]:
    fields = []
    for attr, value in (
        ("name", row.name),
        ("description", row.description),
        ("type_name", row.type_name),
        ("type_description", row.type_description),
    ):
        if getattr(ind, attr) != value:
            fields.append(attr)
    if normalize_gender(row.gender) != ind.gender:
        fields.append("gender")
    for attr, value in (("father_id", row.father_id), ("mother_id", row.mother_id)):
        current = getattr(ind, attr)
        if current is not None and value is not None and current != value:
            fields.append(attr)
    return fields


def build_registry(
    rows: Iterable[IndividualRow],
    *,
    adaptor: Any = None,
    strict: bool = False,
) -> IndividualRegistry:
    """
    First pass over an ordered batch of rows.

    Parents already in the registry are wired at construction time; the
    others are recorded as wanted for ``link_entities``. Parent lookups
    happen before the row's own id is registered.

    The first row for an id builds the Individual. A later row for the
    same id can only supply a parent id the first row left empty.
    """
    registry = IndividualRegistry()

    for row in rows:
        existing = registry.get_individual(row.id)

        if existing is not None:
            if strict:
                conflicts = _conflicts(existing, row)
                if conflicts:
                    raise IndividualConflictError(
                        f"Rows for individual {row.id} disagree on: {', '.join(conflicts)}"
                    )
            father_id = row.father_id if existing.father_id is None else None
            mother_id = row.mother_id if existing.mother_id is None else None
            ind = existing
        else:
            father_id = row.father_id
            mother_id = row.mother_id
            ind = Individual.from_row(row, adaptor=adaptor)

        if father_id is not None:
            ind.father_id = father_id
            father = registry.get_individual(father_id)
            if father is not None:
                ind.father = father
            else:
                registry.want_father(father_id, row.id)

        if mother_id is not None:
            ind.mother_id = mother_id
            mother = registry.get_individual(mother_id)
            if mother is not None:
                ind.mother = mother
            else:
                registry.want_mother(mother_id, row.id)

        if existing is None:
            registry.register_individual(ind)

    return registry


def materialize_individuals(
    rows: Iterable[IndividualRow],
    *,
    adaptor: Any = None,
    strict: bool = False,
) -> List[Individual]:
    """
    Turn flat individual rows into linked Individual objects.

    One Individual per distinct id, in order of first occurrence, with
    father/mother resolved against every row in the batch regardless of
    where the parent row sits. Parents outside the batch stay None.
    """
    registry = build_registry(rows, adaptor=adaptor, strict=strict)
    linked = link_entities(registry)

    log.debug(
        "Materialized %d individuals (%d deferred parent links resolved)",
        len(registry),
        linked,
    )
    return list(registry.individuals.values())
