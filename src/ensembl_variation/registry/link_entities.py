from __future__ import annotations

from ensembl_variation.registry.entities import IndividualRegistry


def link_entities(registry: IndividualRegistry) -> int:
    """
    Second pass: wire parent references that were deferred while building.

    For each wanted parent id that ended up in the registry, every waiting
    child gets the shared parent instance. Parent ids that never appeared
    are left alone; the child's reference stays None.

    Idempotent. Returns the number of references wired.
    """
    linked = 0

    for father_id, child_ids in registry.wanted_fathers.items():
        father = registry.get_individual(father_id)
        if father is None:
            continue
        for child_id in child_ids:
            registry.individuals[child_id].father = father
            linked += 1

    for mother_id, child_ids in registry.wanted_mothers.items():
        mother = registry.get_individual(mother_id)
        if mother is None:
            continue
        for child_id in child_ids:
            registry.individuals[child_id].mother = mother
            linked += 1

    return linked
