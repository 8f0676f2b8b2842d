from ensembl_variation.registry.entities import Individual, IndividualRegistry
from ensembl_variation.registry.link_entities import link_entities


def test_wanted_parents_linked():
    reg = IndividualRegistry()
    child = Individual(db_id=3, father_id=1, mother_id=2)
    father = Individual(db_id=1, gender="Male")
    mother = Individual(db_id=2, gender="Female")

    for ind in (child, father, mother):
        reg.register_individual(ind)
    reg.want_father(1, 3)
    reg.want_mother(2, 3)

    assert link_entities(reg) == 2

    assert child.father is father
    assert child.mother is mother


def test_missing_references_do_not_crash():
    reg = IndividualRegistry()
    child = Individual(db_id=3, father_id=404)
    reg.register_individual(child)
    reg.want_father(404, 3)

    assert link_entities(reg) == 0  # should not raise

    assert child.father is None


def test_linking_is_idempotent():
    reg = IndividualRegistry()
    child = Individual(db_id=3, mother_id=2)
    mother = Individual(db_id=2)
    reg.register_individual(child)
    reg.register_individual(mother)
    reg.want_mother(2, 3)

    link_entities(reg)
    link_entities(reg)

    assert child.mother is mother
