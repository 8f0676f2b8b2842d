from __future__ import annotations

import pytest

from ensembl_variation.dbsql import IndividualAdaptor, PopulationAdaptor
from ensembl_variation.registry.entities import Individual, Population


@pytest.fixture
def adaptor(populated_conn):
    return IndividualAdaptor(populated_conn)


def names(individuals):
    return sorted(ind.name for ind in individuals)


def test_fetch_by_dbID(adaptor):
    ind = adaptor.fetch_by_dbID(3)

    assert ind.db_id == 3
    assert ind.name == "NA12878"
    assert ind.description == "CEPH daughter"
    assert ind.gender == "Female"
    assert ind.type_name == "outbred"
    assert ind.father_id == 1
    assert ind.mother_id == 2
    # parents are not part of this single-row batch
    assert ind.father is None
    assert ind.adaptor is adaptor


def test_fetch_by_dbID_unknown_or_missing(adaptor):
    assert adaptor.fetch_by_dbID(12345) is None
    with pytest.raises(ValueError):
        adaptor.fetch_by_dbID(None)


def test_parent_loaded_on_demand(adaptor):
    ind = adaptor.fetch_by_dbID(3)

    father = ind.get_father_individual()
    mother = ind.get_mother_individual()

    assert father.name == "NA12891"
    assert mother.name == "NA12892"
    assert ind.father is father


def test_fetch_all_links_parents_within_the_batch(adaptor):
    inds = {ind.db_id: ind for ind in adaptor.fetch_all()}

    assert len(inds) == 10
    assert inds[3].father is inds[1]
    assert inds[3].mother is inds[2]
    assert inds[5].mother is inds[4]
    assert inds[7].father is inds[6]


def test_fetch_all_by_name_returns_every_match(adaptor):
    dups = adaptor.fetch_all_by_name("DUP")

    assert sorted(ind.db_id for ind in dups) == [9, 10]
    assert adaptor.fetch_all_by_name("nobody") == []


def test_fetch_all_by_name_requires_name(adaptor):
    with pytest.raises(ValueError, match="name argument expected"):
        adaptor.fetch_all_by_name(None)


def test_fetch_all_by_population(adaptor, populated_conn):
    pop = PopulationAdaptor(populated_conn).fetch_by_name("CEU")

    trio = {ind.db_id: ind for ind in adaptor.fetch_all_by_population(pop)}

    assert sorted(trio) == [1, 2, 3]
    assert trio[3].father is trio[1]
    assert trio[3].mother is trio[2]


def test_fetch_all_by_population_checks_argument(adaptor):
    with pytest.raises(TypeError):
        adaptor.fetch_all_by_population("CEU")


def test_fetch_all_by_population_without_dbID(adaptor):
    assert adaptor.fetch_all_by_population(Population(db_id=None, name="CEU")) == []


def test_children_of_male_parent(adaptor):
    father = adaptor.fetch_by_dbID(1)

    assert names(adaptor.fetch_all_by_parent_individual(father)) == ["NA12878"]


def test_children_of_female_parent(adaptor):
    mother = adaptor.fetch_by_dbID(2)

    assert names(mother.get_all_child_individuals()) == ["NA12878"]


def test_children_of_unknown_gender_mother(adaptor):
    parent = adaptor.fetch_by_dbID(4)
    assert parent.gender == "Unknown"

    assert names(adaptor.fetch_all_by_parent_individual(parent)) == ["X1-child"]


def test_children_of_unknown_gender_father_fall_back_to_father_role(adaptor):
    parent = adaptor.fetch_by_dbID(6)

    assert names(adaptor.fetch_all_by_parent_individual(parent)) == ["X2-child"]


def test_gender_decides_the_role(adaptor):
    # 1 is male, so it is never looked up as a mother even if a row says so
    adaptor.conn.execute("UPDATE individual SET mother_individual_sample_id = 1 WHERE sample_id = 9")
    father = adaptor.fetch_by_dbID(1)

    assert names(adaptor.fetch_all_by_parent_individual(father)) == ["NA12878"]


def test_children_of_individual_without_children(adaptor):
    assert adaptor.fetch_all_by_parent_individual(adaptor.fetch_by_dbID(8)) == []


def test_fetch_all_by_parent_individual_checks_argument(adaptor):
    with pytest.raises(TypeError):
        adaptor.fetch_all_by_parent_individual(1)


def test_fetch_all_by_parent_individual_without_dbID(adaptor):
    assert adaptor.fetch_all_by_parent_individual(Individual(db_id=None)) == []


def test_fetch_individual_by_synonym(adaptor):
    # the population sharing the synonym is not an individual
    found = adaptor.fetch_individual_by_synonym("GM12878")
    assert [ind.name for ind in found] == ["NA12878"]

    assert [ind.name for ind in adaptor.fetch_individual_by_synonym("GM12878", "dbSNP")] == ["NA12878"]
    assert adaptor.fetch_individual_by_synonym("GM12878", "other") == []
    assert [ind.name for ind in adaptor.fetch_individual_by_synonym("B6")] == ["C57BL/6J"]


def test_fetch_all_strains(adaptor):
    strains = adaptor.fetch_all_strains()

    assert [ind.name for ind in strains] == ["C57BL/6J"]
    assert strains[0].is_strain()


def test_strain_names_from_meta(adaptor):
    assert adaptor.get_reference_strain_name() == "C57BL/6J"
    assert adaptor.get_default_strains() == ["A/J", "BALB/cJ"]
    assert adaptor.get_display_strains() == ["C57BL/6J", "A/J", "BALB/cJ", "DBA/2J"]


def test_strain_names_on_empty_store(conn):
    adaptor = IndividualAdaptor(conn)

    assert adaptor.get_reference_strain_name() is None
    assert adaptor.get_display_strains() == []


def test_population_adaptor(populated_conn):
    pa = PopulationAdaptor(populated_conn)

    pop = pa.fetch_by_dbID(100)
    assert pop.name == "CEU"
    assert pop.size == 3
    assert pa.fetch_by_name("YRI") is None
    assert [p.name for p in pa.fetch_all()] == ["CEU"]
