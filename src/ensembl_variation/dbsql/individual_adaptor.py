"""
individual_adaptor.py
Database access for Individual objects.

Individuals may be retrieved by id, name, synonym, population membership,
parent, or individual type:

    adaptor = IndividualAdaptor(conn)
    ind = adaptor.fetch_by_dbID(52)

    for child in adaptor.fetch_all_by_parent_individual(ind):
        print(child.name, "is a child of", ind.name)

Every query selects the same eight columns, which are decoded into
``IndividualRow`` and materialized in one batch so that parents present
in the same result set are shared instances.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ensembl_variation.dbsql.sample_adaptor import SampleAdaptor
from ensembl_variation.registry.entities import (
    FEMALE,
    MALE,
    STRAIN_TYPE,
    Individual,
    IndividualRow,
    Population,
)
from ensembl_variation.registry.materialize import materialize_individuals

REFERENCE_STRAIN_KEY = "individual.reference_strain"
DEFAULT_STRAIN_KEY = "individual.default_strain"
DISPLAY_STRAIN_KEY = "individual.display_strain"


class IndividualAdaptor(SampleAdaptor):

    _primary_key = "i.sample_id"

    def __init__(self, conn, *, strict: bool = False):
        super().__init__(conn)
        self.strict = strict

    # ---------------------------------------------------------
    # Query description
    # ---------------------------------------------------------
    def _tables(self):
        return (
            ("individual", "i"),
            ("sample", "s"),
            ("individual_type", "it"),
        )

    def _columns(self):
        return (
            "i.sample_id",
            "s.name",
            "s.description",
            "i.gender",
            "i.father_individual_sample_id",
            "i.mother_individual_sample_id",
            "it.name",
            "it.description",
        )

    def _default_where_clause(self) -> str:
        return "s.sample_id = i.sample_id AND i.individual_type_id = it.individual_type_id"

    def _objs_from_rows(self, rows: Sequence[Sequence[Any]]) -> List[Individual]:
        decoded = [IndividualRow.from_sequence(row) for row in rows]
        return materialize_individuals(decoded, adaptor=self, strict=self.strict)

    # ---------------------------------------------------------
    # Fetches
    # ---------------------------------------------------------
    def fetch_individual_by_synonym(self, synonym: str, source: Optional[str] = None) -> List[Individual]:
        """Individuals known under ``synonym`` (in ``source``, if given)."""
        individuals = []
        for sample_id in self.fetch_sample_by_synonym(synonym, source):
            ind = self.fetch_by_dbID(sample_id)
            if ind is not None:
                individuals.append(ind)
        return individuals

    def fetch_all_by_name(self, name: Optional[str]) -> List[Individual]:
        """Individual names are not unique, so this always returns a list."""
        if name is None:
            raise ValueError("name argument expected")
        return self.generic_fetch("s.name = ?", (name,))

    def fetch_all_by_population(self, population: Population) -> List[Individual]:
        if not isinstance(population, Population):
            raise TypeError("Population argument expected")

        if population.db_id is None:
            self.log.warning("Population does not have dbID, cannot retrieve Individuals")
            return []

        sql = """
            SELECT i.sample_id, s.name, s.description,
                   i.gender, i.father_individual_sample_id, i.mother_individual_sample_id,
                   it.name, it.description
            FROM   individual i, individual_population ip, sample s, individual_type it
            WHERE  i.sample_id = ip.individual_sample_id
            AND    i.sample_id = s.sample_id
            AND    i.individual_type_id = it.individual_type_id
            AND    ip.population_sample_id = ?
        """
        return self._objs_from_rows(self.fetch_rows(sql, (population.db_id,)))

    def _fetch_children_as_father(self, parent_id: int) -> List[Individual]:
        return self.generic_fetch("i.father_individual_sample_id = ?", (parent_id,))

    def _fetch_children_as_mother(self, parent_id: int) -> List[Individual]:
        return self.generic_fetch("i.mother_individual_sample_id = ?", (parent_id,))

    def fetch_all_by_parent_individual(self, parent: Individual) -> List[Individual]:
        """
        Children of ``parent``.

        Male individuals are only looked up as fathers and Female ones only
        as mothers. An Unknown individual is tried as a mother first; the
        father lookup runs only if that finds nothing.
        """
        if not isinstance(parent, Individual):
            raise TypeError("Individual argument expected")

        if parent.db_id is None:
            self.log.warning("Cannot fetch child Individuals for parent without dbID")
            return []

        if parent.gender == MALE:
            return self._fetch_children_as_father(parent.db_id)
        if parent.gender == FEMALE:
            return self._fetch_children_as_mother(parent.db_id)

        children = self._fetch_children_as_mother(parent.db_id)
        if children:
            return children
        return self._fetch_children_as_father(parent.db_id)

    def fetch_all_strains(self) -> List[Individual]:
        """Individuals to be treated as strains (fully inbred) in the species."""
        return self.generic_fetch("it.name = ?", (STRAIN_TYPE,))

    # ---------------------------------------------------------
    # Strain names from meta
    # ---------------------------------------------------------
    def _meta_values(self, key: str) -> List[str]:
        rows = self.fetch_rows("SELECT meta_value FROM meta WHERE meta_key = ?", (key,))
        return [row[0] for row in rows]

    def get_reference_strain_name(self) -> Optional[str]:
        values = self._meta_values(REFERENCE_STRAIN_KEY)
        return values[0] if values else None

    def get_default_strains(self) -> List[str]:
        return self._meta_values(DEFAULT_STRAIN_KEY)

    def get_display_strains(self) -> List[str]:
        """Reference strain, then the default strains, then the other display strains."""
        names = []
        reference = self.get_reference_strain_name()
        if reference is not None:
            names.append(reference)
        names.extend(self.get_default_strains())
        names.extend(self._meta_values(DISPLAY_STRAIN_KEY))
        return names
