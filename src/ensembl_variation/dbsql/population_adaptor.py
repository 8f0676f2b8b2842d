from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ensembl_variation.dbsql.sample_adaptor import SampleAdaptor
from ensembl_variation.registry.entities import Population


class PopulationAdaptor(SampleAdaptor):

    _primary_key = "p.sample_id"

    def _tables(self):
        return (("population", "p"), ("sample", "s"))

    def _columns(self):
        return ("p.sample_id", "s.name", "s.description", "s.size")

    def _default_where_clause(self) -> str:
        return "s.sample_id = p.sample_id"

    def _objs_from_rows(self, rows: Sequence[Sequence[Any]]) -> List[Population]:
        return [
            Population(db_id=db_id, name=name, description=desc, size=size, adaptor=self)
            for db_id, name, desc, size in rows
        ]

    def fetch_by_name(self, name: Optional[str]) -> Optional[Population]:
        if name is None:
            raise ValueError("name argument expected")
        pops = self.generic_fetch("s.name = ?", (name,))
        if len(pops) > 1:
            self.log.warning("Population name %s is not unique, using the first match", name)
        return pops[0] if pops else None
