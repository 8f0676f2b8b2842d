from __future__ import annotations

from typing import List, Optional

from ensembl_variation.dbsql.base_adaptor import BaseAdaptor


class SampleAdaptor(BaseAdaptor):
    """Lookups shared by everything stored in the ``sample`` table."""

    def fetch_sample_by_synonym(self, synonym: str, source: Optional[str] = None) -> List[int]:
        """
        Sample ids carrying ``synonym``, optionally restricted to the
        synonyms contributed by the source named ``source``.
        """
        if source is None:
            sql = "SELECT ss.sample_id FROM sample_synonym ss WHERE ss.name = ?"
            params = (synonym,)
        else:
            sql = """
                SELECT ss.sample_id
                FROM   sample_synonym ss, source s
                WHERE  ss.name = ?
                AND    s.name = ?
                AND    ss.source_id = s.source_id
            """
            params = (synonym, source)

        return [row[0] for row in self.fetch_rows(sql, params)]
