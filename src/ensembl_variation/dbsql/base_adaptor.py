from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from ensembl_variation.logger import get_logger


class BaseAdaptor:
    """
    Shared query plumbing for the variation adaptors.

    Subclasses describe their SELECT through ``_tables``, ``_columns`` and
    ``_default_where_clause`` and turn fetched rows into objects in
    ``_objs_from_rows``. ``_primary_key`` names the column used by
    ``fetch_by_dbID``.
    """

    _primary_key = ""

    def __init__(self, conn):
        self.conn = conn
        self.log = get_logger(f"dbsql.{type(self).__name__}")

    # ---------------------------------------------------------
    # Query description (overridden)
    # ---------------------------------------------------------
    def _tables(self) -> Sequence[Tuple[str, str]]:
        raise NotImplementedError

    def _columns(self) -> Sequence[str]:
        raise NotImplementedError

    def _default_where_clause(self) -> str:
        return ""

    def _objs_from_rows(self, rows: Sequence[Sequence[Any]]) -> List[Any]:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Execution
    # ---------------------------------------------------------
    def _select_sql(self, constraint: str = "") -> str:
        tables = ", ".join(f"{name} {alias}" for name, alias in self._tables())
        sql = f"SELECT {', '.join(self._columns())} FROM {tables}"

        clauses = [c for c in (self._default_where_clause(), constraint) if c]
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        return sql

    def fetch_rows(self, sql: str, params: Sequence[Any] = ()) -> List[Tuple[Any, ...]]:
        self.log.debug("SQL: %s | params=%r", " ".join(sql.split()), tuple(params))
        cur = self.conn.execute(sql, tuple(params))
        try:
            return cur.fetchall()
        finally:
            cur.close()

    def generic_fetch(self, constraint: str = "", params: Sequence[Any] = ()) -> List[Any]:
        """Fetch objects matching an extra WHERE ``constraint``."""
        rows = self.fetch_rows(self._select_sql(constraint), params)
        return self._objs_from_rows(rows)

    def fetch_all(self) -> List[Any]:
        return self.generic_fetch()

    def fetch_by_dbID(self, db_id: Optional[int]) -> Optional[Any]:
        if db_id is None:
            raise ValueError("db_id argument is required")
        objs = self.generic_fetch(f"{self._primary_key} = ?", (db_id,))
        return objs[0] if objs else None
