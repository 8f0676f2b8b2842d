from __future__ import annotations

import sqlite3
from pathlib import Path

from ensembl_variation.dbsql.schema import SCHEMA_SQL
from ensembl_variation.logger import get_logger

log = get_logger("dbsql.connection")


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a variation store. ``:memory:`` gives a throwaway database."""
    db_path = str(db_path)
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    log.debug("Connecting to variation store: %s", db_path)
    return sqlite3.connect(db_path)


def connect_readonly(db_path: str | Path) -> sqlite3.Connection:
    """Open an existing store read-only. Nothing is created on disk."""
    path = Path(db_path)
    if not path.is_file():
        raise FileNotFoundError(path)
    log.debug("Opening read-only store: %s", path)
    return sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)


def create_schema(conn: sqlite3.Connection) -> None:
    """Create every variation table that is not there yet."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def run_sql_file(conn: sqlite3.Connection, path: str | Path) -> None:
    with open(path, "r", encoding="utf-8") as fh:
        conn.executescript(fh.read())
    conn.commit()
