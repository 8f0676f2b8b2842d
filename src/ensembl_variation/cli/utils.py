from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator

from rich.table import Table

from ensembl_variation.dbsql.connection import connect, create_schema
from ensembl_variation.registry.entities import Individual


@contextmanager
def open_store(path: Path, *, create: bool = False) -> Iterator[Any]:
    """
    Open a variation store for the duration of a command.
    """
    if not create and not path.exists():
        raise FileNotFoundError(path)

    conn = connect(path)
    try:
        if create:
            create_schema(conn)
        yield conn
    finally:
        conn.close()


def _name_or_id(ind: Individual | None, fallback_id: int | None) -> str:
    if ind is not None:
        return ind.name or str(ind.db_id)
    if fallback_id is not None:
        return f"({fallback_id})"
    return ""


def individuals_table(individuals: Iterable[Individual], *, title: str) -> Table:
    """
    Rich table of individuals; parents outside the batch show as (id).
    """
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Gender")
    table.add_column("Type")
    table.add_column("Father")
    table.add_column("Mother")

    for ind in individuals:
        table.add_row(
            str(ind.db_id),
            ind.name or "",
            ind.gender,
            ind.type_name or "",
            _name_or_id(ind.father, ind.father_id),
            _name_or_id(ind.mother, ind.mother_id),
        )
    return table


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
