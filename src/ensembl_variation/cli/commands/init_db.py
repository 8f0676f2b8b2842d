from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ensembl_variation.cli.utils import open_store
from ensembl_variation.dbsql.connection import run_sql_file

console = Console()


def init_db_command(
    db: Path = typer.Argument(..., help="Variation store to create"),
    load: Optional[List[Path]] = typer.Option(
        None,
        "--load",
        "-l",
        exists=True,
        readable=True,
        help="SQL file to run after the schema is created (repeatable)",
    ),
):
    """
    Create the variation schema, optionally loading SQL data files.
    """
    with open_store(db, create=True) as conn:
        for sql_file in load or []:
            run_sql_file(conn, sql_file)
            console.log(f"Loaded {sql_file}")

    console.print(f"[green]Variation store ready:[/green] {db}")
