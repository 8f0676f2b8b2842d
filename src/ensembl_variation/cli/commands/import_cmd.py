from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ensembl_variation.cli.utils import open_store
from ensembl_variation.config import get_config
from ensembl_variation.core.context import ImportContext
from ensembl_variation.core.exceptions import ImportExecutionError
from ensembl_variation.core.pipeline import Pipeline
from ensembl_variation.logger import get_logger
from ensembl_variation.pipeline import IMPORTERS

console = Console()


def import_command(
    source: str = typer.Argument(..., help=f"Source to import: {', '.join(IMPORTERS)}"),
    db: Path = typer.Option(..., "--db", help="Variation store to load into"),
    pipeline_dir: Optional[Path] = typer.Option(
        None,
        "--pipeline-dir",
        help="Working directory root (default: paths.pipeline_dir from config)",
    ),
    species: str = typer.Option("homo_sapiens", "--species", "-s"),
    ega_conf: Optional[Path] = typer.Option(
        None,
        "--ega-conf",
        exists=True,
        readable=True,
        help="EGA archive connection file (EGA only)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Write the debug pipe log"),
):
    """
    Run a phenotype annotation import job.
    """
    job_cls = IMPORTERS.get(source)
    if job_cls is None:
        raise typer.BadParameter(f"unknown source {source!r}; choose from {', '.join(IMPORTERS)}")

    cfg = get_config()
    workdir_root = pipeline_dir or Path(cfg.paths.get("pipeline_dir", "pipeline_work"))

    params = {
        "pipeline_dir": str(workdir_root),
        "species": species,
        "debug_mode": debug,
    }
    if ega_conf is not None:
        params["ega_database_conf"] = str(ega_conf)

    with open_store(db, create=True) as conn:
        ctx = ImportContext(
            config=cfg,
            logger=get_logger("cli.import"),
            conn=conn,
            params=params,
            debug=debug,
        )
        try:
            output = Pipeline(ctx).run(job_cls)
        except ImportExecutionError as exc:
            console.print(f"[red]Import failed:[/red] {exc}")
            raise typer.Exit(code=1)

    console.print(f"[green]{source} import complete[/green] -> {output}")
    for key, value in ctx.stats.items():
        console.print(f"  {key}: {value}")
