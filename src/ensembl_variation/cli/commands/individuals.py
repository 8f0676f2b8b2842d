from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ensembl_variation.cli.utils import individuals_table, open_store, write_json
from ensembl_variation.dbsql import IndividualAdaptor, PopulationAdaptor
from ensembl_variation.exporter import build_individuals_dict

console = Console()


def individuals_command(
    db: Path = typer.Argument(..., exists=True, readable=True),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Individuals with this name"),
    population: Optional[str] = typer.Option(
        None,
        "--population",
        "-p",
        help="Individuals belonging to this population",
    ),
    strains: bool = typer.Option(False, "--strains", help="Only fully inbred strains"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail when rows for the same individual disagree",
    ),
    json_out: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write JSON to file instead of stdout (implies --json)",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON"),
):
    """
    List individuals with their resolved parents.
    """
    if sum(bool(x) for x in (name, population, strains)) > 1:
        raise typer.BadParameter("use only one of --name, --population, --strains")

    with open_store(db) as conn:
        adaptor = IndividualAdaptor(conn, strict=strict)

        if name:
            individuals = adaptor.fetch_all_by_name(name)
            title = f"Individuals named {name}"
        elif population:
            pop = PopulationAdaptor(conn).fetch_by_name(population)
            if pop is None:
                console.print(f"[red]Unknown population:[/red] {population}")
                raise typer.Exit(code=1)
            individuals = adaptor.fetch_all_by_population(pop)
            title = f"Individuals in {population}"
        elif strains:
            individuals = adaptor.fetch_all_strains()
            title = "Strains"
        else:
            individuals = adaptor.fetch_all()
            title = "Individuals"

    if json_out or out:
        write_json(build_individuals_dict(individuals), out=out, pretty=pretty)
        return

    console.print(individuals_table(individuals, title=title))


def children_command(
    db: Path = typer.Argument(..., exists=True, readable=True),
    individual_id: int = typer.Argument(..., help="Parent individual (sample) id"),
):
    """
    List the children of an individual.
    """
    with open_store(db) as conn:
        adaptor = IndividualAdaptor(conn)
        parent = adaptor.fetch_by_dbID(individual_id)
        if parent is None:
            console.print(f"[red]No individual with id {individual_id}[/red]")
            raise typer.Exit(code=1)
        children = parent.get_all_child_individuals()

    console.print(
        individuals_table(children, title=f"Children of {parent.name} ({parent.gender})")
    )
