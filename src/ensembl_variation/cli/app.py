from __future__ import annotations

import typer

from ensembl_variation.cli.commands.import_cmd import import_command
from ensembl_variation.cli.commands.individuals import children_command, individuals_command
from ensembl_variation.cli.commands.init_db import init_db_command

app = typer.Typer(
    name="ensvar",
    help="Variation store adaptors and phenotype annotation imports",
    add_completion=False,
)

app.command("init-db")(init_db_command)
app.command("individuals")(individuals_command)
app.command("children")(children_command)
app.command("import")(import_command)


def main():
    app()


if __name__ == "__main__":
    main()
