"""
CLI command modules for ensembl_variation.

Each command module defines Typer-compatible command functions.
"""

from ensembl_variation.cli.commands.import_cmd import import_command
from ensembl_variation.cli.commands.individuals import children_command, individuals_command
from ensembl_variation.cli.commands.init_db import init_db_command

__all__ = [
    "children_command",
    "import_command",
    "individuals_command",
    "init_db_command",
]
