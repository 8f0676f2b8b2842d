"""
CLI package for ensembl_variation.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from ensembl_variation.cli.app import app, main

__all__ = [
    "app",
    "main",
]
