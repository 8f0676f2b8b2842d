"""
Import jobs, keyed by the source name used on the command line.
"""

from __future__ import annotations

from ensembl_variation.pipeline.phenotype_annotation import ImportEGA, ImportRNAi

IMPORTERS = {
    "EGA": ImportEGA,
    "RNAi": ImportRNAi,
}

__all__ = ["IMPORTERS", "ImportEGA", "ImportRNAi"]
