"""
ensembl_variation: variation database adaptors and phenotype annotation imports.
"""

__version__ = "0.1.0"
