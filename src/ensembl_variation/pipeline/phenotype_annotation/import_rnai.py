"""
Import RNAi screen phenotypes.

Input is ``RNAi_phenotypes.txt`` in the job workdir: tab-separated
``gene_id, phenotype, study``. Until genes can be inferred from dsRNA
alignment the gene id is used as both object and external id.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ensembl_variation.core.exceptions import InputFormatError, MissingInputError
from ensembl_variation.pipeline.phenotype_annotation.base import BasePhenotypeAnnotation

RNAI_FILE = "RNAi_phenotypes.txt"


class ImportRNAi(BasePhenotypeAnnotation):

    source_info = {
        "source_description": "An RNAi screen",
        "object_type": "Gene",
        "somatic_status": "somatic",
        "source_name": "RNAi",
        "source_name_short": "RNAi",
        "source_version": "1",
    }

    def fetch_input(self) -> None:
        pipeline_dir = self.required_param("pipeline_dir")
        species = self.required_param("species")

        self.make_workdir(pipeline_dir, species)
        self.open_logs(species)

        if not (self.workdir / RNAI_FILE).exists():
            raise MissingInputError(f"expected {self.workdir / RNAI_FILE}")

        self.set_param("RNAi_file", RNAI_FILE)

    def run(self) -> None:
        input_file = self.required_param("RNAi_file")

        results = self.parse_input_file(input_file)
        if self.debug:
            self.log.info("Got %d phenotypes", len(results["phenotypes"]))

        self.ctx.stats["phenotype_features"] = self.save_phenotypes(self.source_info, results)
        self.set_param("output_ids", self.output_ids())

    def parse_input_file(self, infile: str) -> Dict[str, List[Dict[str, Any]]]:
        phenotypes = []

        with open(self.workdir / infile, "r", encoding="utf-8") as fh:
            for lineno, line in enumerate(fh, start=1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue

                data = line.split("\t")
                if len(data) != 3:
                    raise InputFormatError(
                        f"couldn't parse input file {infile}:{lineno}: expected 3 columns, got {len(data)}"
                    )

                gene_id, phenotype, study = data
                phenotypes.append(
                    {
                        "id": gene_id,
                        "description": phenotype,
                        "study": study,
                        "external_id": gene_id,
                    }
                )

        return {"phenotypes": phenotypes}
