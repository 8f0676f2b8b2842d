"""
Import EGA (European Genome-phenome Archive) studies.

EGA studies are linked to the NHGRI-EBI GWAS Catalog studies that share
their PubMed reference. The study list is dumped from an EGA archive store
to ``ega.studies.csv`` (``stable_id,pmid,url``) and then loaded.
"""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ensembl_variation.core.exceptions import InputFormatError, MissingInputError
from ensembl_variation.dbsql.connection import connect_readonly
from ensembl_variation.pipeline.phenotype_annotation.base import BasePhenotypeAnnotation
from ensembl_variation.pipeline.phenotype_annotation.database_conf import read_database_conf

EGA_FILE = "ega.studies.csv"


class ImportEGA(BasePhenotypeAnnotation):

    source_info = {
        "source_description": "Variants imported from the European Genome-phenome Archive with phenotype association",
        "source_url": "https://www.ebi.ac.uk/ega/",
        "object_type": "Variation",
        "source_status": "germline",
        "source_name": "EGA",
        "source_name_short": "EGA",
    }

    def __init__(self, context):
        super().__init__(context)
        # Per-run copy: the version is the current month
        self.source_info = dict(self.source_info)
        self.source_info["source_version"] = datetime.now().strftime("%Y%m")

    # ---------------------------------------------------------
    # Job steps
    # ---------------------------------------------------------
    def fetch_input(self) -> None:
        pipeline_dir = self.required_param("pipeline_dir")
        species = self.required_param("species")
        conf_file = self.required_param("ega_database_conf")

        self.make_workdir(pipeline_dir, species)
        self.open_logs(species)

        ega_path = self.workdir / EGA_FILE
        if ega_path.exists():
            self.log.info("Found files (%s), will skip new fetch", ega_path)
        else:
            conf = read_database_conf(conf_file)
            archive_db = conf.get("DATABASE")
            if not archive_db:
                raise MissingInputError(f"No DATABASE entry in {conf_file}")

            if not Path(archive_db).is_file():
                raise MissingInputError(f"EGA archive {archive_db} not found")

            archive = connect_readonly(archive_db)
            try:
                self.get_ega_file(archive, ega_path)
            finally:
                archive.close()

        self.set_param("ega_file", EGA_FILE)

    def run(self) -> None:
        ega_file = self.required_param("ega_file")

        source_id = self.get_or_add_source(self.source_info)
        if self.debug:
            self.log.info("%s source_id is %d", self.source_info["source_name"], source_id)

        results = self.parse_ega(ega_file, source_id)
        self.log.info("Got %d new studies", len(results["studies"]))
        self.ctx.stats["new_studies"] = len(results["studies"])

        self.set_param("output_ids", self.output_ids())

    # ---------------------------------------------------------
    # EGA archive dump
    # ---------------------------------------------------------
    def get_ega_file(self, archive, outfile: Path) -> int:
        """
        Write one line per archive study that has a publication,
        sorted by stable id. Returns the number of lines written.

        The dump goes to a temporary file that only replaces ``outfile``
        once it is complete, so a failed fetch leaves nothing to reuse.
        """
        outfile = Path(outfile)
        tmpfile = outfile.with_name(outfile.name + ".tmp")
        written = 0

        try:
            stable_ids = sorted(
                row[0] for row in archive.execute("SELECT stable_id FROM study").fetchall()
            )
            with open(tmpfile, "w", encoding="utf-8", newline="") as fh:
                writer = csv.writer(fh, lineterminator="\n")
                for stable_id in stable_ids:
                    study_id = self._get_study_id(archive, stable_id)
                    pmid = self._get_publication(archive, study_id)
                    if not pmid:
                        self.log.warning("Cannot find a publication for %s", stable_id)
                        continue
                    writer.writerow(
                        [stable_id, pmid, f"{self.source_info['source_url']}studies/{stable_id}"]
                    )
                    written += 1
            tmpfile.replace(outfile)
        except Exception:
            tmpfile.unlink(missing_ok=True)
            raise

        self.log.info("Wrote %d EGA studies to %s", written, outfile)
        return written

    @staticmethod
    def _get_study_id(archive, stable_id: str) -> Optional[int]:
        row = archive.execute(
            "SELECT study_id FROM study WHERE stable_id = ?", (stable_id,)
        ).fetchone()
        return row[0] if row else None

    @staticmethod
    def _get_publication(archive, study_id: Optional[int]) -> Optional[Any]:
        if study_id is None:
            return None
        row = archive.execute(
            "SELECT publication_id FROM study_publication WHERE study_id = ?", (study_id,)
        ).fetchone()
        if not row:
            return None
        row = archive.execute(
            "SELECT pmid FROM publication WHERE publication_id = ?", (row[0],)
        ).fetchone()
        return row[0] if row else None

    # ---------------------------------------------------------
    # Load
    # ---------------------------------------------------------
    def parse_ega(self, infile: str, source_id: int) -> Dict[str, List[str]]:
        """
        Link each EGA study to the NHGRI-EBI study with the same PubMed id.

        New EGA studies inherit the NHGRI study type. Lines without a
        matching NHGRI study are reported and skipped.
        """
        path = self.workdir / infile
        if not path.exists():
            raise MissingInputError(f"Could not open {infile} for reading")

        new_studies: List[str] = []

        with open(path, "r", encoding="utf-8", newline="") as fh:
            for lineno, attributes in enumerate(csv.reader(fh), start=1):
                if not attributes:
                    continue
                if len(attributes) < 2:
                    raise InputFormatError(f"{infile}:{lineno}: expected stable_id,pmid,url")
                if attributes[1] == "":
                    continue

                name = attributes[0]
                pubmed = self.get_pubmed_prefix() + attributes[1]
                url = attributes[2] if len(attributes) > 2 else None

                nhgri = self.conn.execute(
                    """
                    SELECT st.study_id, st.study_type
                    FROM   study st, source s
                    WHERE  st.external_reference = ?
                    AND    lower(s.name) LIKE '%nhgri%'
                    AND    s.source_id = st.source_id
                    LIMIT 1
                    """,
                    (pubmed,),
                ).fetchone()
                if nhgri is None:
                    self.log.warning("No NHGRI-EBI study found for the EGA %s | %s !", name, pubmed)
                    continue
                nhgri_study_id, study_type = nhgri

                row = self.conn.execute(
                    "SELECT study_id FROM study WHERE name = ? AND source_id = ? LIMIT 1",
                    (name, source_id),
                ).fetchone()
                if row is None:
                    cur = self.conn.execute(
                        """
                        INSERT INTO study (name, source_id, external_reference, url, study_type)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        (name, source_id, pubmed, url, study_type),
                    )
                    study_id = cur.lastrowid
                    new_studies.append(name)
                else:
                    study_id = row[0]

                associated = self.conn.execute(
                    "SELECT study1_id FROM associate_study WHERE study1_id = ? AND study2_id = ? LIMIT 1",
                    (nhgri_study_id, study_id),
                ).fetchone()
                if associated is None:
                    self.conn.execute(
                        "INSERT INTO associate_study (study1_id, study2_id) VALUES (?, ?)",
                        (nhgri_study_id, study_id),
                    )

        self.conn.commit()
        return {"studies": new_studies}
