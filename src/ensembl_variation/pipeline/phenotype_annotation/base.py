"""
Shared behaviour for the phenotype annotation import jobs.

Each job is driven through three steps by ``core.pipeline.Pipeline``:

    fetch_input()   - resolve parameters, prepare the workdir, find/fetch input
    run()           - parse the input and store it
    write_output()  - hand the source/species on to the next job

Jobs log to their own files inside the workdir
(``log_import_out_<source>_<species>`` and ``log_import_err_<source>_<species>``)
in addition to the project-wide logs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ensembl_variation.core.context import ImportContext
from ensembl_variation.core.exceptions import MissingParameterError
from ensembl_variation.logger import attach_file_handler, detach_handler, get_logger

PUBMED_PREFIX = "PMID:"


class BasePhenotypeAnnotation:

    source_info: Dict[str, Any] = {}

    def __init__(self, context: ImportContext):
        self.ctx = context
        self.conn = context.conn
        self.debug = bool(context.param("debug_mode", context.debug))

        short = self.source_info.get("source_name_short", type(self).__name__)
        self.log = get_logger(f"pipeline.{short}")
        self.pipelog = get_logger(f"pipeline.{short}.pipe")

        self._workdir: Optional[Path] = None
        self._handlers: List[tuple] = []

    # ---------------------------------------------------------
    # Parameters
    # ---------------------------------------------------------
    def param(self, name: str, default: Any = None) -> Any:
        return self.ctx.param(name, default)

    def set_param(self, name: str, value: Any) -> None:
        self.ctx.params[name] = value

    def required_param(self, name: str) -> Any:
        value = self.ctx.params.get(name)
        if value is None:
            raise MissingParameterError(f"Required parameter '{name}' is not set")
        return value

    # ---------------------------------------------------------
    # Workdir + logs
    # ---------------------------------------------------------
    @property
    def workdir(self) -> Path:
        if self._workdir is None:
            raise RuntimeError("workdir is not set; call fetch_input() first")
        return self._workdir

    def make_workdir(self, pipeline_dir: str | Path, species: str) -> Path:
        workdir = Path(pipeline_dir) / self.source_info["source_name_short"] / species
        workdir.mkdir(parents=True, exist_ok=True)
        self._workdir = workdir
        return workdir

    def open_logs(self, species: str) -> None:
        short = self.source_info["source_name_short"]
        out_path = self.workdir / f"log_import_out_{short}_{species}"
        err_path = self.workdir / f"log_import_err_{short}_{species}"

        self._handlers.append((self.log, attach_file_handler(self.log, out_path, logging.INFO)))
        self._handlers.append((self.log, attach_file_handler(self.log, err_path, logging.WARNING)))

        if self.debug:
            pipe_path = self.workdir / f"log_import_debug_pipe_{short}_{species}"
            self._handlers.append(
                (self.pipelog, attach_file_handler(self.pipelog, pipe_path, logging.DEBUG))
            )

    def close_logs(self) -> None:
        while self._handlers:
            logger, handler = self._handlers.pop()
            detach_handler(logger, handler)

    # ---------------------------------------------------------
    # Job steps
    # ---------------------------------------------------------
    def fetch_input(self) -> None:
        raise NotImplementedError

    def run(self) -> None:
        raise NotImplementedError

    def write_output(self) -> Dict[str, Any]:
        output = self.param("output_ids")
        if output is None:
            raise MissingParameterError("run() did not set 'output_ids'")

        if self.debug:
            self.pipelog.info(
                "Passing %s import (%s) for checks (check_phenotypes)",
                self.source_info["source_name_short"],
                self.required_param("species"),
            )
        self.dataflow_output_id(output, 1)
        return output

    def dataflow_output_id(self, output: Dict[str, Any], branch: int = 1) -> None:
        self.ctx.dataflow.append({"branch": branch, "output": output})

    def output_ids(self) -> Dict[str, Any]:
        return {
            "source": {
                "source_name": self.source_info["source_name"],
                "type": self.source_info["object_type"],
            },
            "species": self.required_param("species"),
        }

    # ---------------------------------------------------------
    # Store helpers
    # ---------------------------------------------------------
    def get_pubmed_prefix(self) -> str:
        cfg = getattr(self.ctx.config, "pipeline", None) or {}
        return cfg.get("pubmed_prefix", PUBMED_PREFIX)

    def get_or_add_source(self, source_info: Dict[str, Any]) -> int:
        """
        Id of the source named ``source_info['source_name']``.

        A known source gets its version refreshed when it changed; an
        unknown one is inserted.
        """
        name = source_info["source_name"]
        version = source_info.get("source_version")
        status = source_info.get("source_status") or source_info.get("somatic_status") or "germline"

        row = self.conn.execute(
            "SELECT source_id, version FROM source WHERE name = ?", (name,)
        ).fetchone()

        if row is not None:
            source_id, current_version = row
            if version is not None and str(current_version) != str(version):
                self.conn.execute(
                    "UPDATE source SET version = ? WHERE source_id = ?",
                    (str(version), source_id),
                )
                self.conn.commit()
                self.log.info("Updated %s source version: %s -> %s", name, current_version, version)
            return source_id

        cur = self.conn.execute(
            """
            INSERT INTO source (name, version, description, url, somatic_status, data_types)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                name,
                None if version is None else str(version),
                source_info.get("source_description"),
                source_info.get("source_url"),
                status,
                "phenotype_feature",
            ),
        )
        self.conn.commit()
        self.log.info("Added source %s (source_id=%d)", name, cur.lastrowid)
        return cur.lastrowid

    def _get_or_add_phenotype(self, description: str) -> int:
        row = self.conn.execute(
            "SELECT phenotype_id FROM phenotype WHERE description = ?", (description,)
        ).fetchone()
        if row is not None:
            return row[0]
        cur = self.conn.execute("INSERT INTO phenotype (description) VALUES (?)", (description,))
        return cur.lastrowid

    def _get_or_add_study(self, name: str, source_id: int) -> int:
        row = self.conn.execute(
            "SELECT study_id FROM study WHERE name = ? AND source_id = ? LIMIT 1",
            (name, source_id),
        ).fetchone()
        if row is not None:
            return row[0]
        cur = self.conn.execute(
            "INSERT INTO study (name, source_id) VALUES (?, ?)", (name, source_id)
        )
        return cur.lastrowid

    def save_phenotypes(self, source_info: Dict[str, Any], results: Dict[str, Any]) -> int:
        """
        Store parsed phenotype records as phenotype features.

        Each record is ``{id, description, study, external_id}``; ``id`` is
        the annotated object. Returns the number of new features.
        """
        source_id = self.get_or_add_source(source_info)
        object_type = source_info["object_type"]
        inserted = 0

        for record in results.get("phenotypes", []):
            phenotype_id = self._get_or_add_phenotype(record["description"])
            study = record.get("study")
            study_id = self._get_or_add_study(study, source_id) if study else None

            exists = self.conn.execute(
                """
                SELECT phenotype_feature_id FROM phenotype_feature
                WHERE phenotype_id = ? AND source_id = ? AND type = ?
                AND object_id = ? AND study_id IS ?
                LIMIT 1
                """,
                (phenotype_id, source_id, object_type, record["id"], study_id),
            ).fetchone()
            if exists is not None:
                continue

            self.conn.execute(
                """
                INSERT INTO phenotype_feature (phenotype_id, source_id, study_id, type, object_id)
                VALUES (?, ?, ?, ?, ?)
                """,
                (phenotype_id, source_id, study_id, object_type, record["id"]),
            )
            inserted += 1

        self.conn.commit()
        self.log.info("Saved %d new phenotype features for %s", inserted, source_info["source_name"])
        return inserted
