from __future__ import annotations

from typing import Any, Dict, Type

from ensembl_variation.core.context import ImportContext
from ensembl_variation.core.exceptions import ImportExecutionError


class Pipeline:
    """
    Runs one import job through fetch_input -> run -> write_output.
    No business logic lives here.
    """

    def __init__(self, context: ImportContext):
        self.ctx = context
        self.log = context.logger

    def run(self, job_cls: Type[Any]) -> Dict[str, Any]:
        name = getattr(job_cls, "__name__", str(job_cls))
        self.log.info(f"Pipeline starting: {name}")

        job = job_cls(self.ctx)
        try:
            job.fetch_input()
            job.run()
            output = job.write_output()

            self.log.info(f"Pipeline completed successfully: {name}")

            return output

        except Exception as exc:
            self.log.exception(f"Pipeline execution failed: {name}")
            raise ImportExecutionError(str(exc)) from exc

        finally:
            job.close_logs()
