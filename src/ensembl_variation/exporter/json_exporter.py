"""
json_exporter.py
JSON export for materialized individuals.

Parents are written as ids with a flag saying whether the reference was
resolved in the batch, never as nested objects: the graph can contain
cycles (an individual recorded as its own parent).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ensembl_variation.logger import get_logger
from ensembl_variation.registry.entities import Individual

log = get_logger("exporter.json_exporter")


def individual_to_dict(ind: Individual) -> Dict[str, Any]:
    return {
        "db_id": ind.db_id,
        "name": ind.name,
        "description": ind.description,
        "gender": ind.gender,
        "type_name": ind.type_name,
        "type_description": ind.type_description,
        "father_id": ind.father_id,
        "mother_id": ind.mother_id,
        "father_resolved": ind.father is not None,
        "mother_resolved": ind.mother is not None,
    }


def build_individuals_dict(individuals: Iterable[Individual]) -> Dict[str, Any]:
    items: List[Dict[str, Any]] = [individual_to_dict(ind) for ind in individuals]
    return {
        "count": len(items),
        "individuals": items,
    }


def serialize_individuals_to_json_string(individuals: Iterable[Individual], indent: int | None = 2) -> str:
    return json.dumps(
        build_individuals_dict(individuals),
        indent=indent,
        ensure_ascii=False,
    )


def export_individuals_json(individuals: Iterable[Individual], output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    individuals = list(individuals)
    log.info("Exporting %d individuals to: %s", len(individuals), output_path)

    json_str = serialize_individuals_to_json_string(individuals, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
