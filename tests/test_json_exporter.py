from __future__ import annotations

import json

from ensembl_variation.exporter import (
    build_individuals_dict,
    export_individuals_json,
    serialize_individuals_to_json_string,
)
from ensembl_variation.registry.entities import IndividualRow
from ensembl_variation.registry.materialize import materialize_individuals


def _batch():
    return materialize_individuals(
        [
            IndividualRow(id=3, name="NA12878", gender="Female", father_id=1, mother_id=2),
            IndividualRow(id=1, name="NA12891", gender="Male"),
        ]
    )


def test_parents_are_written_as_ids():
    data = build_individuals_dict(_batch())

    assert data["count"] == 2
    child = data["individuals"][0]
    assert child["db_id"] == 3
    assert child["father_id"] == 1
    assert child["father_resolved"] is True
    assert child["mother_id"] == 2
    assert child["mother_resolved"] is False


def test_self_parent_serializes():
    batch = materialize_individuals([IndividualRow(id=1, father_id=1)])

    data = json.loads(serialize_individuals_to_json_string(batch))

    assert data["individuals"][0]["father_id"] == 1
    assert data["individuals"][0]["father_resolved"] is True


def test_export_writes_file(tmp_path):
    out = tmp_path / "nested" / "individuals.json"

    export_individuals_json(_batch(), out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [ind["name"] for ind in data["individuals"]] == ["NA12878", "NA12891"]
