from __future__ import annotations

import pytest

from ensembl_variation.core.exceptions import IndividualConflictError
from ensembl_variation.registry.entities import IndividualRow
from ensembl_variation.registry.materialize import build_registry, materialize_individuals


def row(id, father_id=None, mother_id=None, **kwargs):
    return IndividualRow(id=id, father_id=father_id, mother_id=mother_id, **kwargs)


def by_id(individuals):
    return {ind.db_id: ind for ind in individuals}


def test_empty_batch_returns_empty_list():
    assert materialize_individuals([]) == []


def test_output_follows_first_occurrence_order():
    rows = [row(5), row(2), row(9), row(2), row(1), row(5)]

    result = materialize_individuals(rows)

    assert [ind.db_id for ind in result] == [5, 2, 9, 1]


def test_one_instance_per_id():
    rows = [row(1, name="a"), row(1, name="a"), row(2), row(1, name="a")]

    result = materialize_individuals(rows)

    ids = [ind.db_id for ind in result]
    assert sorted(ids) == [1, 2]
    assert len(ids) == len(set(ids))


def test_backward_reference_resolves():
    # child row first, parent later in the batch
    result = by_id(materialize_individuals([row(1, father_id=2), row(2)]))

    assert result[1].father is result[2]


def test_forward_reference_resolves():
    result = by_id(materialize_individuals([row(2), row(1, father_id=2)]))

    assert result[1].father is result[2]


def test_row_order_does_not_change_links():
    a = by_id(materialize_individuals([row(1, father_id=2, mother_id=3), row(2), row(3)]))
    b = by_id(materialize_individuals([row(3), row(2), row(1, father_id=2, mother_id=3)]))

    for result in (a, b):
        assert result[1].father is result[2]
        assert result[1].mother is result[3]


def test_unresolved_parent_stays_empty():
    result = by_id(materialize_individuals([row(1, father_id=999, mother_id=998)]))

    assert result[1].father is None
    assert result[1].mother is None
    # the stored ids are kept so the parent can still be looked up later
    assert result[1].father_id == 999
    assert result[1].mother_id == 998


def test_parent_instance_is_shared_between_children():
    result = by_id(
        materialize_individuals([row(3), row(1, father_id=3), row(2, father_id=3)])
    )

    assert result[1].father is result[3]
    assert result[2].father is result[3]
    assert result[1].father is result[2].father


def test_deferred_parent_is_shared_between_children():
    result = by_id(
        materialize_individuals([row(1, mother_id=3), row(2, mother_id=3), row(3)])
    )

    assert result[1].mother is result[3]
    assert result[2].mother is result[3]


def test_deferred_links_target_the_child_not_the_parent():
    registry = build_registry([row(1, father_id=2), row(4, father_id=2), row(2)])

    assert registry.wanted_fathers == {2: [1, 4]}
    assert registry.individuals[2].father is None


def test_self_parent_resolves_to_itself():
    result = materialize_individuals([row(1, father_id=1)])

    assert len(result) == 1
    assert result[0].father is result[0]


def test_self_parent_does_not_break_repr_or_eq():
    ind = materialize_individuals([row(1, father_id=1, mother_id=1)])[0]

    assert "db_id=1" in repr(ind)
    assert ind == ind


def test_batch_without_parents_leaves_nothing_pending():
    registry = build_registry([row(1), row(2)])

    assert registry.wanted_fathers == {}
    assert registry.wanted_mothers == {}


def test_first_row_wins_for_duplicate_ids():
    result = materialize_individuals(
        [row(1, name="first", gender="Male"), row(1, name="second", gender="Female")]
    )

    assert len(result) == 1
    assert result[0].name == "first"
    assert result[0].gender == "Male"


def test_duplicate_row_can_fill_in_a_missing_parent():
    result = by_id(materialize_individuals([row(1), row(1, father_id=2), row(2)]))

    assert result[1].father_id == 2
    assert result[1].father is result[2]


def test_duplicate_row_does_not_override_a_parent():
    result = by_id(
        materialize_individuals([row(1, father_id=2), row(1, father_id=3), row(2), row(3)])
    )

    assert result[1].father_id == 2
    assert result[1].father is result[2]


def test_strict_mode_rejects_conflicting_duplicates():
    with pytest.raises(IndividualConflictError, match="name"):
        materialize_individuals([row(1, name="a"), row(1, name="b")], strict=True)


def test_strict_mode_accepts_identical_duplicates():
    result = materialize_individuals(
        [row(1, name="a", father_id=2), row(1, name="a", father_id=2), row(2)],
        strict=True,
    )

    assert [ind.db_id for ind in result] == [1, 2]


def test_strict_mode_compares_normalised_gender():
    result = materialize_individuals(
        [row(1, gender="Male"), row(1, gender="male"), row(2), row(2, gender="bogus")],
        strict=True,
    )
    assert [ind.gender for ind in result] == ["Male", "Unknown"]

    with pytest.raises(IndividualConflictError, match="gender"):
        materialize_individuals([row(1, gender="Male"), row(1, gender="Female")], strict=True)


def test_adaptor_is_attached_to_every_individual():
    sentinel = object()

    result = materialize_individuals([row(1), row(2, mother_id=1)], adaptor=sentinel)

    assert all(ind.adaptor is sentinel for ind in result)


def test_each_call_is_independent():
    first = materialize_individuals([row(1), row(2, father_id=1)])
    second = materialize_individuals([row(2, father_id=1)])

    assert second[0] is not first[1]
    assert second[0].father is None
