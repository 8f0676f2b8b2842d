from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ensembl_variation.core.exceptions import RowDecodeError


MALE = "Male"
FEMALE = "Female"
UNKNOWN = "Unknown"
GENDERS = (MALE, FEMALE, UNKNOWN)

STRAIN_TYPE = "fully_inbred"


def normalize_gender(value: Optional[str]) -> str:
    """
    Map a stored gender onto Male/Female/Unknown.

    Matching is case-insensitive; NULL, empty or unrecognised values
    become Unknown.
    """
    if not value:
        return UNKNOWN
    v = str(value).strip().lower()
    for g in GENDERS:
        if v == g.lower():
            return g
    return UNKNOWN


def _to_id(value: Any, field_name: str, *, required: bool) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise RowDecodeError(f"Individual row is missing '{field_name}'")
        return None
    if isinstance(value, bool):
        raise RowDecodeError(f"Invalid {field_name}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise RowDecodeError(f"Invalid {field_name}: {value!r}") from exc


# -----------------------------
# Boundary row
# -----------------------------

@dataclass(frozen=True, slots=True)
class IndividualRow:
    """
    One flat individual row as selected by the adaptors:

        sample_id, name, description, gender,
        father_individual_sample_id, mother_individual_sample_id,
        individual_type.name, individual_type.description
    """
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    gender: Optional[str] = None
    father_id: Optional[int] = None
    mother_id: Optional[int] = None
    type_name: Optional[str] = None
    type_description: Optional[str] = None

    FIELDS = (
        "id",
        "name",
        "description",
        "gender",
        "father_id",
        "mother_id",
        "type_name",
        "type_description",
    )

    @classmethod
    def from_sequence(cls, row: Sequence[Any]) -> "IndividualRow":
        if len(row) != len(cls.FIELDS):
            raise RowDecodeError(
                f"Expected {len(cls.FIELDS)} columns for an individual row, got {len(row)}"
            )
        return cls.from_mapping(dict(zip(cls.FIELDS, row)))

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "IndividualRow":
        return cls(
            id=_to_id(row.get("id"), "id", required=True),
            name=row.get("name"),
            description=row.get("description"),
            gender=row.get("gender"),
            father_id=_to_id(row.get("father_id"), "father_id", required=False),
            mother_id=_to_id(row.get("mother_id"), "mother_id", required=False),
            type_name=row.get("type_name"),
            type_description=row.get("type_description"),
        )


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Individual:
    db_id: Optional[int]
    name: Optional[str] = None
    description: Optional[str] = None
    gender: str = UNKNOWN

    # Raw parent ids as stored
    father_id: Optional[int] = None
    mother_id: Optional[int] = None

    type_name: Optional[str] = None
    type_description: Optional[str] = None

    # Resolved parent references (may be cyclic, so kept out of eq/repr)
    father: Optional["Individual"] = field(default=None, repr=False, compare=False)
    mother: Optional["Individual"] = field(default=None, repr=False, compare=False)

    adaptor: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.gender = normalize_gender(self.gender)

    @classmethod
    def from_row(cls, row: IndividualRow, adaptor: Any = None) -> "Individual":
        return cls(
            db_id=row.id,
            name=row.name,
            description=row.description,
            gender=row.gender,
            father_id=row.father_id,
            mother_id=row.mother_id,
            type_name=row.type_name,
            type_description=row.type_description,
            adaptor=adaptor,
        )

    def is_strain(self) -> bool:
        return self.type_name == STRAIN_TYPE

    def get_father_individual(self) -> Optional["Individual"]:
        """Resolved father, loaded by id through the adaptor when missing."""
        if self.father is None and self.father_id is not None and self.adaptor is not None:
            self.father = self.adaptor.fetch_by_dbID(self.father_id)
        return self.father

    def get_mother_individual(self) -> Optional["Individual"]:
        if self.mother is None and self.mother_id is not None and self.adaptor is not None:
            self.mother = self.adaptor.fetch_by_dbID(self.mother_id)
        return self.mother

    def get_all_child_individuals(self) -> List["Individual"]:
        """Children of this individual, fetched through the owning adaptor."""
        if self.adaptor is None:
            return []
        return self.adaptor.fetch_all_by_parent_individual(self)


@dataclass(slots=True)
class Population:
    db_id: Optional[int]
    name: Optional[str] = None
    description: Optional[str] = None
    size: Optional[int] = None

    adaptor: Any = field(default=None, repr=False, compare=False)


# -----------------------------
# Arena
# -----------------------------

@dataclass(slots=True)
class IndividualRegistry:
    """
    Per-batch store of individuals keyed by db id.

    Insertion order is first-occurrence order. ``wanted_fathers`` and
    ``wanted_mothers`` map a parent id that was not yet available to the
    ids of the children waiting for it.
    """
    individuals: Dict[int, Individual] = field(default_factory=dict)
    wanted_fathers: Dict[int, List[int]] = field(default_factory=dict)
    wanted_mothers: Dict[int, List[int]] = field(default_factory=dict)

    def register_individual(self, ind: Individual) -> None:
        self.individuals[ind.db_id] = ind

    def get_individual(self, db_id: Optional[int]) -> Optional[Individual]:
        if db_id is None:
            return None
        return self.individuals.get(db_id)

    def want_father(self, father_id: int, child_id: int) -> None:
        self.wanted_fathers.setdefault(father_id, []).append(child_id)

    def want_mother(self, mother_id: int, child_id: int) -> None:
        self.wanted_mothers.setdefault(mother_id, []).append(child_id)

    def __len__(self) -> int:
        return len(self.individuals)
