import sqlite3
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from ensembl_variation.dbsql.connection import create_schema  # noqa: E402


# Trio 1/2/3 in population CEU, an Unknown-gender mother (4 -> 5), an
# Unknown-gender father (6 -> 7), a strain, and two individuals sharing a name.
VARIATION_FIXTURE_SQL = """
INSERT INTO source (source_id, name, version) VALUES (1, 'dbSNP', '155');

INSERT INTO individual_type (individual_type_id, name, description) VALUES
    (1, 'fully_inbred', 'multiple organisms have the same genome sequence'),
    (3, 'outbred', 'a single organism which breeds freely');

INSERT INTO sample (sample_id, name, description) VALUES
    (1, 'NA12891', 'CEPH father'),
    (2, 'NA12892', 'CEPH mother'),
    (3, 'NA12878', 'CEPH daughter'),
    (4, 'X1', 'unknown-gender mother'),
    (5, 'X1-child', NULL),
    (6, 'X2', 'unknown-gender father'),
    (7, 'X2-child', NULL),
    (8, 'C57BL/6J', 'reference strain'),
    (9, 'DUP', 'first'),
    (10, 'DUP', 'second'),
    (100, 'CEU', 'Utah residents with European ancestry');

INSERT INTO individual
    (sample_id, gender, father_individual_sample_id, mother_individual_sample_id, individual_type_id)
VALUES
    (1, 'Male', NULL, NULL, 3),
    (2, 'Female', NULL, NULL, 3),
    (3, 'Female', 1, 2, 3),
    (4, 'Unknown', NULL, NULL, 3),
    (5, 'Male', NULL, 4, 3),
    (6, 'Unknown', NULL, NULL, 3),
    (7, 'Female', 6, NULL, 3),
    (8, 'Male', NULL, NULL, 1),
    (9, 'Male', NULL, NULL, 3),
    (10, 'Female', NULL, NULL, 3);

INSERT INTO population (sample_id) VALUES (100);
UPDATE sample SET size = 3 WHERE sample_id = 100;

INSERT INTO individual_population (individual_sample_id, population_sample_id) VALUES
    (1, 100), (2, 100), (3, 100);

INSERT INTO sample_synonym (sample_id, source_id, name) VALUES
    (3, 1, 'GM12878'),
    (100, 1, 'GM12878'),
    (8, NULL, 'B6');

INSERT INTO meta (meta_key, meta_value) VALUES
    ('individual.reference_strain', 'C57BL/6J'),
    ('individual.default_strain', 'A/J'),
    ('individual.default_strain', 'BALB/cJ'),
    ('individual.display_strain', 'DBA/2J');
"""


@pytest.fixture
def conn():
    """Empty in-memory variation store."""
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


@pytest.fixture
def populated_conn(conn):
    conn.executescript(VARIATION_FIXTURE_SQL)
    conn.commit()
    return conn


@pytest.fixture
def fixture_sql_file(tmp_path):
    path = tmp_path / "fixture.sql"
    path.write_text(VARIATION_FIXTURE_SQL, encoding="utf-8")
    return path
