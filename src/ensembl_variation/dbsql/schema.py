"""
Variation schema subset used by the adaptors and the phenotype imports.

Column names follow the variation database so queries read the same
against a full copy; types are relaxed to what sqlite needs.
"""

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS meta (
    meta_id     INTEGER PRIMARY KEY AUTOINCREMENT,
    species_id  INTEGER DEFAULT 1,
    meta_key    TEXT NOT NULL,
    meta_value  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS source (
    source_id       INTEGER PRIMARY KEY AUTOINCREMENT,
    name            TEXT NOT NULL,
    version         TEXT,
    description     TEXT,
    url             TEXT,
    type            TEXT,
    somatic_status  TEXT DEFAULT 'germline',
    data_types      TEXT
);

CREATE TABLE IF NOT EXISTS sample (
    sample_id    INTEGER PRIMARY KEY AUTOINCREMENT,
    name         TEXT,
    size         INTEGER,
    description  TEXT
);

CREATE TABLE IF NOT EXISTS sample_synonym (
    sample_synonym_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    sample_id          INTEGER NOT NULL REFERENCES sample(sample_id),
    source_id          INTEGER REFERENCES source(source_id),
    name               TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS individual_type (
    individual_type_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    name                TEXT NOT NULL,
    description         TEXT
);

CREATE TABLE IF NOT EXISTS individual (
    sample_id                    INTEGER PRIMARY KEY REFERENCES sample(sample_id),
    gender                       TEXT NOT NULL DEFAULT 'Unknown',
    father_individual_sample_id  INTEGER,
    mother_individual_sample_id  INTEGER,
    individual_type_id           INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS population (
    sample_id  INTEGER PRIMARY KEY REFERENCES sample(sample_id)
);

CREATE TABLE IF NOT EXISTS individual_population (
    individual_sample_id  INTEGER NOT NULL REFERENCES individual(sample_id),
    population_sample_id  INTEGER NOT NULL REFERENCES population(sample_id)
);

CREATE TABLE IF NOT EXISTS publication (
    publication_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    title           TEXT,
    pmid            INTEGER
);

CREATE TABLE IF NOT EXISTS study (
    study_id            INTEGER PRIMARY KEY AUTOINCREMENT,
    source_id           INTEGER REFERENCES source(source_id),
    name                TEXT,
    stable_id           TEXT,
    description         TEXT,
    url                 TEXT,
    external_reference  TEXT,
    study_type          TEXT
);

CREATE TABLE IF NOT EXISTS study_publication (
    study_id        INTEGER NOT NULL REFERENCES study(study_id),
    publication_id  INTEGER NOT NULL REFERENCES publication(publication_id)
);

CREATE TABLE IF NOT EXISTS associate_study (
    study1_id  INTEGER NOT NULL REFERENCES study(study_id),
    study2_id  INTEGER NOT NULL REFERENCES study(study_id),
    PRIMARY KEY (study1_id, study2_id)
);

CREATE TABLE IF NOT EXISTS phenotype (
    phenotype_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    stable_id     TEXT,
    name          TEXT,
    description   TEXT UNIQUE
);

CREATE TABLE IF NOT EXISTS phenotype_feature (
    phenotype_feature_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    phenotype_id          INTEGER REFERENCES phenotype(phenotype_id),
    source_id             INTEGER REFERENCES source(source_id),
    study_id              INTEGER REFERENCES study(study_id),
    type                  TEXT,
    object_id             TEXT,
    is_significant        INTEGER DEFAULT 1
);
"""
