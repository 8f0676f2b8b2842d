from __future__ import annotations

from pathlib import Path
from typing import Dict

from ensembl_variation.core.exceptions import MissingInputError


def read_database_conf(path: str | Path) -> Dict[str, str]:
    """
    Parse a ``KEY = value`` connection file.

    ``#`` starts a comment; blank lines and surrounding whitespace are
    ignored. Only the first ``=`` splits, so values may contain ``=``.
    """
    path = Path(path)
    if not path.exists():
        raise MissingInputError(f"Could not open {path} for reading")

    conf: Dict[str, str] = {}
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            key, _, value = line.partition("=")
            conf[key.strip()] = value.strip()
    return conf
