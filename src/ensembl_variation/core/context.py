from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ImportContext:
    """
    Shared job context.
    Holds the job parameters, the variation store connection and
    whatever the job hands on to the next step.
    """

    config: Any
    logger: Any

    conn: Any = None
    params: Dict[str, Any] = field(default_factory=dict)

    stats: Dict[str, Any] = field(default_factory=dict)
    dataflow: List[Dict[str, Any]] = field(default_factory=list)

    debug: bool = False

    def param(self, name: str, default: Optional[Any] = None) -> Any:
        return self.params.get(name, default)
