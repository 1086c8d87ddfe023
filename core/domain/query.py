# Entidades de Query

from dataclasses import dataclass, field
from typing import Any, Dict, List

from core.domain.schema import Column
from core.domain.values import Row


@dataclass(frozen=True)
class QueryResult:
    """Página de resultados de una tabla"""

    columns: List[Column] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    total: int = 0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": [c.to_dict() for c in self.columns],
            "rows": [[v.to_json() for v in row] for row in self.rows],
            "total": self.total,
        }
