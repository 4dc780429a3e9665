from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Department:
    department_id: Optional[str]
    name: str
    manager: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Department":
        return cls(
            department_id=str(data["id"]) if data.get("id") is not None else None,
            name=data.get("name") or "",
            manager=data.get("manager") or "",
            description=data.get("description") or "",
        )
