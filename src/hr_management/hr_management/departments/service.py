from __future__ import annotations

from typing import Any, Mapping, Sequence

from .model import Department


def search_departments(records: Sequence[Mapping[str, Any]], term: str | None) -> list[Mapping[str, Any]]:
    """Case-insensitive match on department name or manager."""
    if not term:
        return list(records)
    term = term.lower()
    out = []
    for r in records:
        d = Department.from_record(r)
        if term in str(d.name).lower() or term in str(d.manager).lower():
            out.append(r)
    return out


def filter_departments(records: Sequence[Mapping[str, Any]], args: Mapping[str, str]) -> list[Mapping[str, Any]]:
    return search_departments(records, args.get("search"))
