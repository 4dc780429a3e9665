from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.constants import SALARY_BUCKETS
from .model import Salary


def salary_distribution(records: Sequence[Mapping[str, Any]]) -> list[dict]:
    """Count salaries per total-pay bucket, in bucket order.

    Bounds are lower-inclusive: a total of exactly 3000 lands in "3000-5000".
    """
    totals = [Salary.from_record(r).total for r in records]
    return [
        {"label": label, "count": sum(1 for t in totals if low <= t < high)}
        for label, low, high in SALARY_BUCKETS
    ]


def with_total(records: Sequence[Mapping[str, Any]]) -> list[dict]:
    return [{**r, "total": Salary.from_record(r).total} for r in records]


def filter_salaries(records: Sequence[Mapping[str, Any]], args: Mapping[str, str]) -> list[Mapping[str, Any]]:
    month = args.get("month")
    if not month:
        return list(records)
    return [r for r in records if Salary.from_record(r).month == month]
