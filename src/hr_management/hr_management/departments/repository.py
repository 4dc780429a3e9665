from __future__ import annotations

from ..storage.entity_repository import EntityRepository


class DepartmentRepository(EntityRepository):
    """Departments carry no back-reference to their employees."""
