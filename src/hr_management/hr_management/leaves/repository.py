from __future__ import annotations

from typing import Any, Optional

from ..core.enums import LeaveStatus
from ..storage.entity_repository import EmployeeOwnedRepository
from ..storage.repository import Record


class LeaveRepository(EmployeeOwnedRepository):
    """Leave requests.

    approve/reject overwrite the status whatever it was before, so a Rejected
    request can still be approved.
    """

    def set_status(self, leave_id: Any, status: LeaveStatus) -> Optional[Record]:
        return self.update(leave_id, {"status": status.value})

    def approve(self, leave_id: Any) -> Optional[Record]:
        return self.set_status(leave_id, LeaveStatus.APPROVED)

    def reject(self, leave_id: Any) -> Optional[Record]:
        return self.set_status(leave_id, LeaveStatus.REJECTED)
