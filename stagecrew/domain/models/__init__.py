"""Import every model so the declarative metadata is complete."""

from stagecrew.domain.models.company import Company
from stagecrew.domain.models.user import User
from stagecrew.domain.models.taxonomy import Area, Duty, UserAreaDuty
from stagecrew.domain.models.workday import Assignment, TaskType, TimeEntry, Workday
from stagecrew.domain.models.unavailability import Unavailability, UnavailabilityStatus
from stagecrew.domain.models.notification import Notification

__all__ = [
    "Company",
    "User",
    "Area",
    "Duty",
    "UserAreaDuty",
    "Assignment",
    "TaskType",
    "TimeEntry",
    "Workday",
    "Unavailability",
    "UnavailabilityStatus",
    "Notification",
]
