"""
Unavailability Repository Interface.
"""

from stagecrew.domain.models.unavailability import UnavailabilityStatus


class UnavailabilityRepository:
    """Interface for unavailability counters."""

    def count_by_status(self, status: UnavailabilityStatus) -> int:
        ...
