"""
Area / Duty Repository Interface.
"""

from typing import List

from stagecrew.domain.models.taxonomy import Area, Duty


class TaxonomyRepository:
    """Interface for the area/duty code maintenance."""

    def list_areas_by_name(self) -> List[Area]:
        ...

    def list_duties_by_creation(self) -> List[Duty]:
        ...

    def set_code(self, entity: Area | Duty, code: str) -> None:
        """Persist one code change immediately."""
        ...
