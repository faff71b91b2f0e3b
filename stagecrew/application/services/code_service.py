"""Code service — re-enumerate area and duty codes in a stable order.

Both passes are best-effort and re-runnable: each row is committed on its own
and rows already carrying the right code are left alone.
"""

from itertools import groupby
from typing import List, Tuple

import structlog

from stagecrew.domain.models.taxonomy import Area
from stagecrew.domain.repositories.taxonomy_repository import TaxonomyRepository

logger = structlog.get_logger(__name__)

CODE_WIDTH = 3


def area_prefix(area: Area) -> str:
    """'Area di Sala' -> 'S', 'Area Tecnica' -> 'T'."""
    words = (area.name or "").split()
    return words[-1][0].upper() if words else ""


def reassign_area_codes(repo: TaxonomyRepository) -> List[Tuple[str, str, str]]:
    """Areas by name get 001, 002, ... Returns (name, old, new) for every change."""
    changes = []
    for index, area in enumerate(repo.list_areas_by_name(), start=1):
        code = str(index).zfill(CODE_WIDTH)
        if area.code == code:
            continue
        changes.append((area.name, area.code, code))
        repo.set_code(area, code)
        logger.info("Area code reassigned", area=area.name, old=changes[-1][1], new=code)
    return changes


def reassign_duty_codes(repo: TaxonomyRepository) -> List[Tuple[str, str, str]]:
    """Duties numbered per area by creation time, prefixed with the area initial.

    The sort by area is stable, so each group stays in creation order.
    """
    duties = sorted(repo.list_duties_by_creation(), key=lambda d: d.area_id)

    changes = []
    for _, group in groupby(duties, key=lambda d: d.area_id):
        for index, duty in enumerate(group, start=1):
            code = f"{area_prefix(duty.area)}-{str(index).zfill(CODE_WIDTH)}"
            if duty.code == code:
                continue
            changes.append((duty.name, duty.code, code))
            repo.set_code(duty, code)
            logger.info("Duty code reassigned", duty=duty.name, area=duty.area.name, old=changes[-1][1], new=code)
    return changes
