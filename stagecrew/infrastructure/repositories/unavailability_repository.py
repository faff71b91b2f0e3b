"""
SQLAlchemy Implementation of Unavailability Repository.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from stagecrew.domain.models.unavailability import Unavailability, UnavailabilityStatus
from stagecrew.domain.repositories.unavailability_repository import UnavailabilityRepository


class SQLAlchemyUnavailabilityRepository(UnavailabilityRepository):

    def __init__(self, db: Session):
        self.db = db

    def count_by_status(self, status: UnavailabilityStatus) -> int:
        return (
            self.db.query(func.count(Unavailability.id))
            .filter(Unavailability.status == status)
            .scalar()
            or 0
        )
