"""
SQLAlchemy Implementation of Area / Duty Repository.
"""

from typing import List

from sqlalchemy.orm import Session, joinedload

from stagecrew.domain.models.taxonomy import Area, Duty
from stagecrew.domain.repositories.taxonomy_repository import TaxonomyRepository


class SQLAlchemyTaxonomyRepository(TaxonomyRepository):

    def __init__(self, db: Session):
        self.db = db

    def list_areas_by_name(self) -> List[Area]:
        return self.db.query(Area).order_by(Area.name.asc()).all()

    def list_duties_by_creation(self) -> List[Duty]:
        return (
            self.db.query(Duty)
            .options(joinedload(Duty.area))
            .order_by(Duty.created_at.asc(), Duty.id.asc())
            .all()
        )

    def set_code(self, entity: Area | Duty, code: str) -> None:
        entity.code = code
        self.db.add(entity)
        self.db.commit()
