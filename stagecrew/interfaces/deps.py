"""
Repository dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from stagecrew.domain.models.notification import Notification
from stagecrew.domain.models.user import User
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository
from stagecrew.domain.repositories.notification_repository import NotificationRepository
from stagecrew.domain.repositories.unavailability_repository import UnavailabilityRepository
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.infrastructure.database import get_db
from stagecrew.infrastructure.repositories.assignment_repository import SQLAlchemyAssignmentRepository
from stagecrew.infrastructure.repositories.notification_repository import SQLAlchemyNotificationRepository
from stagecrew.infrastructure.repositories.unavailability_repository import SQLAlchemyUnavailabilityRepository
from stagecrew.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db, User)


def get_notification_repository(db: Session = Depends(get_db)) -> NotificationRepository:
    return SQLAlchemyNotificationRepository(db, Notification)


def get_assignment_repository(db: Session = Depends(get_db)) -> AssignmentRepository:
    return SQLAlchemyAssignmentRepository(db)


def get_unavailability_repository(db: Session = Depends(get_db)) -> UnavailabilityRepository:
    return SQLAlchemyUnavailabilityRepository(db)
