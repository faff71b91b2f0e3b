"""Emergency unlock for a locked-out account.

Operator tool, deliberately outside the HTTP surface:

    python scripts/unlock_user.py someone@example.com
"""

import sys

from stagecrew.application.services.account_service import unlock_account
from stagecrew.core.exceptions import EntityNotFoundException
from stagecrew.core.logging import configure_logging
from stagecrew.domain.models import Notification, User
from stagecrew.infrastructure.database import SessionLocal
from stagecrew.infrastructure.repositories.notification_repository import SQLAlchemyNotificationRepository
from stagecrew.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Usage: unlock_user.py <email>")
        return 2

    email = argv[0].strip()
    db = SessionLocal()
    try:
        unlock_account(
            SQLAlchemyUserRepository(db, User),
            SQLAlchemyNotificationRepository(db, Notification),
            email,
        )
    except EntityNotFoundException:
        print(f"User not found: {email}")
        return 1
    finally:
        db.close()

    print(f"Account unlocked: {email}")
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
