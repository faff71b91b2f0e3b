"""Re-enumerate area and duty codes.

    python scripts/reassign_codes.py            # areas, then duties
    python scripts/reassign_codes.py areas
    python scripts/reassign_codes.py duties

Safe to re-run after a partial failure: rows already correct are skipped.
"""

import sys

from stagecrew.application.services.code_service import reassign_area_codes, reassign_duty_codes
from stagecrew.core.logging import configure_logging
from stagecrew.infrastructure.database import SessionLocal
from stagecrew.infrastructure.repositories.taxonomy_repository import SQLAlchemyTaxonomyRepository

PASSES = {
    "areas": reassign_area_codes,
    "duties": reassign_duty_codes,
}


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    selected = argv or list(PASSES)
    unknown = [name for name in selected if name not in PASSES]
    if unknown:
        print(f"Unknown pass: {', '.join(unknown)} (expected: {', '.join(PASSES)})")
        return 2

    db = SessionLocal()
    try:
        repo = SQLAlchemyTaxonomyRepository(db)
        for name in selected:
            changes = PASSES[name](repo)
            for label, old, new in changes:
                print(f"{label}: {old} -> {new}")
            print(f"{name}: {len(changes)} code(s) reassigned")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
