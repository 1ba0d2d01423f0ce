"""Administrative POS operations.

Kept apart from ``campuscoffee.services.pos``: nothing here is
routed over HTTP. Test harnesses call it in-process to reset state between
scenarios.
"""

import logging

from sqlalchemy.orm import Session

import campuscoffee.repositories.pos as pos_repo

logger = logging.getLogger(__name__)


def clear(db: Session) -> int:
    """Remove every POS. Idempotent; the id sequence is left untouched."""
    try:
        deleted = pos_repo.delete_all_pos(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.warning("Cleared %d POS", deleted)
    return deleted
