"""POS service: batch create, list and batch update with invariant enforcement.

Every batch runs in a single transaction. Either all elements are applied or,
on the first failure, the transaction is rolled back and the error propagates.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

import campuscoffee.repositories.pos as pos_repo
from campuscoffee.db.models.pos import Pos as PosModel
from campuscoffee.errors import PosNotFoundError
from campuscoffee.schemas.pos import PosCreate, PosUpdate

logger = logging.getLogger(__name__)

# Fields an update replaces; name, id and createdAt stay as created.
MUTABLE_FIELDS = (
    "description",
    "type",
    "campus",
    "street",
    "house_number",
    "postal_code",
    "city",
)

# Fields a caller sets on creation; id and timestamps are owned by the service.
CREATE_FIELDS = ("name", *MUTABLE_FIELDS)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def list_pos(db: Session) -> list[PosModel]:
    """Return all POS in insertion order."""
    return pos_repo.get_all_pos(db)


def get_pos(db: Session, pos_id: int) -> PosModel:
    """
    Get a single POS.

    Raises:
        PosNotFoundError: If no POS has the given id
    """
    pos = pos_repo.get_pos_by_id(db, pos_id)
    if pos is None:
        raise PosNotFoundError(f"POS with id {pos_id} not found")
    return pos


def create_pos(db: Session, pos_list: list[PosCreate]) -> list[PosModel]:
    """
    Create a batch of POS.

    - Assigns a fresh id to every element (database sequence, never reused)
    - Sets createdAt = updatedAt = now
    - Preserves input order in the result

    Raises:
        DuplicateResourceError: If the store reports an id collision
    """
    now = _now()
    try:
        created = [
            pos_repo.insert_pos(
                db,
                PosModel(
                    **pos_data.model_dump(include=set(CREATE_FIELDS)),
                    created_at=now,
                    updated_at=now,
                ),
            )
            for pos_data in pos_list
        ]
        db.commit()
    except Exception:
        db.rollback()
        logger.error("Rolled back creation of %d POS", len(pos_list))
        raise

    logger.info("Created %d POS", len(created))
    return created


def _find_update_target(db: Session, pos_data: PosUpdate) -> PosModel:
    """Locate the POS an update refers to: by id when given, else first match by name."""
    if pos_data.id is not None:
        existing = pos_repo.get_pos_by_id(db, pos_data.id, for_update=True)
        criterion = f"id {pos_data.id}"
    else:
        existing = pos_repo.get_pos_by_name(db, pos_data.name, for_update=True)
        criterion = f"name {pos_data.name}"

    if existing is None:
        logger.warning("Update target not found: POS with %s", criterion)
        raise PosNotFoundError(f"POS with {criterion} not found")
    return existing


def update_pos(db: Session, pos_list: list[PosUpdate]) -> list[PosModel]:
    """
    Update a batch of POS.

    - Replaces description, type, campus and address with the supplied values
    - Preserves id, name and createdAt, refreshes updatedAt
    - Applies nothing if any element has no matching POS

    Raises:
        PosNotFoundError: If an element matches no existing POS
    """
    now = _now()
    try:
        updated = []
        for pos_data in pos_list:
            existing = _find_update_target(db, pos_data)
            replacement = PosModel(
                id=existing.id,
                name=existing.name,
                created_at=existing.created_at,
                updated_at=now,
                **pos_data.model_dump(include=set(MUTABLE_FIELDS)),
            )
            updated.append(pos_repo.update_pos(db, replacement))
        db.commit()
    except Exception:
        db.rollback()
        logger.error("Rolled back update of %d POS", len(pos_list))
        raise

    logger.info("Updated %d POS", len(updated))
    return updated
