"""Data access for POS records.

Functions flush but never commit: the calling service owns the transaction,
so a batch either lands as a whole or not at all.
"""

from sqlalchemy.orm import Session

from campuscoffee.db.models.pos import Pos as PosModel
from campuscoffee.errors import DuplicateResourceError, NotFoundError


def get_pos_by_id(
    db: Session, pos_id: int, for_update: bool = False
) -> PosModel | None:
    """Get a POS by ID, optionally locking the row until the transaction ends."""
    query = db.query(PosModel).filter(PosModel.id == pos_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def get_pos_by_name(
    db: Session, name: str, for_update: bool = False
) -> PosModel | None:
    """Get the first POS (in insertion order) carrying the given name."""
    query = db.query(PosModel).filter(PosModel.name == name).order_by(PosModel.id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def get_all_pos(db: Session) -> list[PosModel]:
    """Get all POS in insertion order."""
    return db.query(PosModel).order_by(PosModel.id).all()


def insert_pos(db: Session, pos: PosModel) -> PosModel:
    """Persist a fully-formed POS. Pure data access - no business logic."""
    if pos.id is not None and get_pos_by_id(db, pos.id) is not None:
        raise DuplicateResourceError(f"A POS with id {pos.id} already exists")

    db.add(pos)
    db.flush()
    db.refresh(pos)
    return pos


def update_pos(db: Session, pos: PosModel) -> PosModel:
    """Replace the stored POS sharing ``pos.id`` with the given state."""
    existing = get_pos_by_id(db, pos.id) if pos.id is not None else None
    if existing is None:
        raise NotFoundError(f"POS with id {pos.id} not found")

    if existing is not pos:
        existing.name = pos.name
        existing.description = pos.description
        existing.type = pos.type
        existing.campus = pos.campus
        existing.street = pos.street
        existing.house_number = pos.house_number
        existing.postal_code = pos.postal_code
        existing.city = pos.city
        existing.created_at = pos.created_at
        existing.updated_at = pos.updated_at

    db.flush()
    db.refresh(existing)
    return existing


def delete_all_pos(db: Session) -> int:
    """Delete every POS and return how many rows were removed."""
    deleted = db.query(PosModel).delete(synchronize_session=False)
    db.flush()
    db.expunge_all()
    return deleted
