from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from campuscoffee.api.deps import get_db
from campuscoffee.schemas.pos import MAX_POS_ID, Pos, PosCreate, PosUpdate
from campuscoffee.services.pos import create_pos, get_pos, list_pos, update_pos

router = APIRouter(prefix="/pos", tags=["pos"])


@router.post("", response_model=list[Pos], status_code=status.HTTP_201_CREATED)
def create_pos_batch(
    pos_data: list[PosCreate],
    db: Session = Depends(get_db),
):
    """
    Create a batch of POS. The response lists the created POS in request order,
    each with its assigned id and timestamps. Either all POS are created or none.
    """
    created = create_pos(db, pos_data)
    return [Pos.model_validate(pos) for pos in created]


@router.get("", response_model=list[Pos])
def get_all_pos(db: Session = Depends(get_db)):
    """
    Get all POS in insertion order.
    """
    return [Pos.model_validate(pos) for pos in list_pos(db)]


@router.get("/{pos_id}", response_model=Pos)
def get_pos_by_id(
    pos_id: int = Path(..., ge=1, le=MAX_POS_ID),
    db: Session = Depends(get_db),
):
    """
    Get a POS by ID.
    """
    return Pos.model_validate(get_pos(db, pos_id))


@router.put("", response_model=list[Pos])
def update_pos_batch(
    pos_data: list[PosUpdate],
    db: Session = Depends(get_db),
):
    """
    Update a batch of POS.

    Each element is matched by id, or by name when no id is given.
    If any element matches nothing, the whole batch fails with 404.
    """
    updated = update_pos(db, pos_data)
    return [Pos.model_validate(pos) for pos in updated]
