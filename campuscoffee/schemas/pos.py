from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from campuscoffee.domain.pos import CampusType, PosType

# Upper bound of the INTEGER id column
MAX_POS_ID = 2**31 - 1


class PosBase(BaseModel):
    # camelCase on the wire, snake_case in Python; both accepted on input
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str
    type: PosType
    campus: CampusType
    street: str = Field(..., min_length=1, max_length=255)
    house_number: str = Field(..., min_length=1, max_length=16)
    postal_code: int
    city: str = Field(..., min_length=1, max_length=255)


class PosCreate(PosBase):
    """Creation payload. Any id or timestamps sent by the caller are ignored."""


class PosUpdate(PosBase):
    """Update payload.

    The target is looked up by ``id``; when ``id`` is omitted, the first POS
    whose ``name`` equals the payload's name is updated instead.
    """

    id: int | None = Field(None, ge=1, le=MAX_POS_ID)


class Pos(PosBase):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    created_at: datetime
    updated_at: datetime
