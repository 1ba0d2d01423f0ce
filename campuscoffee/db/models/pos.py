from sqlalchemy import Column, DateTime, Enum, Integer, String

from campuscoffee.db.base import Base
from campuscoffee.domain.pos import CampusType, PosType


class Pos(Base):
    __tablename__ = "pos"
    # Never hand out an id twice, even after the table has been emptied
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(String, nullable=False)
    type = Column(
        Enum(PosType, name="pos_type", native_enum=False, length=32, create_constraint=True),
        nullable=False,
    )
    campus = Column(
        Enum(CampusType, name="campus_type", native_enum=False, length=32, create_constraint=True),
        nullable=False,
    )
    street = Column(String(255), nullable=False)
    house_number = Column(String(16), nullable=False)
    postal_code = Column(Integer, nullable=False)
    city = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
