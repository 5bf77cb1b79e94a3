"""
Point-of-Sale Model

A place on campus where coffee can be ordered: a cafe, an espresso stand,
a bakery counter or a vending machine. Reviews always reference a POS.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campuscoffee.database import Base

if TYPE_CHECKING:
    from campuscoffee.models.review import Review


class PosType(str, Enum):
    """Kinds of point of sale."""
    CAFE = "cafe"
    ESPRESSO_STAND = "espresso_stand"
    BAKERY = "bakery"
    VENDING_MACHINE = "vending_machine"


class CampusType(str, Enum):
    """Campus a POS belongs to."""
    ALTSTADT = "altstadt"
    BERGHEIM = "bergheim"
    INF = "inf"


class Pos(Base):
    """
    Point of sale.

    Table: pos

    Indexes:
    - Primary key on id (automatic)
    - name: Unique index, POS are looked up and listed by name

    Example:
        pos = Pos(
            name="Schmelzpunkt",
            pos_type=PosType.CAFE.value,
            campus=CampusType.ALTSTADT.value,
            street="Hauptstrasse",
            house_number="90",
            postal_code=69117,
            city="Heidelberg",
        )
    """

    __tablename__ = "pos"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Display name of the point of sale"
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Short description shown to users"
    )

    pos_type: Mapped[str] = mapped_column(
        String(32),
        default=PosType.CAFE.value,
        nullable=False,
        comment="cafe, espresso_stand, bakery or vending_machine"
    )

    campus: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Campus the POS is located on"
    )

    # -------------------------------------------------------------------------
    # Address
    # -------------------------------------------------------------------------
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    house_number: Mapped[str] = mapped_column(String(16), nullable=False)
    postal_code: Mapped[int] = mapped_column(nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="pos",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"Pos(id={self.id}, name='{self.name}', campus='{self.campus}')"
