from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from services.database import Base

# -----------------------------------------------------------------------------
# SQLAlchemy Model
# -----------------------------------------------------------------------------
class Grape(Base):
    __tablename__ = "grapes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )

# -----------------------------------------------------------------------------
# Pydantic Models
# -----------------------------------------------------------------------------


class GrapeBase(BaseModel):
    """Base model definition for a grape."""
    name: str = Field(
        ...,
        description="Name of the grape variety (e.g., 'Red', 'Merlot')"
    )
    color: Optional[str] = Field(
        None,
        description="Skin color of the grape"
    )

    model_config = ConfigDict(from_attributes=True)


class GrapeCreate(GrapeBase):
    """Creation payload for a grape"""
    id: int = Field(
        0,
        description="Grape id; 0 lets storage assign one"
    )

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class GrapeRead(GrapeBase):
    """Read information about a grape"""
    id: int = Field(
        ...,
        description="Unique identifier for this grape"
    )
    created_at: datetime = Field(
        ...,
        description="Timestamp when this grape was created"
    )

    model_config = ConfigDict(from_attributes=True)
