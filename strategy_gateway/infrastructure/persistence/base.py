"""Base model and mixins for all database tables.

- BaseModel: Base class for ALL models (id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for mutable models (combines the two)

Domain entities and events never inherit from these classes; the SQL
adapters map between them.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   └── StrategyModel (projection rows, replaced on upsert)
        └── EventLogModel (append-only, no updated_at)
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models (mutable and immutable).

    Provides:
    - id: UUID primary key (auto-generated unless set explicitly)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides id, created_at and updated_at with the mixin order fixed here.
    """

    __abstract__ = True
