"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    # A producer cannot publish two games with the same name
    __table_args__ = (UniqueConstraint("name", "producer", name="uq_games_name_producer"),)

    # Autoincrement key gives the insertion order; clients only ever see the UUID
    seq: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(unique=True, index=True)
    name: Mapped[str] = mapped_column(String(100))
    producer: Mapped[str] = mapped_column(String(100))
    price: Mapped[float]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
