from sqlalchemy import String, DateTime, Text, UUID, ForeignKey, Date, Enum, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from sqlalchemy.sql import func
from datetime import datetime, date
from typing import Optional, Tuple
import uuid as uuid_pkg

from .database import Base
from timelog.scheduling.intervals import Category, Interval
from timelog.scheduling.clock import minute_of_day

class User(Base):
    """Represents an account that owns time logs."""
    __tablename__ = "users"

    id: Mapped[uuid_pkg.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid_pkg.uuid4)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    hashed_password: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    time_logs = relationship("TimeLog", back_populates="user", cascade="all, delete-orphan")

class TimeLog(Base):
    """A labelled span of one calendar day. start_time/end_time are naive local times."""
    __tablename__ = "time_logs"
    __table_args__ = (
        Index("ix_time_logs_user_day", "user_id", "local_day"),
    )

    id: Mapped[uuid_pkg.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid_pkg.uuid4)
    user_id: Mapped[uuid_pkg.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )
    local_day: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    utilization: Mapped[Category] = mapped_column(Enum(Category, name="utilization"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="time_logs")

    def minute_span(self) -> Tuple[int, int]:
        return (
            minute_of_day(self.start_time, self.local_day),
            minute_of_day(self.end_time, self.local_day),
        )

    def to_interval(self) -> Interval:
        """Minute-of-day view of this row for the scheduling core."""
        start, end = self.minute_span()
        return Interval(
            id=str(self.id),
            start=start,
            end=end,
            category=self.utilization,
            description=self.description,
        )
