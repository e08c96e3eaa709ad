"""SQLAlchemy ORM model for the sync audit log."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from synctool.infrastructure.database.base import Base


class SyncLogModel(Base):
    """ORM model — maps to the 'sync_logs' table."""

    __tablename__ = "sync_logs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("sync_users.client_id"), nullable=False, index=True,
    )
    sync_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    records_synced: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<SyncLogModel(id={self.id}, client_id='{self.client_id}', "
            f"status='{self.status}', records={self.records_synced})>"
        )
