"""SQLAlchemy ORM models for a client's destination tables."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from synctool.infrastructure.database.base import Base


class CredentialRowModel(Base):
    """ORM model — maps to the 'acc_users' table.

    A user id is unique within its client; the password is stored verbatim.
    """

    __tablename__ = "acc_users"

    client_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    password: Mapped[str] = mapped_column("pass", String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<CredentialRowModel(client_id='{self.client_id}', id='{self.id}')>"


class MasterRowModel(Base):
    """ORM model — maps to the 'acc_master' table (code is unique per client)."""

    __tablename__ = "acc_master"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    place: Mapped[str | None] = mapped_column(String(255), nullable=True)
    super_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    client_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("client_id", "code", name="uq_acc_master_client_code"),
    )

    def __repr__(self) -> str:
        return f"<MasterRowModel(client_id='{self.client_id}', code='{self.code}')>"
