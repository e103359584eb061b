"""Database table models."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobmatch.db.base import Base
from jobmatch.models import SavedResume, generate_id, utcnow


class SavedResumeRecord(Base):
    """A saved resume version."""

    __tablename__ = "saved_resumes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text, default="")
    job_description: Mapped[str] = mapped_column(Text, default="")
    saved_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    def to_model(self) -> SavedResume:
        # SQLite drops the offset; stored values are UTC.
        saved_at = self.saved_at
        if saved_at is not None and saved_at.tzinfo is None:
            saved_at = saved_at.replace(tzinfo=UTC)
        return SavedResume(
            id=self.id,
            name=self.name,
            content=self.content,
            job_description=self.job_description,
            saved_at=saved_at,
        )
