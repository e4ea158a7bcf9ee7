# app/models/task.py
import uuid

from sqlalchemy import Boolean, Column, ForeignKey, String, Text, Uuid

from app.core.database import Base
from app.models.types import UTCDateTime, utcnow


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Basic Info
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="", server_default="")
    is_completed = Column(Boolean, default=False, nullable=False)

    # Category relationship
    category_id = Column(
        Uuid, ForeignKey("categories.id"), nullable=False, index=True
    )

    # Timestamps
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(
        UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', category_id={self.category_id})>"
