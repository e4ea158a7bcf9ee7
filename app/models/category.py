# app/models/category.py
import uuid

from sqlalchemy import Column, Integer, String, Text, Uuid

from app.core.database import Base
from app.models.types import UTCDateTime, utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Basic Info
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="", server_default="")
    weight = Column(Integer, nullable=False, default=0)  # Ordering hint

    # Timestamps
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
