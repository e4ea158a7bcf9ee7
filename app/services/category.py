# app/services/category.py
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.task import Task
from app.models.types import utcnow
from app.schemas.category import CategoryDTO


class CategoryService:
    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _as_uuid(value) -> uuid.UUID:
        """Accept UUIDs in object or string form."""
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))

    @staticmethod
    def _next_timestamp(*previous: Optional[datetime]) -> datetime:
        """Current UTC time, bumped past any of the given timestamps."""
        now = utcnow()
        for value in previous:
            if value is None:
                continue
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            if now <= value:
                now = value + timedelta(microseconds=1)
        return now

    def get_all_categories(self) -> List[Category]:
        """Get every category in the store's natural order"""
        self.logger.debug("Fetching all categories")
        return self.db.query(Category).all()

    def get_category_by_id(self, category_id: Union[uuid.UUID, str]) -> Optional[Category]:
        """Get a category by ID, or None when it doesn't exist"""
        category_id = self._as_uuid(category_id)
        self.logger.debug(f"Fetching category {category_id}")
        return self.db.get(Category, category_id)

    def create_category(self, category_in: CategoryDTO) -> Category:
        """Create a new category"""
        timestamp = utcnow()
        category = Category(
            id=uuid.uuid4(),
            name=category_in.name,
            description=category_in.description or "",
            weight=0,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)

        self.logger.info(f"Created category {category.id} ('{category.name}')")
        return category

    def update_category(self, category: Category, category_in: CategoryDTO) -> Category:
        """Overwrite name and description in place"""
        category.name = category_in.name
        category.description = category_in.description or ""
        category.updated_at = self._next_timestamp(
            category.created_at, category.updated_at
        )
        category_id = category.id

        self.db.commit()

        self.logger.info(f"Updated category {category_id}")
        return category

    def delete_category(self, category: Category) -> None:
        """Delete a category. Callers make sure it still exists."""
        category_id = category.id
        self.db.delete(category)
        self.db.commit()

        self.logger.info(f"Deleted category {category_id}")

    def count_related_tasks(self, category_id: Union[uuid.UUID, str]) -> int:
        """Count tasks attached to a category"""
        category_id = self._as_uuid(category_id)
        count = self.db.query(Task).filter(Task.category_id == category_id).count()
        self.logger.debug(f"Category {category_id} has {count} related tasks")
        return count

    def exists(self, category_id: Union[uuid.UUID, str]) -> bool:
        """Check whether a category with this ID is stored"""
        category_id = self._as_uuid(category_id)
        found = (
            self.db.query(Category.id).filter(Category.id == category_id).first()
            is not None
        )
        self.logger.debug(f"Category {category_id} exists: {found}")
        return found
