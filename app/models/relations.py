# app/models/relations.py

from sqlalchemy.orm import relationship

from .category import Category
from .task import Task


def setup_relationships():
    """
    Configure all SQLAlchemy relationships between models.
    """

    # Category to Tasks (One-to-Many)
    Category.tasks = relationship(
        "Task",
        back_populates="category",
        order_by="Task.created_at",
    )
    Task.category = relationship("Category", back_populates="tasks")
