"""
Models package initialization
Import all models and setup relationships
"""

from .category import Category

# Import and setup relationships
from .relations import setup_relationships
from .task import Task

# Setup all relationships after models are imported
setup_relationships()

# Make models available at package level
__all__ = [
    "Category",
    "Task",
]
