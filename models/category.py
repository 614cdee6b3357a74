"""
models/category.py
------------------
Domain model for project categories.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """A category linked to projects through the project_category table."""
    name: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"
