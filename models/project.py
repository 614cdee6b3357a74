"""
models/project.py
-----------------
Domain model for a tracked project.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from models.category import Category
from models.material import Material
from models.step import Step
from utils.decimals import normalize_decimal, optional_int

_HOURS_FIELDS = ("estimated_hours", "actual_hours")


@dataclass
class Project:
    """
    Represents a single project and, once fetched by id, its related rows.

    Attributes:
        id: Database primary key (None until inserted). Cannot change once set.
        name: Project name (required).
        estimated_hours: Estimate, normalized to two decimal places.
        actual_hours: Hours spent, normalized to two decimal places.
        difficulty: Rating from 1 to 5.
        notes: Free text.
        materials: Populated only by a fetch by id.
        steps: Populated only by a fetch by id.
        categories: Populated only by a fetch by id.
    """
    name: str
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None
    id: Optional[int] = None
    materials: list[Material] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    def __setattr__(self, name: str, value) -> None:
        if name in _HOURS_FIELDS:
            value = normalize_decimal(value)
        elif name == "difficulty":
            value = optional_int(value)
        elif name == "id":
            current = self.__dict__.get("id")
            if current is not None and value != current:
                raise AttributeError(
                    f"Project id is immutable (already {current}, got {value})"
                )
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return (
            f"ID={self.id}, name={self.name}, estimated hours={self.estimated_hours}, "
            f"actual hours={self.actual_hours}, difficulty={self.difficulty}, "
            f"notes={self.notes}"
        )
