"""
models/material.py
------------------
Domain model for materials needed by a project.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from utils.decimals import normalize_decimal, optional_int


@dataclass
class Material:
    """
    A material required by a project.

    Attributes:
        id: Database primary key (None for new records).
        project_id: Owning project.
        name: Material name.
        num_required: Quantity needed.
        cost: Cost, normalized to two decimal places.
    """
    project_id: int
    name: str
    num_required: Optional[int] = None
    cost: Optional[Decimal] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        self.num_required = optional_int(self.num_required)
        self.cost = normalize_decimal(self.cost)

    def __str__(self) -> str:
        qty = f"{self.num_required} x " if self.num_required is not None else ""
        cost = f" ({self.cost})" if self.cost is not None else ""
        return f"{qty}{self.name}{cost}"
