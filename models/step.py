"""
models/step.py
--------------
Domain model for the ordered steps of a project.
"""

from dataclasses import dataclass
from typing import Optional

from utils.decimals import optional_int


@dataclass
class Step:
    project_id: int
    step_text: str
    step_order: Optional[int] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        self.step_order = optional_int(self.step_order)

    def __str__(self) -> str:
        return f"{self.step_order}. {self.step_text}"
