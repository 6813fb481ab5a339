"""Employee model — a worker whose efficiency follows the energy cycle.

The creation timestamp doubles as the employee's phase offset, so two
employees hired at different times are out of sync while each one resumes
its own cycle consistently across reloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tycoon.util.timeutil import Timestamp


class Phase(Enum):
    """Phase of the repeating work/rest cycle."""

    WORKING = "working"
    RESTING = "resting"


@dataclass(frozen=True)
class Employee:
    """Read-only employee snapshot.

    Attributes:
        id: Record ID.
        created_at: Creation timestamp; the only source of the phase offset.
            ``None`` means offset 0.
        skill_value: Skill applied to mining / production (backend ``mining``).
        name: Display name.
    """

    id: str
    created_at: Optional[Timestamp] = None
    skill_value: float = 0.0
    name: str = ""


@dataclass(frozen=True)
class EnergyStatus:
    """Energy of an employee at one instant."""

    energy_percent: float
    phase: Phase

    @property
    def is_working(self) -> bool:
        return self.phase is Phase.WORKING
