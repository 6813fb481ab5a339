"""Deposit model — a resource node harvested by employees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tycoon.util.timeutil import Timestamp


@dataclass(frozen=True)
class Deposit:
    """Read-only deposit snapshot.

    Attributes:
        id: Record ID.
        quantity_remaining: Resource units left in the deposit.
        last_harvest_at: Last harvest checkpoint. ``None`` = never harvested.
        size: Deposit size; scales employee and machine slots.
        resource_id: Item ID of the mined resource.
    """

    id: str
    quantity_remaining: float = 0.0
    last_harvest_at: Optional[Timestamp] = None
    size: int = 1
    resource_id: str = ""


@dataclass(frozen=True)
class MiningProgress:
    """Estimated mining state since the last harvest checkpoint.

    Attributes:
        progress_percent: Position within the harvest interval (0-100).
        estimated_yield: Whole units expected at the next harvest.
        average_energy: Mean energy of employees currently working.
        active_workers: Employees currently in their work phase.
    """

    progress_percent: float = 0.0
    estimated_yield: int = 0
    average_energy: float = 0.0
    active_workers: int = 0
