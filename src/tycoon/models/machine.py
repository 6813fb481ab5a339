"""Machine model — a production node with a fixed cycle time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tycoon.util.constants import MACHINE_DURABILITY_ON_PLACE
from tycoon.util.timeutil import Timestamp


@dataclass(frozen=True)
class Machine:
    """Read-only machine snapshot with resolved production parameters.

    Attributes:
        id: Record ID.
        durability: Durability stored by the backend.
        production_started_at: Production checkpoint. ``None`` = not configured.
        cycle_time_seconds: Resolved seconds per production cycle.
            ``None`` when no item data was available to resolve it.
        output_quantity_per_cycle: Units produced per completed cycle.
        item_id: Item definition the machine was placed from.
    """

    id: str
    durability: float = MACHINE_DURABILITY_ON_PLACE
    production_started_at: Optional[Timestamp] = None
    cycle_time_seconds: Optional[float] = None
    output_quantity_per_cycle: float = 1.0
    item_id: str = ""


@dataclass(frozen=True)
class ProductionProgress:
    """Estimated production state since the production checkpoint.

    ``progress_percent`` loops forever while ``cycles_completed`` saturates
    at the per-tick cap, so the bar keeps moving after the cap is reached.

    Attributes:
        progress_percent: Position within the current cycle (0-100).
        cycles_completed: Cycles credited, capped per tick.
        estimated_produced: Whole units expected from the credited cycles.
        can_produce: False when the machine is not configured.
        block_reason: Why the machine cannot produce, if it cannot.
        current_durability: Predicted durability after the credited cycles.
        average_energy: Mean energy of assigned employees currently working.
        active_workers: Assigned employees currently in their work phase.
    """

    progress_percent: float = 0.0
    cycles_completed: int = 0
    estimated_produced: int = 0
    can_produce: bool = False
    block_reason: Optional[str] = None
    current_durability: float = MACHINE_DURABILITY_ON_PLACE
    average_energy: float = 0.0
    active_workers: int = 0
