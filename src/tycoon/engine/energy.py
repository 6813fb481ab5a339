"""Energy phase calculator — where an employee sits in its work/rest cycle.

Every employee runs the same cycle: a work phase where energy falls
linearly from 100% to 0%, then a rest phase where it climbs back to 100%.
The cycle is shifted per employee by its creation timestamp.

    position = (now + offset) mod cycle_total
    WORKING:  energy = 100 * (1 - position / work)
    RESTING:  energy = 100 * (position - work) / rest

All functions are pure: the caller supplies ``now``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from tycoon.loaders.economy_config_loader import DEFAULT_CONFIG
from tycoon.models.employee import EnergyStatus, Phase
from tycoon.util.timeutil import Timestamp, epoch_seconds, positive_mod

if TYPE_CHECKING:
    from tycoon.loaders.economy_config_loader import EconomyConfig
    from tycoon.models.employee import Employee


def phase_offset(entity: Optional[Employee]) -> float:
    """Deterministic phase offset in seconds (creation time as epoch seconds)."""
    if entity is None or entity.created_at is None:
        return 0.0
    return epoch_seconds(entity.created_at)


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def phase_of(entity: Optional[Employee], now: Timestamp,
             config: EconomyConfig | None = None) -> EnergyStatus:
    """Return the energy and phase of ``entity`` at ``now``."""
    cfg = config or DEFAULT_CONFIG
    work = cfg.energy_work_duration
    rest = cfg.energy_rest_duration
    total = cfg.energy_cycle_total
    if total <= 0:
        return EnergyStatus(100.0, Phase.WORKING)

    position = positive_mod(epoch_seconds(now) + phase_offset(entity), total)

    if position < work:
        return EnergyStatus(_clamp_percent(100.0 * (1.0 - position / work)), Phase.WORKING)

    rest_elapsed = position - work
    energy = 100.0 * (rest_elapsed / rest) if rest > 0 else 100.0
    return EnergyStatus(_clamp_percent(energy), Phase.RESTING)


def working_summary(employees: Iterable[Employee], now: Timestamp,
                    config: EconomyConfig | None = None) -> tuple[int, float]:
    """Count employees in their work phase and average their energy.

    Returns:
        ``(active_workers, average_energy)``; the average is 0 with no workers.
    """
    active = 0
    energy_sum = 0.0
    for emp in employees:
        status = phase_of(emp, now, config)
        if status.is_working:
            active += 1
            energy_sum += status.energy_percent
    return active, (energy_sum / active if active else 0.0)
