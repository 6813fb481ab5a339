"""Mining estimator — predicted harvest since the last checkpoint.

The backend commits the real yield; this is a UI prediction only.

    progress = min(100, 100 * elapsed / harvest_interval)
    yield    = floor(sum(skill * productive_seconds) / harvest_interval)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional, Sequence

from tycoon.engine.energy import working_summary
from tycoon.engine.productivity import integrate_productivity
from tycoon.loaders.economy_config_loader import DEFAULT_CONFIG
from tycoon.models.deposit import MiningProgress
from tycoon.util.timeutil import Timestamp, epoch_seconds

if TYPE_CHECKING:
    from tycoon.loaders.economy_config_loader import EconomyConfig
    from tycoon.models.deposit import Deposit
    from tycoon.models.employee import Employee

log = logging.getLogger(__name__)


def estimate_mining(deposit: Deposit, employees: Sequence[Employee],
                    last_harvest_at: Optional[Timestamp], now: Timestamp, *,
                    legacy_flat_time: bool = False,
                    config: EconomyConfig | None = None) -> MiningProgress:
    """Estimate harvest progress and yield for ``deposit``.

    Args:
        deposit: Deposit snapshot.
        employees: Employees assigned to the deposit.
        last_harvest_at: Harvest checkpoint. ``None`` means never harvested.
        now: Evaluation time.
        legacy_flat_time: Forwarded to ``integrate_productivity``.
        config: Economy constants; defaults when omitted.
    """
    if last_harvest_at is None or not employees:
        return MiningProgress()

    cfg = config or DEFAULT_CONFIG
    interval = cfg.harvest_interval_seconds
    if interval <= 0:
        log.debug("Deposit %s: non-positive harvest interval, no estimate", deposit.id)
        return MiningProgress()

    elapsed = epoch_seconds(now) - epoch_seconds(last_harvest_at)
    progress = max(0.0, min(100.0, 100.0 * elapsed / interval))

    weighted = 0.0
    for emp in employees:
        effective = integrate_productivity(emp, last_harvest_at, now,
                                           legacy_flat_time=legacy_flat_time, config=cfg)
        if effective > 0:
            weighted += emp.skill_value * effective

    active, average_energy = working_summary(employees, now, cfg)

    return MiningProgress(
        progress_percent=progress,
        estimated_yield=max(0, math.floor(weighted / interval)),
        average_energy=average_energy,
        active_workers=active,
    )
