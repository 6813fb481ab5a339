"""Production estimator — predicted machine output since production start.

Cycles credited are capped per evaluation exactly like the backend's
anti-exploit rule, and produced quantity is derived from the *capped*
count, and employee boost cycles share the same cap. The progress bar is not capped: it keeps looping through the
current cycle so the UI animates even after the cap is reached.

Known approximation: machine power and durability come from the full
factory graph on the backend, which the client does not have. The power
multiplier is fixed at 1.0 and durability never blocks production here;
``current_durability`` is only a prediction of the wear from the credited
cycles.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional, Sequence

from tycoon.engine.energy import working_summary
from tycoon.engine.productivity import integrate_productivity
from tycoon.loaders.economy_config_loader import DEFAULT_CONFIG
from tycoon.models.machine import ProductionProgress
from tycoon.util.constants import UNCONFIGURED_REASON
from tycoon.util.timeutil import Timestamp, epoch_seconds

if TYPE_CHECKING:
    from tycoon.loaders.economy_config_loader import EconomyConfig
    from tycoon.models.employee import Employee
    from tycoon.models.machine import Machine

log = logging.getLogger(__name__)

POWER_MULTIPLIER = 1.0


def estimate_production(machine: Machine, production_started_at: Optional[Timestamp],
                        now: Timestamp, *, employees: Sequence[Employee] = (),
                        config: EconomyConfig | None = None) -> ProductionProgress:
    """Estimate production progress and output for ``machine``.

    Args:
        machine: Machine snapshot with resolved cycle time and output.
        production_started_at: Production checkpoint. ``None`` = not configured.
        now: Evaluation time.
        employees: Employees assigned to the machine; their productive
            skill-seconds add bonus cycles.
        config: Economy constants; defaults when omitted.
    """
    cycle_time = machine.cycle_time_seconds
    if production_started_at is None or cycle_time is None or cycle_time <= 0:
        log.debug("Machine %s not configured (start=%r, cycle=%r)",
                  machine.id, production_started_at, cycle_time)
        return ProductionProgress(
            can_produce=False,
            block_reason=UNCONFIGURED_REASON,
            current_durability=machine.durability,
        )

    cfg = config or DEFAULT_CONFIG
    elapsed = max(0.0, epoch_seconds(now) - epoch_seconds(production_started_at))
    effective = elapsed * POWER_MULTIPLIER

    time_cycles = math.floor(effective / cycle_time)
    cycles = min(time_cycles, cfg.max_cycles_per_tick)
    if time_cycles > cycles:
        log.debug("Machine %s: %d cycles in %.0fs capped to %d",
                  machine.id, time_cycles, elapsed, cycles)

    progress = (effective % cycle_time) / cycle_time * 100.0

    output = machine.output_quantity_per_cycle
    credited_cycles = float(cycles)

    if employees and cfg.production_boost_divisor > 0:
        # Only the span covered by credited cycles earns a boost
        credited_end = epoch_seconds(production_started_at) + cycles * cycle_time / POWER_MULTIPLIER
        skill_seconds = sum(
            emp.skill_value * integrate_productivity(emp, production_started_at, credited_end, config=cfg)
            for emp in employees
        )
        boost_cycles = (POWER_MULTIPLIER * skill_seconds / cfg.production_boost_divisor) / cycle_time
        credited_cycles = min(credited_cycles + boost_cycles, float(cfg.max_cycles_per_tick))

    produced = credited_cycles * output

    active, average_energy = working_summary(employees, now, cfg)

    return ProductionProgress(
        progress_percent=progress,
        cycles_completed=cycles,
        estimated_produced=max(0, math.floor(produced)),
        can_produce=True,
        block_reason=None,
        current_durability=max(0.0, machine.durability - cycles),
        average_energy=average_energy,
        active_workers=active,
    )
