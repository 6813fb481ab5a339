"""Productivity integrator — effective work seconds over a time window.

Efficiency during the work phase decays linearly, ``e(t) = 1 - t / work``
for ``t`` in ``[0, work]`` relative to the cycle start, so the integral over
any overlap ``[a, b]`` has the closed form ``F(b) - F(a)`` with

    F(t) = t - t^2 / (2 * work)

The window is walked one cycle at a time. The loop runs once per cycle
spanned, never per second, so a player absent for a week costs a few
hundred iterations.

Maintenance is credited during the rest phase: flat (efficiency 1.0) by
default, or weighted by the rising rest ramp ``G(u) = u^2 / (2 * rest)``.
Backend parity of the rest weighting is unconfirmed; flat is the default.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Optional

from tycoon.engine.energy import phase_offset
from tycoon.loaders.economy_config_loader import DEFAULT_CONFIG
from tycoon.util.timeutil import Timestamp, epoch_seconds

if TYPE_CHECKING:
    from tycoon.loaders.economy_config_loader import EconomyConfig
    from tycoon.models.employee import Employee

log = logging.getLogger(__name__)

# (relative_start, relative_end) within one cycle -> effective seconds
SegmentIntegral = Callable[[float, float], float]


def _walk_cycles(entity: Employee, start: Timestamp, end: Timestamp,
                 total: float, segment: SegmentIntegral) -> float:
    """Sum ``segment`` over every cycle-aligned piece of ``[start, end]``."""
    offset = phase_offset(entity)
    start_t = epoch_seconds(start) + offset
    end_t = epoch_seconds(end) + offset
    if end_t <= start_t:
        return 0.0

    first = math.floor(start_t / total)
    last = math.floor(end_t / total)

    effective = 0.0
    for index in range(first, last + 1):
        cycle_start = index * total
        rel_start = max(start_t, cycle_start) - cycle_start
        rel_end = min(end_t, cycle_start + total) - cycle_start
        if rel_end > rel_start:
            effective += segment(rel_start, rel_end)
    return effective


def integrate_productivity(entity: Optional[Employee], start: Timestamp, end: Timestamp, *,
                           legacy_flat_time: bool = False,
                           config: EconomyConfig | None = None) -> float:
    """Effective productive seconds of ``entity`` between ``start`` and ``end``.

    Args:
        entity: Employee snapshot. ``None`` yields 0.
        start: Window start.
        end: Window end. ``end <= start`` yields 0.
        legacy_flat_time: Count work-phase seconds at full efficiency instead
            of integrating the decay. Legacy simplification, not backend parity.
        config: Economy constants; defaults when omitted.

    Returns:
        The integral of efficiency over the window, in seconds.
    """
    if entity is None:
        return 0.0
    cfg = config or DEFAULT_CONFIG
    work = cfg.energy_work_duration
    total = cfg.energy_cycle_total
    if work <= 0 or total <= 0:
        return 0.0

    if legacy_flat_time:
        log.debug("Flat-time productivity requested for employee %s", entity.id)

        def segment(rel_start: float, rel_end: float) -> float:
            seg_start = max(rel_start, 0.0)
            seg_end = min(rel_end, work)
            return seg_end - seg_start if seg_start < seg_end else 0.0
    else:
        def antiderivative(t: float) -> float:
            return t - (t * t) / (2.0 * work)

        def segment(rel_start: float, rel_end: float) -> float:
            seg_start = max(rel_start, 0.0)
            seg_end = min(rel_end, work)
            if seg_start >= seg_end:
                return 0.0
            return antiderivative(seg_end) - antiderivative(seg_start)

    return _walk_cycles(entity, start, end, total, segment)


def integrate_maintenance(entity: Optional[Employee], start: Timestamp, end: Timestamp, *,
                          energy_weighted: bool = False,
                          config: EconomyConfig | None = None) -> float:
    """Effective maintenance seconds of ``entity`` between ``start`` and ``end``.

    Maintenance only happens during the rest phase ``[work, total]``.

    Args:
        entity: Employee snapshot. ``None`` yields 0.
        start: Window start.
        end: Window end. ``end <= start`` yields 0.
        energy_weighted: Weight rest seconds by the recovering energy
            (0 -> 1) instead of crediting them in full.
        config: Economy constants; defaults when omitted.
    """
    if entity is None:
        return 0.0
    cfg = config or DEFAULT_CONFIG
    work = cfg.energy_work_duration
    rest = cfg.energy_rest_duration
    total = cfg.energy_cycle_total
    if rest <= 0 or total <= 0:
        return 0.0

    def segment(rel_start: float, rel_end: float) -> float:
        seg_start = max(rel_start, work)
        seg_end = min(rel_end, total)
        if seg_start >= seg_end:
            return 0.0
        if not energy_weighted:
            return seg_end - seg_start
        u_start = seg_start - work
        u_end = seg_end - work
        return (u_end * u_end - u_start * u_start) / (2.0 * rest)

    return _walk_cycles(entity, start, end, total, segment)
