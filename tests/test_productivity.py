"""Tests for the productivity and maintenance integrators."""

from datetime import datetime, timedelta, timezone

import pytest

from tycoon.engine.energy import phase_of
from tycoon.engine.productivity import integrate_maintenance, integrate_productivity
from tycoon.loaders.economy_config_loader import EconomyConfig
from tycoon.models.employee import Employee
from tycoon.util.constants import ENERGY_CYCLE_TOTAL, ENERGY_WORK_DURATION

WORK = ENERGY_WORK_DURATION
CYCLE = ENERGY_CYCLE_TOTAL


@pytest.fixture
def worker():
    """Employee with phase offset 0."""
    return Employee(id="emp-1", created_at=0.0, skill_value=1.0)


def _riemann_productivity(emp: Employee, start: float, end: float, step: float = 0.25) -> float:
    """Midpoint sum of the work-phase efficiency, for cross-checking."""
    total = 0.0
    t = start
    while t < end:
        width = min(step, end - t)
        status = phase_of(emp, t + width / 2)
        if status.is_working:
            total += status.energy_percent / 100.0 * width
        t += width
    return total


class TestIntegrateProductivity:
    def test_single_work_phase_is_half_duration(self, worker):
        assert integrate_productivity(worker, 0, WORK) == pytest.approx(WORK / 2)

    @pytest.mark.parametrize("cycle_index", [1, 5, 600_000])
    def test_aligned_work_phase_anywhere(self, worker, cycle_index):
        t0 = cycle_index * CYCLE
        assert integrate_productivity(worker, t0, t0 + WORK) == pytest.approx(WORK / 2)

    def test_rest_phase_contributes_nothing(self, worker):
        assert integrate_productivity(worker, WORK, CYCLE) == 0.0

    def test_full_cycle(self, worker):
        assert integrate_productivity(worker, 0, CYCLE) == pytest.approx(WORK / 2)

    def test_partial_work_phase(self, worker):
        # F(720) = 720 - 720^2 / 2880
        assert integrate_productivity(worker, 0, 720) == pytest.approx(540.0)

    def test_offset_moves_window_into_decay_tail(self):
        emp = Employee(id="late", created_at=720)
        assert integrate_productivity(emp, 0, 720) == pytest.approx(180.0)

    def test_three_day_absence(self, worker):
        three_days = 3 * 24 * 3600
        cycles = three_days / CYCLE
        assert integrate_productivity(worker, 0, three_days) == pytest.approx(cycles * WORK / 2)

    def test_window_straddling_cycles(self, worker):
        # Last half of rest, then half of the next work phase
        start = CYCLE - 720
        end = CYCLE + 720
        assert integrate_productivity(worker, start, end) == pytest.approx(540.0)

    def test_datetime_window_matches_epoch_window(self):
        created = datetime(2024, 5, 1, 6, 30, tzinfo=timezone.utc)
        emp = Employee(id="e", created_at=created)
        start = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)
        end = start + timedelta(hours=5, minutes=17)
        expected = integrate_productivity(emp, start.timestamp(), end.timestamp())
        assert integrate_productivity(emp, start, end) == pytest.approx(expected)

    def test_custom_work_duration(self, worker):
        cfg = EconomyConfig(energy_work_duration=100, energy_rest_duration=100)
        assert integrate_productivity(worker, 0, 1000, config=cfg) == pytest.approx(5 * 50.0)


class TestIntegrateProductivityDegenerate:
    def test_empty_window(self, worker):
        assert integrate_productivity(worker, 500, 500) == 0.0

    def test_inverted_window(self, worker):
        assert integrate_productivity(worker, 900, 100) == 0.0

    def test_missing_employee(self):
        assert integrate_productivity(None, 0, CYCLE) == 0.0


class TestLegacyFlatTime:
    def test_work_phase_counts_in_full(self, worker):
        assert integrate_productivity(worker, 0, WORK, legacy_flat_time=True) == pytest.approx(WORK)

    def test_rest_phase_still_idle(self, worker):
        assert integrate_productivity(worker, 0, 2 * CYCLE, legacy_flat_time=True) == pytest.approx(2 * WORK)

    def test_not_the_default(self, worker):
        assert integrate_productivity(worker, 0, WORK) < integrate_productivity(
            worker, 0, WORK, legacy_flat_time=True)


class TestIntegralProperties:
    @pytest.mark.parametrize("a,b,c", [
        (0, 100, 200),
        (0, 1440, 2880),
        (17.5, 1500.25, 9000),
        (1_700_000_000, 1_700_003_333, 1_700_090_000),
        (-5000, -1, 4000),
        (300, 300, 301),
    ])
    def test_additivity(self, a, b, c):
        emp = Employee(id="e", created_at=1_699_999_123)
        whole = integrate_productivity(emp, a, c)
        parts = integrate_productivity(emp, a, b) + integrate_productivity(emp, b, c)
        assert whole == pytest.approx(parts, abs=1e-6)

    @pytest.mark.parametrize("start,end", [(0, 500), (100, 3100), (1300, 7000), (2500, 2950)])
    def test_matches_numeric_integral(self, worker, start, end):
        expected = _riemann_productivity(worker, start, end)
        assert integrate_productivity(worker, start, end) == pytest.approx(expected, abs=0.05)

    @pytest.mark.parametrize("length", [1, 60, 1440, 2880, 10_000])
    def test_bounded_by_window_length(self, worker, length):
        value = integrate_productivity(worker, 123, 123 + length)
        assert 0.0 <= value <= length


class TestIntegrateMaintenance:
    def test_full_cycle_credits_rest_phase(self, worker):
        assert integrate_maintenance(worker, 0, CYCLE) == pytest.approx(CYCLE - WORK)

    def test_work_phase_credits_nothing(self, worker):
        assert integrate_maintenance(worker, 0, WORK) == 0.0

    def test_partial_rest_phase(self, worker):
        assert integrate_maintenance(worker, WORK, WORK + 600) == pytest.approx(600.0)

    def test_energy_weighted_full_rest(self, worker):
        assert integrate_maintenance(worker, 0, CYCLE, energy_weighted=True) == pytest.approx(720.0)

    def test_energy_weighted_first_half_of_rest(self, worker):
        # Ramp 0 -> 0.5 over 720s
        assert integrate_maintenance(worker, WORK, WORK + 720,
                                     energy_weighted=True) == pytest.approx(180.0)

    def test_multi_cycle(self, worker):
        assert integrate_maintenance(worker, 0, 10 * CYCLE) == pytest.approx(10 * (CYCLE - WORK))

    def test_degenerate_windows(self, worker):
        assert integrate_maintenance(worker, 10, 10) == 0.0
        assert integrate_maintenance(worker, 10, 5) == 0.0
        assert integrate_maintenance(None, 0, CYCLE) == 0.0

    def test_productivity_and_maintenance_partition_time(self, worker):
        flat_work = integrate_productivity(worker, 0, 5 * CYCLE, legacy_flat_time=True)
        rest = integrate_maintenance(worker, 0, 5 * CYCLE)
        assert flat_work + rest == pytest.approx(5 * CYCLE)
