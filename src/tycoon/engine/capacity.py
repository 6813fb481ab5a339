"""Deposit capacity rules — how many employees and machines fit a deposit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tycoon.loaders.economy_config_loader import DEFAULT_CONFIG

if TYPE_CHECKING:
    from tycoon.loaders.economy_config_loader import EconomyConfig
    from tycoon.models.deposit import Deposit


def max_employees_for_deposit(size: int, config: EconomyConfig | None = None) -> int:
    """Maximum employees allowed on a deposit of ``size``."""
    cfg = config or DEFAULT_CONFIG
    return max(0, size) * cfg.employees_per_deposit_size


def max_machines_for_deposit(size: int, config: EconomyConfig | None = None) -> int:
    """Maximum machines allowed on a deposit of ``size``."""
    cfg = config or DEFAULT_CONFIG
    return max(0, size) * cfg.machines_per_deposit_size


def deposit_worker_capacity(employees: int, machines: int,
                            config: EconomyConfig | None = None) -> int:
    """Worker-equivalent capacity: each machine counts as several workers."""
    cfg = config or DEFAULT_CONFIG
    return employees + machines * cfg.machine_equivalent_workers


def has_free_employee_slot(deposit: Deposit, assigned: int,
                           config: EconomyConfig | None = None) -> bool:
    return assigned < max_employees_for_deposit(deposit.size, config)
