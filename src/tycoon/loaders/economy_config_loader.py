"""Economy configuration — loads tunable constants from config/economy.yaml.

Provides a single ``EconomyConfig`` dataclass that is loaded once at startup
and then passed to the engine functions wherever the defaults from
``tycoon.util.constants`` should be overridden.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from tycoon.util import constants

log = logging.getLogger(__name__)

DEFAULT_ECONOMY_CONFIG_PATH = "config/economy.yaml"


@dataclass(frozen=True)
class EconomyConfig:
    """All tunable economy constants.

    Every field defaults to the matching module constant so the engine
    behaves identically with or without a config file. Frozen: use
    ``dataclasses.replace`` to derive a variant.
    """

    # -- Energy cycle ------------------------------------------------
    energy_work_duration: float = constants.ENERGY_WORK_DURATION
    energy_rest_duration: float = constants.ENERGY_REST_DURATION

    # -- Harvest & production ----------------------------------------
    default_harvest_cycle: float = constants.DEFAULT_HARVEST_CYCLE
    harvest_interval_seconds: float = constants.HARVEST_INTERVAL_SECONDS
    max_cycles_per_tick: int = constants.MAX_CYCLES_PER_TICK
    production_boost_divisor: float = constants.PRODUCTION_BOOST_DIVISOR

    # -- Deposit capacity --------------------------------------------
    employees_per_deposit_size: int = constants.EMPLOYEES_PER_DEPOSIT_SIZE
    machines_per_deposit_size: int = constants.MACHINES_PER_DEPOSIT_SIZE
    machine_equivalent_workers: int = constants.MACHINE_EQUIVALENT_WORKERS

    # -- Durability --------------------------------------------------
    machine_durability_on_place: float = constants.MACHINE_DURABILITY_ON_PLACE

    @property
    def energy_cycle_total(self) -> float:
        """Full work + rest cycle in seconds."""
        return self.energy_work_duration + self.energy_rest_duration

    def validate(self) -> None:
        """Reject values the engine would have to divide by zero with.

        Raises:
            ValueError: If a duration is not positive or a count is negative.
        """
        for name in ("energy_work_duration", "energy_rest_duration",
                     "default_harvest_cycle", "harvest_interval_seconds",
                     "production_boost_divisor"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        for name in ("max_cycles_per_tick", "employees_per_deposit_size",
                     "machines_per_deposit_size", "machine_equivalent_workers"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value!r}")


DEFAULT_CONFIG = EconomyConfig()


def load_economy_config(path: str | Path = DEFAULT_ECONOMY_CONFIG_PATH) -> EconomyConfig:
    """Load economy configuration from a YAML file.

    Missing keys fall back to dataclass defaults.  If the file does not
    exist, a warning is logged and pure defaults are returned.

    Raises:
        ValueError: If the top level is not a mapping or the loaded values
            fail ``EconomyConfig.validate``.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Economy config not found at %s, using defaults", p)
        return EconomyConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Economy config at {p} must be a mapping, got {type(raw).__name__}")

    log.info("Loaded economy config from %s (%d keys)", p, len(raw))

    unknown = sorted(k for k in raw if k not in EconomyConfig.__dataclass_fields__)
    if unknown:
        log.warning("Ignoring unknown economy config keys: %s", ", ".join(unknown))

    cfg = EconomyConfig(**{
        k: v for k, v in raw.items()
        if k in EconomyConfig.__dataclass_fields__
    })
    cfg.validate()
    return cfg
