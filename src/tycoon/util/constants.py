"""Economy constants — energy cycle, harvest timing, capacity ratios.

Values mirror the backend's game constants so client-side estimates line up
with the authoritative lazy calculation.
"""

# -- Energy cycle (shared by all employees) -----------------------------

ENERGY_WORK_DURATION: float = 1440.0
"""Length of the work phase in seconds (24 minutes)."""

ENERGY_REST_DURATION: float = 1440.0
"""Length of the rest phase in seconds (24 minutes)."""

ENERGY_CYCLE_TOTAL: float = ENERGY_WORK_DURATION + ENERGY_REST_DURATION
"""Full work + rest cycle in seconds (48 minutes)."""

# -- Harvest & production -----------------------------------------------

DEFAULT_HARVEST_CYCLE: float = 20.0
"""Cycle time in seconds when an item defines no production time."""

HARVEST_INTERVAL_SECONDS: float = 60.0
"""Mining harvest interval in seconds."""

MAX_CYCLES_PER_TICK: int = 100
"""Maximum production cycles credited per evaluation (backend anti-exploit cap)."""

PRODUCTION_BOOST_DIVISOR: float = 10.0
"""Divisor applied to employee skill-seconds when boosting machine output."""

UNCONFIGURED_REASON: str = "Machine non configurée"
"""Block reason reported for a machine without start time or cycle time."""

# -- Deposit capacity ---------------------------------------------------

EMPLOYEES_PER_DEPOSIT_SIZE: int = 5
MACHINES_PER_DEPOSIT_SIZE: int = 1
MACHINE_EQUIVALENT_WORKERS: int = 5
"""One machine counts as this many workers."""

# -- Machine durability -------------------------------------------------

MACHINE_DURABILITY_ON_PLACE: float = 1000.0
"""Durability of a freshly placed machine."""

