"""Machine item loader — parses machine item YAML into ``MachineItem`` models.

The file maps item IDs to their static data::

    drill_basic:
      name: Foreuse
      production_time: 30
      product_quantity: 2
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from tycoon.loaders.records import MachineItem

log = logging.getLogger(__name__)

DEFAULT_MACHINES_PATH = "config/machines.yaml"


def load_machine_items(path: str | Path = DEFAULT_MACHINES_PATH) -> dict[str, MachineItem]:
    """Load machine item definitions keyed by item ID.

    Entries that are not mappings are skipped.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If an entry has malformed values.
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f) or {}

    items: dict[str, MachineItem] = {}
    for iid, attrs in data.items():
        if not isinstance(attrs, dict):
            log.warning("Skipping machine item %r: expected a mapping", iid)
            continue
        items[str(iid)] = MachineItem.model_validate({"id": str(iid), "name": str(iid), **attrs})

    log.info("Loaded %d machine items from %s", len(items), path)
    return items
