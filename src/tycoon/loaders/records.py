"""Pydantic models for raw backend records.

The backend returns loosely typed JSON: PocketBase timestamps with a space
separator, empty strings for unset dates, and item fields spelled either
``production_time`` or ``ProductionTime``. These models absorb that and
convert to the frozen snapshots the engine works on.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from tycoon.loaders.economy_config_loader import DEFAULT_CONFIG, EconomyConfig
from tycoon.models.deposit import Deposit
from tycoon.models.employee import Employee
from tycoon.models.machine import Machine


def _blank_to_none(value: Any) -> Any:
    """Unset backend dates arrive as ``""``; PocketBase uses a space separator."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        return value.replace(" ", "T", 1)
    return value


OptionalTimestamp = Annotated[Optional[datetime], BeforeValidator(_blank_to_none)]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ===================================================================
# Employees
# ===================================================================


class EmployeeRecord(_Record):
    id: str
    created: OptionalTimestamp = None
    mining: float = 0.0
    name: str = ""

    def to_employee(self) -> Employee:
        return Employee(id=self.id, created_at=self.created,
                        skill_value=self.mining, name=self.name)


# ===================================================================
# Deposits
# ===================================================================


class DepositRecord(_Record):
    id: str
    quantity: float = Field(0.0, validation_alias=AliasChoices("quantity", "quantity_remaining"))
    last_harvest_at: OptionalTimestamp = None
    size: int = 1
    resource: str = Field("", validation_alias=AliasChoices("resource", "resource_id"))

    def to_deposit(self) -> Deposit:
        return Deposit(
            id=self.id,
            quantity_remaining=self.quantity,
            last_harvest_at=self.last_harvest_at,
            size=self.size,
            resource_id=self.resource,
        )


# ===================================================================
# Machines
# ===================================================================


class MachineItem(_Record):
    """Static item data of a placeable machine."""

    id: str = ""
    name: str = ""
    production_time: Optional[float] = Field(
        None, validation_alias=AliasChoices("production_time", "ProductionTime"))
    product_quantity: Optional[float] = Field(
        None, validation_alias=AliasChoices("product_quantity", "ProductQuantity"))

    def resolve_cycle_time(self, config: EconomyConfig | None = None) -> float:
        """Seconds per cycle; unset or zero falls back to the default harvest cycle."""
        cfg = config or DEFAULT_CONFIG
        return self.production_time or cfg.default_harvest_cycle

    def resolve_output_quantity(self) -> float:
        """Units per cycle; unset or zero counts as one."""
        return self.product_quantity or 1.0


class MachineRecord(_Record):
    id: str
    durability: float = Field(default_factory=lambda: DEFAULT_CONFIG.machine_durability_on_place)
    production_started_at: OptionalTimestamp = None
    item: str = Field("", validation_alias=AliasChoices("item", "item_id"))

    def to_machine(self, item: Optional[MachineItem],
                   config: EconomyConfig | None = None) -> Machine:
        """Build a snapshot with production parameters resolved from ``item``.

        Without item data the cycle time stays unresolved and the machine
        reports as not configured.
        """
        if item is None:
            return Machine(id=self.id, durability=self.durability,
                           production_started_at=self.production_started_at,
                           item_id=self.item)
        return Machine(
            id=self.id,
            durability=self.durability,
            production_started_at=self.production_started_at,
            cycle_time_seconds=item.resolve_cycle_time(config),
            output_quantity_per_cycle=item.resolve_output_quantity(),
            item_id=self.item,
        )
