"""Built-in vehicle variants."""

from __future__ import annotations

from factorykit.core.vehicle.core import vehicle
from factorykit.core.vehicle.models import Vehicle


@vehicle("Genesis")
class Genesis(Vehicle):
    pass


@vehicle("Spark")
class Spark(Vehicle):
    pass
