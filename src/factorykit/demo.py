"""End-to-end demo: build vehicles and profiles, print one line for each.

Run with ``factorykit-demo`` or ``python -m factorykit.demo``.
"""

from __future__ import annotations

import logging

from factorykit.config import DemoSettings
from factorykit.core import build_profile, create_vehicle


def main(settings: DemoSettings | None = None) -> int:
    settings = settings or DemoSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    for kind, power in (("Genesis", settings.genesis_power), ("Spark", settings.spark_power)):
        car = create_vehicle(kind, power)
        for _ in range(settings.runs):
            car.run()
        print(car.report())

    for kind in ("Facebook", "LinkedIn"):
        print(build_profile(kind).report())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
