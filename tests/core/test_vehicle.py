"""Tests for the vehicle factory."""

import gc
import weakref
from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from factorykit import (
    Drivable,
    Genesis,
    Spark,
    UnknownVariantError,
    Vehicle,
    create_vehicle,
    make_vehicle,
    vehicle,
)
from factorykit.core.vehicle import get_vehicle_registry


def test_builtin_variants_registered():
    registry = get_vehicle_registry()

    assert registry.get("Genesis") is Genesis
    assert registry.get("Spark") is Spark


def test_create_returns_matching_variant():
    car = create_vehicle("Genesis", 20)

    assert type(car) is Genesis
    assert car.model == "Genesis"
    assert car.power == 20
    assert car.moved == 0


def test_create_returns_independent_instances():
    a = create_vehicle("Spark", 13)
    b = create_vehicle("Spark", 13)

    a.run()

    assert a is not b
    assert b.moved == 0


def test_genesis_runs_twice():
    """Genesis with power 20 run twice has moved 40."""
    car = create_vehicle("Genesis", 20)
    car.run()
    car.run()

    assert car.moved == 40
    assert car.report() == "Genesis - moved: 40"


def test_spark_runs_twice():
    """Spark with power 13 run twice has moved 26."""
    car = create_vehicle("Spark", 13)
    car.run()
    car.run()

    assert car.moved == 26
    assert car.report() == "Spark - moved: 26"


@given(
    kind=st.sampled_from(["Genesis", "Spark"]),
    power=st.integers(min_value=-1000, max_value=1000),
    runs=st.integers(min_value=0, max_value=50),
)
def test_moved_is_runs_times_power(kind, power, runs):
    """Property: n runs accumulate exactly n * power."""
    car = create_vehicle(kind, power)
    for _ in range(runs):
        car.run()

    assert car.moved == runs * power


@given(power=st.floats(allow_nan=False, allow_infinity=False))
def test_unknown_kind_raises_for_any_power(power):
    with pytest.raises(UnknownVariantError) as exc_info:
        create_vehicle("Tesla", power)

    assert exc_info.value.kind == "Tesla"
    assert "Genesis" in exc_info.value.known


def test_kind_is_case_sensitive():
    with pytest.raises(UnknownVariantError):
        create_vehicle("genesis", 20)


def test_variants_satisfy_drivable():
    assert isinstance(create_vehicle("Genesis", 1), Drivable)
    assert isinstance(make_vehicle("Spark3", 15), Drivable)


def test_make_vehicle_builds_plain_vehicle():
    car = make_vehicle("Genesis2", 20)
    car.run()
    car.run()

    assert type(car) is Vehicle
    assert car.report() == "Genesis2 - moved: 40"


def test_run_is_shared_across_instances():
    """run lives on the class, not on each instance."""
    a = make_vehicle("a", 1)
    b = make_vehicle("b", 2)

    assert "run" not in vars(a)
    assert type(a).run is type(b).run


def test_custom_variant_with_explicit_tag(vehicle_registry):
    @vehicle("Avante", registry=vehicle_registry)
    class Avante(Vehicle):
        pass

    car = create_vehicle("Avante", 5, registry=vehicle_registry)

    assert isinstance(car, Avante)
    assert car.model == "Avante"
    assert "Avante" not in get_vehicle_registry()


def test_custom_variant_bare_decorator_uses_class_name(vehicle_registry):
    class Morning(Vehicle):
        pass

    vehicle(registry=vehicle_registry)(Morning)

    assert vehicle_registry.tags() == ("Morning",)
    assert create_vehicle("Morning", 3, registry=vehicle_registry).model == "Morning"


def test_decorator_rejects_non_vehicle(vehicle_registry):
    with pytest.raises(TypeError, match="must subclass Vehicle"):

        @vehicle("Bike", registry=vehicle_registry)
        class Bike:  # Not a Vehicle!
            pass


def test_custom_registry_does_not_see_builtins(vehicle_registry):
    with pytest.raises(UnknownVariantError):
        create_vehicle("Genesis", 20, registry=vehicle_registry)


def test_bare_subclass_variant_runs(vehicle_registry):
    """A plain subclass is enough to be a buildable variant."""

    @vehicle(registry=vehicle_registry)
    class Avante(Vehicle):
        pass

    car = create_vehicle("Avante", 5, registry=vehicle_registry)
    car.run()

    assert type(car) is Avante
    assert car.report() == "Avante - moved: 5"


def test_model_comes_from_tag(vehicle_registry):
    """The same class under another tag reports the tag as its model."""
    vehicle("G", registry=vehicle_registry)(Genesis)

    car = create_vehicle("G", 20, registry=vehicle_registry)

    assert type(car) is Genesis
    assert car.report() == "G - moved: 0"


def test_decorator_rejects_variant_without_model_argument(vehicle_registry):
    """Variants the factory could not construct are rejected at registration."""

    @dataclass
    class FixedName(Vehicle):
        model: str = field(default="Fixed", init=False)

    with pytest.raises(TypeError, match="must accept model and power"):
        vehicle(registry=vehicle_registry)(FixedName)

    assert "FixedName" not in vehicle_registry


def test_factory_keeps_no_reference():
    """Ownership passes to the caller: dropping the vehicle frees it."""
    car = create_vehicle("Spark", 13)
    car.run()
    ref = weakref.ref(car)

    del car
    gc.collect()

    assert ref() is None
