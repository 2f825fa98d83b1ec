"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from factorykit import SocialNetwork, VariantRegistry, Vehicle


@pytest.fixture
def vehicle_registry():
    """Fresh, empty vehicle registry (the global one stays untouched)."""
    return VariantRegistry[Vehicle]("vehicle")


@pytest.fixture
def network_registry():
    """Fresh, empty network registry."""
    return VariantRegistry[SocialNetwork]("network")
