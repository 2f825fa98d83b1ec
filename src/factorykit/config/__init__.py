"""Configuration module using Pydantic Settings.

Usage:
    from factorykit.config import DemoSettings

    settings = DemoSettings(genesis_power=27, runs=3)
"""

from factorykit.config.settings import DemoSettings

__all__ = [
    "DemoSettings",
]
