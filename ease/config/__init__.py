"""Configuration schema and validation for ease."""

from .schema import (
    GoalConfig,
    FreezeConfig,
    AggregateConfig,
    AttachConfig,
    ThawConfig,
    SignaturesConfig,
    EaseConfig,
)

__all__ = [
    "GoalConfig",
    "FreezeConfig",
    "AggregateConfig",
    "AttachConfig",
    "ThawConfig",
    "SignaturesConfig",
    "EaseConfig",
]
