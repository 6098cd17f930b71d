"""Goals operating on a module's attached artifacts."""

from .aggregate import AggregateGoal
from .attach import AttachGoal
from .base import BaseGoal
from .freeze import FreezeGoal
from .signatures import AttachSignaturesGoal
from .thaw import ThawGoal

__all__ = [
    "BaseGoal",
    "FreezeGoal",
    "AggregateGoal",
    "AttachGoal",
    "ThawGoal",
    "AttachSignaturesGoal",
]
