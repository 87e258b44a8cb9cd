"""Balance checkers: three equivalent formulations of structural balance."""

from signed_balance.checkers.cycle import (
    CycleBalanceChecker,
    CycleSearchLimitError,
    canonical_cycle,
    cycle_polarities,
)
from signed_balance.checkers.super_node import SuperNodeBalanceChecker
from signed_balance.checkers.triangle import TriangleBalanceChecker

__all__ = [
    "CycleBalanceChecker",
    "CycleSearchLimitError",
    "SuperNodeBalanceChecker",
    "TriangleBalanceChecker",
    "canonical_cycle",
    "cycle_polarities",
]
