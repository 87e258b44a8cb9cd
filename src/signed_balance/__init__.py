"""signed_balance: structural balance checks for signed undirected graphs."""

from .checkers import (
    CycleBalanceChecker,
    CycleSearchLimitError,
    SuperNodeBalanceChecker,
    TriangleBalanceChecker,
)
from .config import BalanceConfig
from .types import (
    Cycle,
    IntegrityConflict,
    IntegrityReport,
    PartitionResult,
    Polarity,
    SignedGraph,
    SuperNode,
    UnbalancedTriangle,
)

__all__ = [
    "BalanceConfig",
    "Cycle",
    "CycleBalanceChecker",
    "CycleSearchLimitError",
    "IntegrityConflict",
    "IntegrityReport",
    "PartitionResult",
    "Polarity",
    "SignedGraph",
    "SuperNode",
    "SuperNodeBalanceChecker",
    "TriangleBalanceChecker",
    "UnbalancedTriangle",
]
