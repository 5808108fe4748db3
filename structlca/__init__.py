"""structlca — LCA impact values for Speckle structural models."""

__version__ = "1.0.0"

from structlca.errors import (
    DataUnavailable,
    FatalLcaError,
    GroupingFailed,
    LcaError,
    MissingQuantity,
    NoApplicableElements,
    NoStructuralModels,
)
from structlca.lca.calculator import ImpactResult, compute_result
from structlca.lca.engine import LcaEngine, LcaRun
from structlca.lca.factors import FactorTable, ImpactFactor, ImpactUnit
from structlca.lca.report import RunCounters, RunReport, RunWarning

__all__ = [
    "__version__",
    # Engine
    "FactorTable",
    "ImpactFactor",
    "ImpactResult",
    "ImpactUnit",
    "LcaEngine",
    "LcaRun",
    "RunCounters",
    "RunReport",
    "RunWarning",
    "compute_result",
    # Errors
    "DataUnavailable",
    "FatalLcaError",
    "GroupingFailed",
    "LcaError",
    "MissingQuantity",
    "NoApplicableElements",
    "NoStructuralModels",
]
