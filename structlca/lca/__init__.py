"""LCA matching and calculation engine.

Parses the reference impact factors, groups structural elements by material
family and grade, resolves a factor per group and attaches the stage ABC /
stage D impact to every element.
"""

from structlca.lca.calculator import ImpactResult, apply_result, compute_result
from structlca.lca.classifier import FamilyGroup, GradeGroup, classify_elements
from structlca.lca.elements import LinearElement, PlanarElement, StructuralElement, wrap_element
from structlca.lca.engine import LcaEngine, LcaRun
from structlca.errors import (
    DataUnavailable,
    FatalLcaError,
    GroupingFailed,
    LcaError,
    MissingQuantity,
    NoApplicableElements,
    NoStructuralModels,
)
from structlca.lca.factors import FactorTable, ImpactFactor, ImpactUnit, parse_decimal, parse_factor_rows
from structlca.lca.reference import normalize_reference_payload
from structlca.lca.report import RunCounters, RunReport, RunWarning
from structlca.lca.resolver import ResolvedGroup, resolve_groups

__all__ = [
    "DataUnavailable",
    "FactorTable",
    "FamilyGroup",
    "FatalLcaError",
    "GradeGroup",
    "GroupingFailed",
    "ImpactFactor",
    "ImpactResult",
    "ImpactUnit",
    "LcaEngine",
    "LcaError",
    "LcaRun",
    "LinearElement",
    "MissingQuantity",
    "NoApplicableElements",
    "NoStructuralModels",
    "PlanarElement",
    "ResolvedGroup",
    "RunCounters",
    "RunReport",
    "RunWarning",
    "StructuralElement",
    "apply_result",
    "classify_elements",
    "compute_result",
    "normalize_reference_payload",
    "parse_decimal",
    "parse_factor_rows",
    "resolve_groups",
    "wrap_element",
]
