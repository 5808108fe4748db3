"""Pick the impact factor for every (family, grade) element group.

A factor whose grade matches the group's grade wins.  Otherwise the first
factor of the group's family applies.  Groups with neither stay unresolved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from structlca.lca.classifier import FamilyGroup
from structlca.lca.elements import StructuralElement
from structlca.lca.factors import FactorTable, ImpactFactor

logger = logging.getLogger(__name__)


@dataclass
class ResolvedGroup:
    """A grade subgroup together with the factor chosen for it."""

    family: str
    grade: str
    factor: ImpactFactor | None
    elements: list[StructuralElement] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.factor is not None

    @property
    def object_ids(self) -> list[str]:
        return [e.object_id for e in self.elements if e.object_id]


def resolve_factor(
    table: FactorTable,
    family: str,
    grade: str,
) -> ImpactFactor | None:
    """Return the most specific factor for *family* / *grade*."""
    return table.for_grade(grade) or table.for_family(family)


def resolve_groups(
    groups: Iterable[FamilyGroup],
    table: FactorTable,
) -> list[ResolvedGroup]:
    """Resolve every grade subgroup of *groups*, keeping group order."""
    resolved: list[ResolvedGroup] = []
    for group in groups:
        for sub in group.grades:
            factor = resolve_factor(table, group.family, sub.grade)
            if factor is None:
                logger.debug("No factor for %r / %r", group.family, sub.grade)
            resolved.append(ResolvedGroup(
                family=group.family,
                grade=sub.grade,
                factor=factor,
                elements=list(sub.elements),
            ))
    return resolved
