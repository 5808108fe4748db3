"""Group the elements of a structural model by material family, then grade."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from structlca.config import LINEAR_ELEMENT_TYPE, PLANAR_ELEMENT_TYPE
from structlca.errors import GroupingFailed, NoApplicableElements
from structlca.lca.elements import StructuralElement, wrap_element

logger = logging.getLogger(__name__)


@dataclass
class GradeGroup:
    """Elements of one family sharing a material grade."""

    grade: str
    elements: list[StructuralElement] = field(default_factory=list)


@dataclass
class FamilyGroup:
    """Elements sharing a material family, split by grade."""

    family: str
    grades: list[GradeGroup] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        return sum(len(g.elements) for g in self.grades)


def classify_elements(objects: Iterable[Any]) -> list[FamilyGroup]:
    """Partition the elements of one structural model.

    Groups appear in encounter order.  Elements without a family or a grade
    are left out.

    Raises
    ------
    NoApplicableElements
        If no object is a linear or planar element.
    GroupingFailed
        If no element carries a material family.
    """
    elements = [e for e in (wrap_element(obj) for obj in objects) if e is not None]
    if not elements:
        raise NoApplicableElements(
            f"No elements of type {LINEAR_ELEMENT_TYPE} or {PLANAR_ELEMENT_TYPE} were found."
        )

    by_family: dict[str, list[StructuralElement]] = {}
    for element in elements:
        family = element.material_family
        if family is None:
            logger.debug("Skipping %r: no material family", element)
            continue
        by_family.setdefault(family, []).append(element)

    if not by_family:
        raise GroupingFailed("Could not group elements by material.")

    groups: list[FamilyGroup] = []
    for family, members in by_family.items():
        by_grade: dict[str, list[StructuralElement]] = {}
        for element in members:
            grade = element.material_grade
            if grade is None:
                logger.debug("Skipping %r: no material grade", element)
                continue
            by_grade.setdefault(grade, []).append(element)
        groups.append(FamilyGroup(
            family=family,
            grades=[GradeGroup(grade, items) for grade, items in by_grade.items()],
        ))

    logger.debug(
        "Classified %d elements into %d families", len(elements), len(groups)
    )
    return groups
