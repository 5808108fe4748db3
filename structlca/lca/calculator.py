"""Impact calculation for a single element."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict
from specklepy.objects import Base

from structlca.config import RESULT_MEMBER, RESULT_STAGE_ABC, RESULT_STAGE_D
from structlca.errors import MissingQuantity
from structlca.lca.elements import StructuralElement
from structlca.lca.factors import ImpactFactor, ImpactUnit

logger = logging.getLogger(__name__)


class ImpactResult(BaseModel):
    """Stage ABC and stage D impact of one element."""

    model_config = ConfigDict(frozen=True)

    stage_abc: float
    stage_d: float

    def to_base(self) -> Base:
        """Speckle object attached to the element."""
        result = Base()
        result[RESULT_STAGE_ABC] = self.stage_abc
        result[RESULT_STAGE_D] = self.stage_d
        return result


def quantity_for(element: StructuralElement, unit: ImpactUnit) -> float | None:
    """Return the element quantity a factor of *unit* is multiplied by."""
    if unit is ImpactUnit.MASS:
        return element.mass()
    if unit is ImpactUnit.VOLUME:
        return element.volume()
    return None


def compute_result(
    element: StructuralElement,
    factor: ImpactFactor,
) -> ImpactResult | None:
    """Compute the impact of *element* under *factor*.

    Returns None when the factor's unit is neither mass nor volume.

    Raises
    ------
    MissingQuantity
        If the element has no value for the quantity the unit needs.
    """
    if factor.unit is None:
        logger.debug(
            "Unit %r of factor %r / %r is not computable",
            factor.unit_label, factor.material_family, factor.material_grade,
        )
        return None

    quantity = quantity_for(element, factor.unit)
    if quantity is None:
        raise MissingQuantity(
            f"Element {element.object_id or '?'} has no {factor.unit.value} value.",
            object_id=element.object_id,
        )

    return ImpactResult(
        stage_abc=quantity * factor.stage_abc,
        stage_d=quantity * factor.stage_d,
    )


def apply_result(element: StructuralElement | Any, result: ImpactResult) -> None:
    """Attach *result* to the element, replacing any earlier result."""
    obj = element.obj if isinstance(element, StructuralElement) else element
    setattr(obj, RESULT_MEMBER, result.to_base())

