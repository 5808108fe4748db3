"""StructuralElement — uniform read access to linear and planar elements.

Wraps the live Speckle objects so the classifier, resolver and calculator
never branch on the element type.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from structlca.config import (
    FAMILY_KEYS,
    GRADE_KEYS,
    LINEAR_ELEMENT_TYPE,
    MASS_KEYS,
    MATERIAL_TYPES,
    PLANAR_ELEMENT_TYPE,
    VOLUME_KEYS,
)
from structlca.lca.factors import parse_decimal


def type_names(obj: Any) -> list[str]:
    """Return the short class names of a Speckle type chain.

    'Objects.Structural.Geometry.Element1D' -> ['Element1D']
    """
    chain = getattr(obj, "speckle_type", None) or ""
    return [part.rsplit(".", 1)[-1] for part in str(chain).split(":") if part]


def _text(value: Any) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def _family_text(value: Any) -> str | None:
    """Read a material family from a name, an enum member or an enum index."""
    if isinstance(value, Enum):
        return _text(value.name)
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < len(MATERIAL_TYPES):
            return MATERIAL_TYPES[value]
        return None
    return _text(value)


class StructuralElement:
    """Base class of the element variants.

    Parameters
    ----------
    obj:
        The Speckle object.  Results are attached to it in place.
    """

    type_name: str = ""

    def __init__(self, obj: Any) -> None:
        self.obj = obj

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.object_id!r})"

    @property
    def object_id(self) -> str | None:
        return _text(getattr(self.obj, "id", None)) or _text(
            getattr(self.obj, "applicationId", None)
        )

    @property
    def material(self) -> Any:
        """The structural material behind the element's section property."""
        prop = getattr(self.obj, "property", None)
        if prop is None:
            return None
        return getattr(prop, "material", None)

    @property
    def material_family(self) -> str | None:
        material = self.material
        if material is None:
            return None
        for key in FAMILY_KEYS:
            family = _family_text(getattr(material, key, None))
            if family:
                return family
        return None

    @property
    def material_grade(self) -> str | None:
        material = self.material
        if material is None:
            return None
        for key in GRADE_KEYS:
            grade = _text(getattr(material, key, None))
            if grade:
                return grade
        return None

    def mass(self) -> float | None:
        return self._quantity(MASS_KEYS)

    def volume(self) -> float | None:
        return self._quantity(VOLUME_KEYS)

    def _quantity(self, keys: tuple[str, ...]) -> float | None:
        """First readable value among *keys*, canonical key first."""
        for key in keys:
            value = parse_decimal(getattr(self.obj, key, None), default=None)
            if value is not None:
                return value
        return None


class LinearElement(StructuralElement):
    """Beam, column or brace (Objects ``Element1D``)."""

    type_name = LINEAR_ELEMENT_TYPE


class PlanarElement(StructuralElement):
    """Slab, wall or shell (Objects ``Element2D``)."""

    type_name = PLANAR_ELEMENT_TYPE


ELEMENT_VARIANTS: tuple[type[StructuralElement], ...] = (LinearElement, PlanarElement)


def wrap_element(obj: Any) -> StructuralElement | None:
    """Wrap *obj* in its element variant, or return None if not an element."""
    if obj is None:
        return None
    names = type_names(obj)
    for variant in ELEMENT_VARIANTS:
        if variant.type_name in names:
            return variant(obj)
    return None
