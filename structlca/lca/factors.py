"""ImpactFactor model and parsing of the reference table rows.

All number and unit handling for the loosely-typed reference cells lives in
this module.  Elsewhere in the package, values are already typed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from structlca.config import MASS_UNITS, REFERENCE_ROW_WIDTH, VOLUME_UNITS
from structlca.errors import DataUnavailable
from structlca.lca.reference import normalize_reference_payload
from structlca.lca.report import RunWarning

logger = logging.getLogger(__name__)


class ImpactUnit(str, Enum):
    """Physical quantity an impact factor is expressed per."""

    MASS = "mass"
    VOLUME = "volume"


class ImpactFactor(BaseModel):
    """One row of the reference table."""

    model_config = ConfigDict(frozen=True)

    material_family: str
    material_grade: str = ""
    stage_abc: float = 0.0
    stage_d: float = 0.0
    unit: ImpactUnit | None = None
    """None when the raw unit is neither mass nor volume."""

    unit_label: str = ""
    """Unit text as found in the table."""


def parse_decimal(value: Any, default: float | None = 0.0) -> float | None:
    """Parse a number written with either ',' or '.' as decimal mark.

    When both marks appear, the last one is the decimal mark and the other a
    thousands separator ('1.234,5' and '1,234.5' are both 1234.5).  A mark
    repeated on its own is a thousands separator ('1,234,567').  A single
    comma is a decimal mark ('1,5' is 1.5).  Returns *default* when the value
    cannot be read as a finite number.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else default

    text = str(value).strip().replace(" ", "").replace("\u00a0", "")
    if not text:
        return default

    commas = text.count(",")
    dots = text.count(".")
    if commas and dots:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif commas > 1:
        text = text.replace(",", "")
    elif commas == 1:
        text = text.replace(",", ".")
    elif dots > 1:
        text = text.replace(".", "")

    try:
        number = float(text)
    except ValueError:
        return default
    return number if math.isfinite(number) else default


def parse_unit(value: Any) -> ImpactUnit | None:
    """Map a raw unit cell to an ImpactUnit, or None if not computable."""
    text = _cell_text(value).lower()
    if text in MASS_UNITS:
        return ImpactUnit.MASS
    if text in VOLUME_UNITS:
        return ImpactUnit.VOLUME
    return None


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_factor_rows(
    rows: Sequence[Any],
) -> tuple[list[ImpactFactor], list[RunWarning]]:
    """Turn raw reference rows into impact factors.

    The first row is a header and is dropped.  Each remaining row yields
    exactly one factor, in order: cells are family, grade, stage ABC,
    stage D, unit.  A malformed row degrades to an empty or zeroed factor
    and a warning instead of aborting the table.

    Raises
    ------
    DataUnavailable
        If no data row remains after the header.
    """
    factors: list[ImpactFactor] = []
    warnings: list[RunWarning] = []

    for index, row in enumerate(list(rows)[1:], start=1):
        cells = list(row) if isinstance(row, (list, tuple)) else []
        if len(cells) < REFERENCE_ROW_WIDTH:
            warnings.append(RunWarning(
                category="short-row",
                message=(
                    f"Reference row {index} has {len(cells)} cells, "
                    f"expected {REFERENCE_ROW_WIDTH}."
                ),
            ))
            cells += [None] * (REFERENCE_ROW_WIDTH - len(cells))

        family, grade, raw_abc, raw_d, raw_unit = cells[:REFERENCE_ROW_WIDTH]

        coefficients: list[float] = []
        for label, raw in (("stage ABC", raw_abc), ("stage D", raw_d)):
            number = parse_decimal(raw, default=None)
            if number is None:
                warnings.append(RunWarning(
                    category="unparsable-number",
                    message=f"Reference row {index}: {label} value {raw!r} is not a number, using 0.",
                ))
                number = 0.0
            coefficients.append(number)

        factors.append(ImpactFactor(
            material_family=_cell_text(family),
            material_grade=_cell_text(grade),
            stage_abc=coefficients[0],
            stage_d=coefficients[1],
            unit=parse_unit(raw_unit),
            unit_label=_cell_text(raw_unit),
        ))

    if not factors:
        raise DataUnavailable("Could not collect LCA data from base.")

    for w in warnings:
        logger.warning("%s: %s", w.category, w.message)
    logger.info("Parsed %d impact factors", len(factors))
    return factors, warnings


class FactorTable:
    """Ordered, read-only collection of impact factors.

    Lookups return the first matching row, as a scan in table order would.
    """

    def __init__(
        self,
        factors: Iterable[ImpactFactor],
        warnings: Iterable[RunWarning] = (),
    ) -> None:
        self._factors = tuple(factors)
        self.warnings = tuple(warnings)
        self._by_family: dict[str, ImpactFactor] = {}
        self._by_grade: dict[str, ImpactFactor] = {}
        for factor in self._factors:
            self._by_family.setdefault(factor.material_family, factor)
            self._by_grade.setdefault(factor.material_grade, factor)

    @classmethod
    def from_rows(cls, rows: Sequence[Any]) -> FactorTable:
        factors, warnings = parse_factor_rows(rows)
        return cls(factors, warnings)

    @classmethod
    def from_payload(cls, payload: Any) -> FactorTable:
        """Build a table from either reference payload shape."""
        return cls.from_rows(normalize_reference_payload(payload))

    def __len__(self) -> int:
        return len(self._factors)

    def __iter__(self) -> Iterator[ImpactFactor]:
        return iter(self._factors)

    def __getitem__(self, index: int) -> ImpactFactor:
        return self._factors[index]

    def for_family(self, family: str) -> ImpactFactor | None:
        """Return the family default factor."""
        if not family:
            return None
        return self._by_family.get(family)

    def for_grade(self, grade: str) -> ImpactFactor | None:
        """Return the grade-specific factor."""
        if not grade:
            return None
        return self._by_grade.get(grade)
