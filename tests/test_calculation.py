"""Tests for factor resolution and the impact calculation."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from specklepy.objects import Base

from structlca.errors import MissingQuantity
from structlca.lca.calculator import (
    ImpactResult,
    apply_result,
    compute_result,
    quantity_for,
)
from structlca.lca.classifier import classify_elements
from structlca.lca.elements import wrap_element
from structlca.lca.factors import FactorTable, ImpactFactor, ImpactUnit
from structlca.lca.resolver import resolve_factor, resolve_groups


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

HEADER = ["Material", "Type", "StageABC", "StageD", "Unit"]


def _element(family: str = "Concrete", grade: str = "C30", element_id: str = "e1", **members: Any):
    return SimpleNamespace(
        speckle_type="Objects.Structural.Geometry.Element1D",
        id=element_id,
        property=SimpleNamespace(material=SimpleNamespace(materialType=family, grade=grade)),
        **members,
    )


def _concrete_table() -> FactorTable:
    return FactorTable.from_rows([
        HEADER,
        ["Concrete", "", "10", "1", "kg"],
        ["Concrete", "C30", "20", "-2", "kg"],
    ])


def _factor(unit: ImpactUnit | None, abc: float = 5.0, d: float = -1.0) -> ImpactFactor:
    return ImpactFactor(material_family="Steel", material_grade="S355", stage_abc=abc, stage_d=d, unit=unit)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolveFactor:
    def test_grade_specific_factor_wins(self):
        assert resolve_factor(_concrete_table(), "Concrete", "C30").stage_abc == 20.0

    def test_family_default_applies(self):
        assert resolve_factor(_concrete_table(), "Concrete", "C40").stage_abc == 10.0

    def test_nothing_matches(self):
        assert resolve_factor(_concrete_table(), "Timber", "GL24h") is None

    def test_grade_match_ignores_family(self):
        table = FactorTable.from_rows([HEADER, ["Aggregate", "C30", "7", "0", "kg"]])
        assert resolve_factor(table, "Concrete", "C30").stage_abc == 7.0


class TestResolveGroups:
    def test_one_resolution_per_grade_subgroup(self):
        groups = classify_elements([
            _element(grade="C30", element_id="a"),
            _element(grade="C40", element_id="b"),
            _element(family="Timber", grade="GL24h", element_id="c"),
        ])
        resolved = resolve_groups(groups, _concrete_table())

        assert [(r.family, r.grade) for r in resolved] == [
            ("Concrete", "C30"),
            ("Concrete", "C40"),
            ("Timber", "GL24h"),
        ]
        assert resolved[0].factor.stage_abc == 20.0
        assert resolved[1].factor.stage_abc == 10.0
        assert not resolved[2].resolved
        assert resolved[2].object_ids == ["c"]


# ---------------------------------------------------------------------------
# Calculation
# ---------------------------------------------------------------------------

class TestComputeResult:
    def test_grade_specific_result(self):
        element = wrap_element(_element(grade="C30", mass=2.0))
        factor = resolve_factor(_concrete_table(), "Concrete", "C30")
        result = compute_result(element, factor)

        assert result.stage_abc == pytest.approx(40.0)
        assert result.stage_d == pytest.approx(-4.0)

    def test_family_default_result(self):
        element = wrap_element(_element(grade="C40", mass=2.0))
        factor = resolve_factor(_concrete_table(), "Concrete", "C40")

        assert compute_result(element, factor).stage_abc == pytest.approx(20.0)

    def test_volume_unit_uses_volume(self):
        element = wrap_element(_element(Weight=1000.0, Volume=0.5))
        result = compute_result(element, _factor(ImpactUnit.VOLUME, abc=300.0, d=-20.0))

        assert result.stage_abc == pytest.approx(150.0)
        assert result.stage_d == pytest.approx(-10.0)

    def test_mass_unit_uses_legacy_weight(self):
        element = wrap_element(_element(Weight=1000.0, Volume=0.5))
        assert compute_result(element, _factor(ImpactUnit.MASS)).stage_abc == pytest.approx(5000.0)

    def test_missing_quantity_raises(self):
        element = wrap_element(_element(Volume=0.5))
        with pytest.raises(MissingQuantity) as excinfo:
            compute_result(element, _factor(ImpactUnit.MASS))
        assert excinfo.value.object_id == "e1"

    def test_unknown_unit_skipped(self):
        element = wrap_element(_element(mass=1.0, volume=1.0))
        assert compute_result(element, _factor(None)) is None

    def test_quantity_for(self):
        element = wrap_element(_element(mass=2.0, volume=3.0))
        assert quantity_for(element, ImpactUnit.MASS) == 2.0
        assert quantity_for(element, ImpactUnit.VOLUME) == 3.0


class TestApplyResult:
    def test_attach_and_read_back(self):
        element = wrap_element(_element())
        apply_result(element, ImpactResult(stage_abc=40.0, stage_d=-4.0))

        assert element.obj.LCA.StageABC == 40.0
        assert element.obj.LCA.StageD == -4.0

    def test_reapplying_replaces(self):
        element = wrap_element(_element(mass=2.0))
        factor = resolve_factor(_concrete_table(), "Concrete", "C30")

        apply_result(element, compute_result(element, factor))
        apply_result(element, compute_result(element, factor))

        assert element.obj.LCA.StageABC == pytest.approx(40.0)
        assert element.obj.LCA.StageD == pytest.approx(-4.0)

    def test_result_is_speckle_object(self):
        element = wrap_element(_element())
        apply_result(element, ImpactResult(stage_abc=1.0, stage_d=0.0))

        assert isinstance(element.obj.LCA, Base)
        assert {"StageABC", "StageD"} <= set(element.obj.LCA.get_dynamic_member_names())

    def test_nothing_attached_before_apply(self):
        assert not hasattr(wrap_element(_element()).obj, "LCA")
