"""LcaEngine — attaches LCA results to every structural element of a graph.

Usage::

    from structlca.lca import LcaEngine

    engine = LcaEngine()
    run = engine.run(root, reference_payload)
    if run.report.succeeded:
        publish(run.graph)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from structlca.errors import FatalLcaError, MissingQuantity
from structlca.lca.calculator import apply_result, compute_result
from structlca.lca.classifier import classify_elements
from structlca.lca.factors import FactorTable
from structlca.lca.report import RunReport
from structlca.lca.resolver import ResolvedGroup, resolve_groups
from structlca.speckle.traversal import find_structural_models

logger = logging.getLogger(__name__)

Traverse = Callable[[Any], Iterable[Any]]


@dataclass
class LcaRun:
    """A finished run: the report and the graph carrying the results."""

    report: RunReport
    graph: Any


class LcaEngine:
    """Run the LCA matching and calculation over a received graph.

    Parameters
    ----------
    traverse:
        Callable yielding every object of a graph.  Defaults to a
        specklepy graph traversal over every member.
    copy_graph:
        If *True* (default), results are attached to a deep copy and the
        input graph is left untouched.
    """

    def __init__(
        self,
        traverse: Traverse | None = None,
        copy_graph: bool = True,
    ) -> None:
        self.traverse = traverse
        self.copy_graph = copy_graph

    def run(self, root: Any, reference: FactorTable | Any) -> LcaRun:
        """Match and calculate every structural model found under *root*.

        Parameters
        ----------
        root:
            The received version's root object.
        reference:
            A FactorTable, or a raw reference payload in either shape.
        """
        report = RunReport()
        graph = copy.deepcopy(root) if self.copy_graph else root

        try:
            if isinstance(reference, FactorTable):
                table = reference
            else:
                table = FactorTable.from_payload(reference)
            report.warnings.extend(table.warnings)
            models = find_structural_models(graph, self.traverse)
        except FatalLcaError as exc:
            report.fail(str(exc))
            return LcaRun(report=report, graph=graph)

        for model in models:
            if report.failed:
                break
            elements = getattr(model, "elements", None) if model is not None else None
            if not elements:
                logger.debug("Skipping structural model without elements")
                continue
            try:
                self._process_model(elements, table, report)
            except FatalLcaError as exc:
                report.fail(str(exc))

        report.succeed()
        if report.succeeded:
            logger.info(report.message)
        return LcaRun(report=report, graph=graph)

    def _process_model(
        self,
        elements: Iterable[Any],
        table: FactorTable,
        report: RunReport,
    ) -> None:
        groups = classify_elements(elements)
        for group in resolve_groups(groups, table):
            report.counters.material_group_count += 1
            if not group.resolved:
                report.warn(
                    "missing-factor",
                    f"No LCA value found for material {group.family} / {group.grade}.",
                    group.object_ids,
                )
                continue
            self._process_group(group, report)

    @staticmethod
    def _process_group(group: ResolvedGroup, report: RunReport) -> None:
        for element in group.elements:
            try:
                result = compute_result(element, group.factor)
            except MissingQuantity as exc:
                report.warn(
                    "missing-quantity",
                    str(exc),
                    [exc.object_id] if exc.object_id else None,
                )
                continue
            if result is None:
                continue
            apply_result(element, result)
            report.counters.element_count += 1
