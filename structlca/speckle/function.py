"""Speckle Automate function: attach LCA results and publish a new version."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field
from speckle_automate import AutomateBase, AutomationContext

from structlca.config import load_config
from structlca.errors import DataUnavailable
from structlca.lca.engine import LcaEngine
from structlca.lca.factors import FactorTable
from structlca.lca.report import RunReport
from structlca.speckle.gateway import ReferenceDataSource

logger = logging.getLogger(__name__)


class FunctionInputs(AutomateBase):
    """User inputs of the automation."""

    lca_data_model_id: str = Field(
        title="LCA data model ID",
        description="Model holding the LCA reference table.",
    )
    lca_data_project_id: str = Field(
        default="",
        title="LCA data project ID",
        description="Project of the LCA data model. Empty means the triggering project.",
    )


def _report_warnings(automate_context: AutomationContext, report: RunReport) -> list[str]:
    """Attach object-level warnings to the run.

    Returns the messages of the warnings that have no object to attach to.
    """
    unattached: list[str] = []
    for warning in report.warnings:
        if not warning.object_ids:
            unattached.append(warning.message)
            continue
        automate_context.attach_warning_to_objects(
            category=warning.category,
            object_ids=warning.object_ids,
            message=warning.message,
        )
    return unattached


def automate_function(
    automate_context: AutomationContext,
    function_inputs: FunctionInputs,
    *,
    engine: LcaEngine | None = None,
    data_source: Any = None,
) -> RunReport:
    """Attach LCA values to every structural element of the triggering version.

    Publishes the result as a new version of the model
    ``"<model name><suffix>"`` and marks the run successful, or marks it
    failed and publishes nothing.
    """
    config = load_config()
    run_data = automate_context.automation_run_data
    project_id = run_data.project_id
    model_id = run_data.triggers[0].payload.model_id

    root = automate_context.receive_version()
    model_name = automate_context.speckle_client.model.get(
        model_id=model_id, project_id=project_id
    ).name

    source = data_source or ReferenceDataSource(automate_context.speckle_client)
    lca_project_id = function_inputs.lca_data_project_id or project_id

    try:
        table = FactorTable.from_payload(
            source.fetch(lca_project_id, function_inputs.lca_data_model_id)
        )
    except DataUnavailable as exc:
        report = RunReport()
        report.fail(str(exc))
        automate_context.mark_run_failed(report.message)
        return report

    run = (engine or LcaEngine()).run(root, table)
    report = run.report
    unattached = _report_warnings(automate_context, report)

    if not report.succeeded:
        automate_context.mark_run_failed(report.message)
        return report

    target_model = f"{model_name}{config['STRUCTLCA_RESULT_MODEL_SUFFIX']}"
    automate_context.create_new_version_in_project(
        run.graph, target_model, f"LCA results for {model_name}"
    )
    logger.info("Published LCA results to model %r", target_model)
    automate_context.mark_run_success("\n".join([report.message, *unattached]))
    return report
