"""RunReport model: the accumulating outcome of one LCA run."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RunWarning(BaseModel):
    """A non-fatal issue recorded during a run."""

    category: str
    """'missing-factor', 'missing-quantity', 'unparsable-number', 'short-row'."""

    message: str
    object_ids: list[str] = Field(default_factory=list)
    """Speckle ids of the objects the warning applies to, when known."""


class RunCounters(BaseModel):
    """Counts accumulated across all structural models of a run."""

    material_group_count: int = 0
    element_count: int = 0


class RunReport(BaseModel):
    """Outcome of an LCA run.

    Starts as 'running', ends as 'success' or 'failed'.  Once failed, the
    engine stops processing further structural models.
    """

    status: str = "running"
    message: str = ""
    counters: RunCounters = Field(default_factory=RunCounters)
    warnings: list[RunWarning] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def succeeded(self) -> bool:
        return self.status == "success"

    def warn(
        self,
        category: str,
        message: str,
        object_ids: list[str] | None = None,
    ) -> None:
        """Record a non-fatal warning and keep going."""
        logger.warning("%s: %s", category, message)
        self.warnings.append(
            RunWarning(category=category, message=message, object_ids=object_ids or [])
        )

    def fail(self, message: str) -> None:
        """Mark the run as failed.  The first failure message is kept."""
        if self.failed:
            return
        logger.error("LCA run failed: %s", message)
        self.status = "failed"
        self.message = message

    def succeed(self) -> None:
        """Mark the run as successful and build the summary message."""
        if self.failed:
            return
        self.status = "success"
        self.message = self.summary()

    def summary(self) -> str:
        c = self.counters
        text = f"Different materials: {c.material_group_count} for {c.element_count} Elements."
        if self.warnings:
            text += f" {len(self.warnings)} warning(s)."
        return text
