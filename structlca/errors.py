"""Exceptions raised by the LCA engine.

Fatal errors abort the whole run and nothing is published.  Non-fatal errors
are turned into run warnings by the engine and processing continues.
"""

from __future__ import annotations


class LcaError(Exception):
    """Base class for all LCA engine errors."""


class FatalLcaError(LcaError):
    """An error that terminates the run."""


class DataUnavailable(FatalLcaError):
    """The reference data could not be obtained or contained no factor rows."""


class NoStructuralModels(FatalLcaError):
    """The received graph holds no structural analysis model."""


class NoApplicableElements(FatalLcaError):
    """A structural model contains no linear or planar elements."""


class GroupingFailed(FatalLcaError):
    """No element of a structural model carries a material family."""


class MissingQuantity(LcaError):
    """An element lacks the mass or volume needed by its factor's unit."""

    def __init__(self, message: str, object_id: str | None = None) -> None:
        super().__init__(message)
        self.object_id = object_id
