"""Normalization of the two reference payload shapes into plain rows.

The reference model is pushed either from a spreadsheet connector, which
stores the table under a ``data`` member, or from Grasshopper, which stores a
dynamic bag under ``LCA`` whose members are the rows.  Either member may also
be detached, in which case it is received under its ``@`` name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from structlca.config import REFERENCE_BAG_MEMBERS, REFERENCE_TABLE_MEMBERS
from structlca.errors import DataUnavailable

logger = logging.getLogger(__name__)

# Members every Speckle object carries that are never table rows
_BASE_MEMBERS = frozenset({"id", "applicationId", "totalChildrenCount", "speckle_type", "units"})


def _member(obj: Any, names: tuple[str, ...]) -> Any:
    """First of *names* set on *obj*, or None."""
    for name in names:
        if isinstance(obj, Mapping):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _bag_values(bag: Any) -> list[Any]:
    """Return the values of a dynamic bag in insertion order."""
    if isinstance(bag, Mapping):
        return list(bag.values())
    if isinstance(bag, (list, tuple)):
        return list(bag)
    if not hasattr(bag, "__dict__"):
        return []

    dynamic: set[str] | None = None
    if hasattr(bag, "get_dynamic_member_names"):
        dynamic = set(bag.get_dynamic_member_names())

    return [
        value
        for name, value in vars(bag).items()
        if not name.startswith("_")
        and name not in _BASE_MEMBERS
        and (dynamic is None or name in dynamic)
    ]


def normalize_reference_payload(payload: Any) -> list[Any]:
    """Return the reference rows (header included) from any payload shape.

    Accepts a received Speckle object or mapping holding either a ``data``
    table or an ``LCA`` bag, or an already-normalized list of rows.

    Raises
    ------
    DataUnavailable
        If the payload is missing, has neither shape, or holds no rows.
    """
    if payload is None:
        raise DataUnavailable("No LCA reference data was received.")

    if isinstance(payload, (list, tuple)):
        rows = list(payload)
        source = "rows"
    else:
        table = _member(payload, REFERENCE_TABLE_MEMBERS)
        bag = _member(payload, REFERENCE_BAG_MEMBERS)
        if table is not None:
            rows = list(table) if isinstance(table, (list, tuple)) else []
            source = "table"
        elif bag is not None:
            rows = _bag_values(bag)
            source = "bag"
        else:
            raise DataUnavailable("Could not collect LCA data from base.")

    if not rows:
        raise DataUnavailable("Could not collect LCA data from base.")

    logger.debug("Normalized %d reference rows from %s payload", len(rows), source)
    return rows
