"""Locate structural analysis models inside a received object graph."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from structlca.config import STRUCTURAL_MODEL_TYPE
from structlca.errors import NoStructuralModels

logger = logging.getLogger(__name__)


def default_traverse(root: Any) -> Iterator[Any]:
    """Yield every object reachable from *root* through any member.

    Detached members (stored under their ``@`` name) are followed too.
    """
    from specklepy.objects.graph_traversal.traversal import GraphTraversal, TraversalRule

    every_member = TraversalRule([lambda _: True], lambda o: o.get_member_names())
    traversal = GraphTraversal([every_member])
    for context in traversal.traverse(root):
        yield context.current


def is_structural_model(obj: Any) -> bool:
    chain = getattr(obj, "speckle_type", None) or ""
    return STRUCTURAL_MODEL_TYPE in str(chain).split(":")


def find_structural_models(
    root: Any,
    traverse: Callable[[Any], Iterable[Any]] | None = None,
) -> list[Any]:
    """Return the structural analysis models under *root*, in traversal order.

    Raises
    ------
    NoStructuralModels
        If the graph contains none.
    """
    walk = traverse or default_traverse
    models = [obj for obj in walk(root) if is_structural_model(obj)]
    if not models:
        raise NoStructuralModels(f"No object of type {STRUCTURAL_MODEL_TYPE} was found.")
    logger.debug("Found %d structural models", len(models))
    return models
