"""ReferenceDataSource — receives the LCA reference table from Speckle."""

from __future__ import annotations

import logging
from typing import Any

from specklepy.api import operations
from specklepy.logging.exceptions import SpeckleException
from specklepy.transports.server import ServerTransport

from structlca.errors import DataUnavailable

logger = logging.getLogger(__name__)


class ReferenceDataSource:
    """Fetch the latest version of the model holding the LCA reference data.

    Parameters
    ----------
    client:
        An authenticated ``SpeckleClient``.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def latest_object_id(self, project_id: str, model_id: str) -> str:
        """Return the root object id of the model's latest version."""
        model = self.client.model.get_with_versions(
            model_id=model_id, project_id=project_id, versions_limit=1
        )
        versions = getattr(model.versions, "items", None) or []
        if not versions:
            raise DataUnavailable(
                f"Model {model_id} in project {project_id} has no versions."
            )
        return versions[0].referencedObject

    def fetch(self, project_id: str, model_id: str) -> Any:
        """Receive the reference payload.

        Raises
        ------
        DataUnavailable
            If the model, its latest version or its objects cannot be read.
        """
        try:
            object_id = self.latest_object_id(project_id, model_id)
            transport = ServerTransport(stream_id=project_id, client=self.client)
            payload = operations.receive(object_id, transport)
        except SpeckleException as exc:
            logger.warning("Reference data fetch failed: %s", exc)
            raise DataUnavailable(f"Could not receive LCA data: {exc}") from exc

        logger.info("Received LCA reference data %s from project %s", object_id, project_id)
        return payload
