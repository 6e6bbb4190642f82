"""
Workflows endpoint.

Example:
    ```python
    client = HelpScout(access_token="...")

    workflows = client.workflows().list()
    for workflow in workflows:
        print(workflow.id, workflow.name)

    client.workflows().run_workflow(123, [1001, 1002, 1003])
    client.workflows().update_status(123, "inactive")
    ```
"""

from __future__ import annotations
import logging
from typing import Iterable, Optional, Union

from ..batch import BatchSubmitter
from ..client.requests import patch, post
from ..collection import PagedCollection
from ..endpoint import Endpoint
from .models import Workflow, WorkflowFilters, WorkflowStatus
from .requests import RunWorkflowRequest, UpdateStatusRequest

logger = logging.getLogger(__name__)


class WorkflowsEndpoint(Endpoint[Workflow]):
    """Access to ``/workflows``."""

    path = "/workflows"
    rel = "workflows"
    model = Workflow

    def list(self, filters: Optional[WorkflowFilters] = None) -> PagedCollection[Workflow]:
        """
        List workflows.

        Issues a single GET for the first page; further pages are fetched
        from the returned collection with ``get_page()``.

        Args:
            filters: Optional mailbox/type filters

        Returns:
            The first page of workflows
        """
        params = filters.to_params() if filters is not None else None
        return self._list(params)

    def run_workflow(self, workflow_id: int, conversation_ids: Iterable[int]) -> None:
        """
        Run a manual workflow on a list of conversations.

        Lists longer than ``RunWorkflowRequest.MAX_BATCH_SIZE`` are sent as
        several POST requests, one chunk at a time and in order. If a chunk
        fails its error is raised and the remaining chunks are not sent.

        Raises:
            InvalidArgumentError: If ``conversation_ids`` is empty; nothing is sent
            TransportError: If any chunk's request fails
        """
        request = RunWorkflowRequest(conversation_ids)
        path = f"{self.path}/{workflow_id}/run"
        logger.info(f"Running workflow {workflow_id} on {len(request)} conversation(s)")

        submitter = BatchSubmitter(RunWorkflowRequest.MAX_BATCH_SIZE)
        submitter.submit(
            request.conversation_ids,
            lambda chunk: self._api.send(post(path, chunk)),
        )

    def update_status(self, workflow_id: int, status: Union[str, WorkflowStatus]) -> None:
        """
        Activate or deactivate a workflow.

        Raises:
            InvalidArgumentError: If ``status`` is not "active" or "inactive";
                nothing is sent
            TransportError: If the request fails
        """
        request = UpdateStatusRequest(status)
        self._api.send(patch(f"{self.path}/{workflow_id}", request.to_dict()))
        logger.info(f"Workflow {workflow_id} set to {request.status}")


__all__ = ["WorkflowsEndpoint"]
