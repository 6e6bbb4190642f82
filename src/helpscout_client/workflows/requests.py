"""Write requests for the workflows endpoint."""

from __future__ import annotations
from typing import Iterable, List, Union

from ..runtime.errors import InvalidArgumentError
from .models import WorkflowStatus


class RunWorkflowRequest:
    """
    Conversations to run a manual workflow against.

    The API accepts at most ``MAX_BATCH_SIZE`` conversations per call;
    larger requests are split into consecutive chunks when submitted.
    """

    MAX_BATCH_SIZE = 50

    def __init__(self, conversation_ids: Iterable[int]):
        ids = list(conversation_ids)
        if not ids:
            raise InvalidArgumentError("Conversations cannot be empty")
        for conversation_id in ids:
            if isinstance(conversation_id, bool) or not isinstance(conversation_id, int):
                raise InvalidArgumentError(
                    f"Conversation ids must be integers, got {conversation_id!r}"
                )
        self._conversation_ids = ids

    @property
    def conversation_ids(self) -> List[int]:
        return list(self._conversation_ids)

    def __len__(self) -> int:
        return len(self._conversation_ids)


class UpdateStatusRequest:
    """Status change for a single workflow."""

    def __init__(self, status: Union[str, WorkflowStatus]):
        if isinstance(status, WorkflowStatus):
            status = status.value
        if status not in (WorkflowStatus.INACTIVE.value, WorkflowStatus.ACTIVE.value):
            raise InvalidArgumentError('Status must be one of "inactive" or "active"')
        self.status = status

    def to_dict(self) -> dict:
        return {"status": self.status}


__all__ = [
    "RunWorkflowRequest",
    "UpdateStatusRequest",
]
