"""
Workflow models.

Field names follow the API's camelCase payloads through aliases; models
accept either spelling and keep fields they do not know about.
"""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class WorkflowStatus(str, Enum):
    """Workflow activation status."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class WorkflowType(str, Enum):
    """Whether a workflow runs on demand or on its own triggers."""
    MANUAL = "manual"
    AUTOMATIC = "automatic"


class Workflow(BaseModel):
    """A Help Scout workflow."""
    id: int
    mailbox_id: Optional[int] = Field(default=None, alias="mailboxId")
    # Any string; the API also reports states such as "invalid"
    type: Optional[str] = None
    status: Optional[str] = None
    order: Optional[int] = None
    name: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    modified_at: Optional[datetime] = Field(default=None, alias="modifiedAt")

    model_config = {"populate_by_name": True, "extra": "allow"}

    @property
    def is_manual(self) -> bool:
        return self.type == WorkflowType.MANUAL.value

    @property
    def is_active(self) -> bool:
        return self.status == WorkflowStatus.ACTIVE.value


class WorkflowFilters(BaseModel):
    """
    Filters for listing workflows.

    Filters become fixed query parameters and are carried over to every page
    fetched from the resulting collection.
    """
    mailbox_id: Optional[int] = Field(default=None, alias="mailbox", ge=1)
    type: Optional[WorkflowType] = None

    model_config = {"populate_by_name": True}

    def to_params(self) -> Dict[str, Any]:
        """Convert to query parameters."""
        params: Dict[str, Any] = {}
        if self.mailbox_id is not None:
            params["mailbox"] = self.mailbox_id
        if self.type is not None:
            params["type"] = self.type.value
        return params


__all__ = [
    "WorkflowStatus",
    "WorkflowType",
    "Workflow",
    "WorkflowFilters",
]
