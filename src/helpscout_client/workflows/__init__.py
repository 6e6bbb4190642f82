"""Workflows resource."""

from .client import WorkflowsEndpoint
from .models import Workflow, WorkflowFilters, WorkflowStatus, WorkflowType
from .requests import RunWorkflowRequest, UpdateStatusRequest

__all__ = [
    "WorkflowsEndpoint",
    "Workflow",
    "WorkflowFilters",
    "WorkflowStatus",
    "WorkflowType",
    "RunWorkflowRequest",
    "UpdateStatusRequest",
]
