"""
Help Scout Python SDK

Typed client for the Help Scout Mailbox API v2.
"""

from .facade import HelpScout
from .api_client import ApiClient, ClientConfig, DEFAULT_BASE_URL
from .batch import BatchSubmitter, chunked
from .collection import PageMetadata, PagedCollection
from .runtime.errors import (
    ErrorCode,
    HelpScoutError,
    InvalidArgumentError,
    TransportError,
    NotFoundError,
    AuthenticationError,
)
from .workflows import (
    WorkflowsEndpoint,
    Workflow,
    WorkflowFilters,
    WorkflowStatus,
    WorkflowType,
    RunWorkflowRequest,
)

__version__ = "0.1.0"
__all__ = [
    # Entry points
    "HelpScout",
    "ApiClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",

    # Pagination and batching
    "PageMetadata",
    "PagedCollection",
    "BatchSubmitter",
    "chunked",

    # Errors
    "ErrorCode",
    "HelpScoutError",
    "InvalidArgumentError",
    "TransportError",
    "NotFoundError",
    "AuthenticationError",

    # Workflows
    "WorkflowsEndpoint",
    "Workflow",
    "WorkflowFilters",
    "WorkflowStatus",
    "WorkflowType",
    "RunWorkflowRequest",
]
