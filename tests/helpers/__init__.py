from .mocks import FakeSession, RecordedRequest, make_response
from .factories import PAGE_SIZE, mk_workflow, mk_workflows_page

__all__ = [
    "FakeSession",
    "RecordedRequest",
    "make_response",
    "PAGE_SIZE",
    "mk_workflow",
    "mk_workflows_page",
]
