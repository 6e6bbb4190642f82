"""
Tests for the workflows endpoint.

Every test drives the public facade against a FakeSession and checks the
requests that reached the wire.
"""

import pytest

from helpers import mk_workflows_page

from helpscout_client import (
    InvalidArgumentError,
    TransportError,
    ErrorCode,
    RunWorkflowRequest,
    Workflow,
    WorkflowFilters,
    WorkflowStatus,
    WorkflowType,
)

WORKFLOWS_URL = "https://api.helpscout.net/v2/workflows"


class TestListWorkflows:
    """Tests for listing workflows."""

    def test_get_workflows(self, client, fake_session):
        """Test first page is parsed into Workflow models."""
        fake_session.queue(200, mk_workflows_page(1, 10))

        workflows = client.workflows().list()

        assert len(workflows) == 10
        assert isinstance(workflows[0], Workflow)
        assert fake_session.summary() == [("GET", WORKFLOWS_URL)]

    def test_get_workflows_with_empty_collection(self, client, fake_session):
        """Test an empty result yields an empty collection."""
        fake_session.queue(200, mk_workflows_page(1, 0))

        workflows = client.workflows().list()

        assert len(workflows) == 0
        assert workflows.total_element_count == 0
        assert workflows.total_page_count == 0
        assert list(workflows) == []
        assert fake_session.summary() == [("GET", WORKFLOWS_URL)]

    def test_get_workflows_parses_page_metadata(self, client, fake_session):
        """Test page metadata is exposed verbatim."""
        fake_session.queue(200, mk_workflows_page(1, 35))

        workflows = client.workflows().list()

        assert workflows.page_number == 1
        assert workflows.page_size == 10
        assert workflows.page_element_count == 10
        assert workflows.total_element_count == 35
        assert workflows.total_page_count == 4

    def test_page_metadata_of_later_page(self, client, fake_session):
        """Test metadata when the server answers with a later page."""
        fake_session.queue(200, mk_workflows_page(3, 35))

        workflows = client.workflows().list()

        assert workflows.page_number == 3
        assert workflows.page_element_count == 10
        assert workflows.total_page_count == 4

    def test_get_workflows_lazy_loads_pages(self, client, fake_session):
        """Test get_page issues exactly one extra GET with the page parameter."""
        fake_session.queue(200, mk_workflows_page(1, 20))
        fake_session.queue(200, mk_workflows_page(2, 20))

        first = client.workflows().list()
        second = first.get_page(2)

        assert len(second) == 10
        assert isinstance(second[0], Workflow)
        assert {w.id for w in first}.isdisjoint({w.id for w in second})
        assert fake_session.summary() == [
            ("GET", WORKFLOWS_URL),
            ("GET", f"{WORKFLOWS_URL}?page=2"),
        ]

    def test_get_page_does_not_mutate_receiver(self, client, fake_session):
        """Test the original collection keeps its page after get_page."""
        fake_session.queue(200, mk_workflows_page(1, 20))
        fake_session.queue(200, mk_workflows_page(2, 20))

        first = client.workflows().list()
        first_ids = [w.id for w in first]
        first.get_page(2)

        assert first.page_number == 1
        assert [w.id for w in first] == first_ids

    def test_repeated_get_page_fetches_each_time(self, client, fake_session):
        """Test repeated calls for the same page are not cached."""
        fake_session.queue(200, mk_workflows_page(1, 20))
        fake_session.queue(200, mk_workflows_page(2, 20))
        fake_session.queue(200, mk_workflows_page(2, 20))

        first = client.workflows().list()
        first.get_page(2)
        first.get_page(2)

        assert fake_session.request_count == 3

    def test_get_page_on_empty_collection(self, client, fake_session):
        """Test get_page on an empty result returns another empty collection."""
        fake_session.queue(200, mk_workflows_page(1, 0))
        fake_session.queue(200, mk_workflows_page(2, 0))

        empty = client.workflows().list().get_page(2)

        assert len(empty) == 0
        assert fake_session.summary()[-1] == ("GET", f"{WORKFLOWS_URL}?page=2")

    def test_list_with_filters_keeps_filters_across_pages(self, client, fake_session):
        """Test filter parameters are carried to later page fetches."""
        fake_session.queue(200, mk_workflows_page(1, 20))
        fake_session.queue(200, mk_workflows_page(2, 20))

        filters = WorkflowFilters(mailbox_id=7, type=WorkflowType.MANUAL)
        client.workflows().list(filters).get_page(2)

        assert fake_session.calls[0].params == {"mailbox": 7, "type": "manual"}
        assert fake_session.calls[1].params == {"mailbox": 7, "type": "manual", "page": 2}

    def test_list_failure_raises_transport_error(self, client, fake_session):
        """Test a non-2xx list response raises TransportError."""
        fake_session.queue(500, {"message": "Internal error"})

        with pytest.raises(TransportError) as exc_info:
            client.workflows().list()

        assert exc_info.value.status_code == 500
        assert exc_info.value.code == ErrorCode.HTTP_ERROR

    def test_list_with_malformed_body_raises_transport_error(self, client, fake_session):
        """Test a body without page metadata raises TransportError."""
        fake_session.queue(200, {"_embedded": {"workflows": []}})

        with pytest.raises(TransportError) as exc_info:
            client.workflows().list()

        assert exc_info.value.code == ErrorCode.UNEXPECTED_RESPONSE

    def test_workflow_fields_are_parsed(self, client, fake_session):
        """Test workflow payload fields map onto the model."""
        fake_session.queue(200, mk_workflows_page(1, 1))

        workflow = client.workflows().list()[0]

        assert workflow.id == 1
        assert workflow.mailbox_id == 1
        assert workflow.type == "manual"
        assert workflow.status == "active"
        assert workflow.is_manual
        assert workflow.is_active
        assert workflow.name == "Workflow 1"

    def test_unknown_status_and_type_do_not_break_the_page(self, client, fake_session):
        """Test items with statuses or types outside the known sets still parse."""
        body = mk_workflows_page(1, 2)
        body["_embedded"]["workflows"][1].update(status="invalid", type="scheduled")
        fake_session.queue(200, body)

        workflows = client.workflows().list()

        assert len(workflows) == 2
        assert workflows[0].is_active
        assert workflows[1].status == "invalid"
        assert workflows[1].type == "scheduled"
        assert not workflows[1].is_active
        assert not workflows[1].is_manual


class TestRunWorkflow:
    """Tests for running manual workflows."""

    def test_run_manual_workflow_with_no_conversations_raises(self, client, fake_session):
        """Test an empty conversation list is rejected before any request."""
        with pytest.raises(InvalidArgumentError, match="Conversations cannot be empty"):
            client.workflows().run_workflow(123, [])

        assert fake_session.request_count == 0

    def test_run_manual_workflow(self, client, fake_session):
        """Test a small batch is sent as one POST with the ids as body."""
        convo_ids = list(range(1, 11))

        client.workflows().run_workflow(123, convo_ids)

        assert fake_session.request_count == 1
        call = fake_session.get_last_call()
        assert call.method == "POST"
        assert call.url == f"{WORKFLOWS_URL}/123/run"
        assert call.json == convo_ids

    def test_run_manual_workflow_splits_batch_when_too_large(self, client, fake_session):
        """Test 51 ids are sent as two POSTs: 1-50 then 51."""
        convo_ids = list(range(1, 52))
        max_size = RunWorkflowRequest.MAX_BATCH_SIZE

        client.workflows().run_workflow(123, convo_ids)

        assert [(c.method, c.url) for c in fake_session.calls] == [
            ("POST", f"{WORKFLOWS_URL}/123/run"),
            ("POST", f"{WORKFLOWS_URL}/123/run"),
        ]
        assert fake_session.calls[0].json == convo_ids[:max_size]
        assert fake_session.calls[1].json == [51]

    def test_run_workflow_stops_on_first_failed_chunk(self, client, fake_session):
        """Test a failing chunk aborts the remaining chunks."""
        fake_session.queue(204)
        fake_session.queue(503, {"message": "Unavailable"})

        with pytest.raises(TransportError) as exc_info:
            client.workflows().run_workflow(123, list(range(1, 151)))

        assert exc_info.value.status_code == 503
        assert fake_session.request_count == 2
        assert fake_session.calls[1].json == list(range(51, 101))

    def test_run_workflow_rejects_non_integer_ids(self, client, fake_session):
        """Test non-integer ids are rejected before any request."""
        with pytest.raises(InvalidArgumentError):
            client.workflows().run_workflow(123, [1, "2"])

        assert fake_session.request_count == 0


class TestUpdateStatus:
    """Tests for workflow status updates."""

    def test_update_status_with_bad_status_raises(self, client, fake_session):
        """Test an unknown status is rejected before any request."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            client.workflows().update_status(123, "nope")

        assert exc_info.value.message == 'Status must be one of "inactive" or "active"'
        assert fake_session.request_count == 0

    def test_update_status_calls_endpoint(self, client, fake_session):
        """Test a valid status issues exactly one PATCH."""
        client.workflows().update_status(123, "active")

        assert fake_session.summary() == [("PATCH", f"{WORKFLOWS_URL}/123")]
        assert fake_session.get_last_call().json == {"status": "active"}

    def test_update_status_accepts_enum(self, client, fake_session):
        """Test WorkflowStatus members are accepted."""
        client.workflows().update_status(123, WorkflowStatus.INACTIVE)

        assert fake_session.get_last_call().json == {"status": "inactive"}

    def test_update_status_is_case_sensitive(self, client, fake_session):
        """Test status must match exactly."""
        with pytest.raises(InvalidArgumentError):
            client.workflows().update_status(123, "Active")

        assert fake_session.request_count == 0

    def test_update_status_not_found(self, client, fake_session):
        """Test a 404 surfaces as a transport error."""
        fake_session.queue(404, {"message": "Workflow not found"})

        with pytest.raises(TransportError) as exc_info:
            client.workflows().update_status(999, "inactive")

        assert exc_info.value.code == ErrorCode.NOT_FOUND
