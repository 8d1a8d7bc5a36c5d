"""Tests for the on-duty request store."""

import pytest

from campus_portal.exceptions import InvalidStatusTransitionError
from campus_portal.models import NewODRequest, Student


def test_add_request_assigns_sequential_ids(od_store, new_request, student):
    ids = [od_store.add_request(new_request, student).id for _ in range(3)]

    assert ids == ["OD-001", "OD-002", "OD-003"]
    assert all(req.status == "Pending" for req in od_store.requests)


def test_add_request_copies_student(od_store, new_request):
    details = {'name': "Arun Kumar", 'id': "SIST2022CS002"}

    request = od_store.add_request(new_request, details)
    details['name'] = "Changed"

    assert request.student == Student(name="Arun Kumar", id="SIST2022CS002")
    assert request.reason == new_request.reason
    assert request.time == "9:00 AM"


def test_approve_pending_request(od_store, new_request, student):
    request = od_store.add_request(new_request, student)

    updated = od_store.update_request_status(request.id, "Approved")

    assert updated.status == "Approved"
    assert od_store.get_request(request.id).status == "Approved"


def test_reviewed_request_cannot_change_again(od_store, new_request, student):
    request = od_store.add_request(new_request, student)
    od_store.update_request_status(request.id, "Approved")

    with pytest.raises(InvalidStatusTransitionError):
        od_store.update_request_status(request.id, "Rejected")

    assert od_store.get_request(request.id).status == "Approved"


def test_invalid_status_is_rejected(od_store, new_request, student):
    request = od_store.add_request(new_request, student)

    with pytest.raises(ValueError):
        od_store.update_request_status(request.id, "Pending")

    assert od_store.get_request(request.id).is_pending


def test_unknown_request_is_noop(od_store, new_request, student):
    request = od_store.add_request(new_request, student)

    assert od_store.update_request_status("OD-999", "Rejected") is None
    assert od_store.requests == [request]


def test_filter_requests(od_store, new_request, student):
    first = od_store.add_request(new_request, student)
    od_store.add_request(new_request, Student(name="Arun Kumar", id="SIST2022CS002"))
    od_store.update_request_status(first.id, "Rejected")

    assert [r.id for r in od_store.filter_requests("priya")] == ["OD-001"]
    assert [r.id for r in od_store.filter_requests("cs002")] == ["OD-002"]
    assert [r.id for r in od_store.filter_requests(status="pending")] == ["OD-002"]
    assert [r.id for r in od_store.filter_requests(status="REJECTED")] == ["OD-001"]
    assert od_store.requests_for_student("SIST2022CS001") == [od_store.get_request("OD-001")]


def test_request_without_time_omits_it_when_serialized(od_store, student):
    request = od_store.add_request(
        NewODRequest(reason="Symposium", event="IEEE Meet", date="2025-03-12"),
        student,
    )

    data = request.to_dict()
    assert 'time' not in data
    assert data['student'] == {'name': "Priya Raman", 'id': "SIST2022CS001"}
