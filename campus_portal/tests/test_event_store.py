"""Tests for the event store."""

from dataclasses import replace
from datetime import date, datetime

import pytest

from campus_portal.exceptions import EventFullError, EventValidationError
from campus_portal.models.event import PLACEHOLDER_IMAGE
from campus_portal.stores import EventStore


def test_add_event_assigns_fresh_state(event_store, make_event):
    created = [event_store.add_event(make_event(title=f"Event {i}")) for i in range(5)]

    assert len(event_store.events) == 5
    assert len({event.id for event in created}) == 5
    for event in event_store.events:
        assert event.attendees == 0
        assert event.registered_users == ()


def test_add_event_normalizes_date_and_image(event_store, make_event):
    from_string = event_store.add_event(make_event(date="2025-03-04T00:00:00.000Z", image=None))
    from_datetime = event_store.add_event(make_event(date=datetime(2025, 3, 4, 18, 30), image=""))

    assert from_string.date == date(2025, 3, 4)
    assert from_datetime.date == date(2025, 3, 4)
    assert from_string.image == PLACEHOLDER_IMAGE
    assert from_datetime.image == PLACEHOLDER_IMAGE


def test_add_event_accepts_form_dictionary(event_store):
    event = event_store.add_event({
        'title': "Robotics Workshop",
        'date': "2025-04-01",
        'time': "2:00 PM",
        'location': "Lab 3",
        'category': "Workshop",
        'organizer': "ECE Department",
        'capacity': "30",
    })

    assert event.capacity == 30
    assert event.description == ""


def test_add_event_rejects_missing_details(event_store, make_event):
    with pytest.raises(EventValidationError) as exc_info:
        event_store.add_event(make_event(title="  ", capacity=0, date="not a date"))

    assert "Title is required" in exc_info.value.errors
    assert "Capacity is required" in exc_info.value.errors
    assert "That's not a date!" in exc_info.value.errors
    assert event_store.events == []


def test_update_event_changes_only_given_fields(event_store, make_event):
    target = event_store.add_event(make_event(title="Original"))
    other = event_store.add_event(make_event(title="Other"))

    updated = event_store.update_event(target.id, title="X")

    assert updated.title == "X"
    assert updated == replace(target, title="X")
    assert event_store.get_event(other.id) == other


def test_update_event_keeps_id_and_image(event_store, make_event):
    event = event_store.add_event(make_event())

    updated = event_store.update_event(event.id, id="hijacked", image="", date="2025-05-01")

    assert updated.id == event.id
    assert updated.image == event.image
    assert updated.date == date(2025, 5, 1)
    assert event_store.get_event("hijacked") is None


def test_update_event_rejects_unknown_field(event_store, make_event):
    event = event_store.add_event(make_event())

    with pytest.raises(TypeError):
        event_store.update_event(event.id, venue="Elsewhere")


def test_update_unknown_event_is_noop(event_store, make_event):
    event = event_store.add_event(make_event())

    assert event_store.update_event("missing", title="X") is None
    assert event_store.events == [event]


def test_delete_event_is_idempotent(event_store, make_event):
    event = event_store.add_event(make_event())
    keep = event_store.add_event(make_event(title="Keep"))

    assert event_store.delete_event(event.id) is True
    assert event_store.delete_event(event.id) is False
    assert event_store.update_event(event.id, title="X") is None
    assert event_store.events == [keep]


def test_register_for_event_appends_participant(event_store, make_event):
    event = event_store.add_event(make_event())

    assert event_store.register_for_event(event.id, "S1") is True

    registered = event_store.get_event(event.id)
    assert registered.attendees == 1
    assert registered.registered_users == ("S1",)


def test_register_twice_is_deduplicated(event_store, make_event):
    event = event_store.add_event(make_event())
    event_store.register_for_event(event.id, "S1")

    assert event_store.register_for_event(event.id, "S1") is False

    registered = event_store.get_event(event.id)
    assert registered.attendees == 1
    assert registered.registered_users == ("S1",)


def test_register_for_unknown_event_is_noop(event_store, make_event):
    event = event_store.add_event(make_event())

    assert event_store.register_for_event("missing", "S1") is False
    assert event_store.events == [event]


def test_fest_registration_scenario(make_event):
    store = EventStore()
    fest = store.add_event(make_event(title="Fest", capacity=2))

    store.register_for_event(fest.id, "A")
    store.register_for_event(fest.id, "B")

    event = store.get_event(fest.id)
    assert event.attendees == 2
    assert event.registered_users == ("A", "B")
    assert event.is_full

    with pytest.raises(EventFullError):
        store.register_for_event(fest.id, "C")
    assert store.get_event(fest.id).registered_users == ("A", "B")


def test_mutations_replace_collection_snapshot(event_store, make_event):
    event = event_store.add_event(make_event())
    before = event_store.events

    event_store.register_for_event(event.id, "S1")

    assert before[0].attendees == 0
    assert before[0].registered_users == ()
    assert event_store.events[0].attendees == 1


def test_subscribers_see_new_and_previous_state(event_store, make_event):
    calls = []
    unsubscribe = event_store.subscribe(lambda new, old: calls.append((len(new), len(old))))

    event = event_store.add_event(make_event())
    event_store.delete_event(event.id)
    unsubscribe()
    event_store.add_event(make_event())

    assert calls == [(1, 0), (0, 1)]


def test_search_and_participant_queries(event_store, make_event):
    hackathon = event_store.add_event(make_event(title="Hackathon", description="24 hour coding"))
    event_store.add_event(make_event(title="Dance Night", description="Cultural evening"))
    event_store.register_for_event(hackathon.id, "S1")

    assert [e.title for e in event_store.search_events("CODING")] == ["Hackathon"]
    assert len(event_store.search_events("")) == 2
    assert event_store.events_for_participant("S1") == [event_store.get_event(hackathon.id)]
    assert event_store.events_for_participant("S2") == []


def test_snapshot_cannot_change_registrations(event_store, make_event):
    event = event_store.add_event(make_event())
    snapshot = event_store.events[0]

    with pytest.raises(AttributeError):
        snapshot.registered_users.append("intruder")

    stored = event_store.get_event(event.id)
    assert stored.registered_users == ()
    assert stored.attendees == 0


def test_update_event_leaves_registrations_alone(event_store, make_event):
    event = event_store.add_event(make_event())
    event_store.register_for_event(event.id, "S1")

    updated = event_store.update_event(event.id, registered_users=[], attendees=5, title="Renamed")

    assert updated.title == "Renamed"
    assert updated.registered_users == ("S1",)
    assert updated.attendees == 1


@pytest.mark.parametrize("changes, message", [
    ({'title': ""}, "Title is required"),
    ({'capacity': -1}, "Capacity is required"),
    ({'organizer': "   "}, "Organizer is required"),
])
def test_update_event_rejects_invalid_details(event_store, make_event, changes, message):
    event = event_store.add_event(make_event())

    with pytest.raises(EventValidationError) as exc_info:
        event_store.update_event(event.id, **changes)

    assert message in exc_info.value.errors
    assert event_store.get_event(event.id) == event


def test_form_with_unreadable_capacity_fails_validation(event_store):
    with pytest.raises(EventValidationError) as exc_info:
        event_store.add_event({
            'title': "Robotics Workshop",
            'date': "2025-04-01",
            'time': "2:00 PM",
            'location': "Lab 3",
            'category': "Workshop",
            'organizer': "ECE Department",
            'capacity': "abc",
        })

    assert exc_info.value.errors == ["Capacity is required"]
    assert event_store.events == []
