"""Tests for accepting consultation requests."""

import os

import pytest

from hanvitt.contact.service import submit_contact_request, validate_contact_payload
from hanvitt.contact.store import ContactStore
from hanvitt.core.exceptions import NotificationError, ValidationError

PAYLOAD = {"name": "Asha Rao", "email": "asha@example.com", "message": "Looking for a retirement plan"}


class RecordingNotifier:
    def __init__(self, fail=False):
        self.fail = fail
        self.notified = []

    def notify(self, request):
        if self.fail:
            raise NotificationError("smtp down")
        self.notified.append(request.id)


@pytest.fixture
def store(tmp_dir):
    return ContactStore(os.path.join(tmp_dir, "contacts.json"))


class TestValidatePayload:
    def test_reports_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_contact_payload({**PAYLOAD, "email": "nope"})
        assert exc_info.value.field == "email"
        assert "not a valid email" in exc_info.value.message

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_contact_payload({"email": "asha@example.com", "message": "hello there"})
        assert exc_info.value.field == "name"


class TestSubmitContactRequest:
    def test_stores_and_notifies(self, store):
        notifier = RecordingNotifier()
        request = submit_contact_request(PAYLOAD, store, notifier)
        assert request.id == 1
        assert notifier.notified == [1]
        assert len(store.list_requests()) == 1

    def test_notification_failure_still_succeeds(self, store):
        request = submit_contact_request(PAYLOAD, store, RecordingNotifier(fail=True))
        assert request.id == 1
        assert store.list_requests()[0].name == "Asha Rao"

    def test_invalid_payload_is_not_stored(self, store):
        with pytest.raises(ValidationError):
            submit_contact_request({**PAYLOAD, "message": "Hi"}, store)
        assert store.list_requests() == []

    def test_without_notifier(self, store):
        assert submit_contact_request(PAYLOAD, store).id == 1
