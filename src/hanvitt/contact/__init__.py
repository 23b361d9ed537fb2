"""Consultation requests: validation, storage, and staff notification."""

from .models import ContactRequest, ContactRequestCreate
from .notifier import ContactNotifier
from .service import submit_contact_request
from .store import ContactStore

__all__ = [
    "ContactNotifier",
    "ContactRequest",
    "ContactRequestCreate",
    "ContactStore",
    "submit_contact_request",
]
