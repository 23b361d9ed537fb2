"""Accept a consultation request: validate, persist, then notify staff.

The request is saved before any email is attempted, so a mail outage never
loses a lead and never fails the submission.
"""

from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import NotificationError, ValidationError
from .models import ContactRequest, ContactRequestCreate
from .notifier import ContactNotifier
from .store import ContactStore


def validate_contact_payload(payload: dict[str, Any]) -> ContactRequestCreate:
    """Validate submitted fields.

    Raises:
        ValidationError: With the first problem's message and field path.
    """
    try:
        return ContactRequestCreate.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(first.get("msg", "Invalid input"), field=field) from e


def submit_contact_request(
    payload: dict[str, Any],
    store: ContactStore,
    notifier: ContactNotifier | None = None,
) -> ContactRequest:
    """Validate and store a request, then try to email the practice.

    Returns:
        The stored ContactRequest.

    Raises:
        ValidationError: The payload is invalid; nothing was stored.
    """
    data = validate_contact_payload(payload)
    request = store.create(data)

    if notifier is not None:
        try:
            notifier.notify(request)
        except NotificationError as e:
            logger.error(f"Email notification failed: {e}")

    return request
