"""Tests for consultation request models."""

import pytest
from pydantic import ValidationError

from hanvitt.contact.models import ContactRequestCreate


def _payload(**overrides):
    data = {"name": "Asha Rao", "email": "asha@example.com", "phone": "+91 98765 43210", "message": "Please call me back."}
    data.update(overrides)
    return data


class TestContactRequestCreate:
    def test_valid(self):
        req = ContactRequestCreate.model_validate(_payload())
        assert req.name == "Asha Rao"
        assert req.phone == "+91 98765 43210"

    def test_strips_whitespace(self):
        req = ContactRequestCreate.model_validate(_payload(name="  Asha  "))
        assert req.name == "Asha"

    def test_blank_phone_is_none(self):
        assert ContactRequestCreate.model_validate(_payload(phone="   ")).phone is None

    def test_phone_optional(self):
        data = _payload()
        del data["phone"]
        assert ContactRequestCreate.model_validate(data).phone is None

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "A"),
            ("name", "x" * 101),
            ("email", "not-an-email"),
            ("phone", "1" * 21),
            ("message", "Hi"),
        ],
    )
    def test_rejects(self, field, value):
        with pytest.raises(ValidationError):
            ContactRequestCreate.model_validate(_payload(**{field: value}))

    @pytest.mark.parametrize(
        "email",
        [
            "a@b..com",
            "a..b@example.com",
            "a@-x.com",
            "<x>@example.com",
            "asha@example",
            "x" * 60 + "@" + ".".join(["d" * 60] * 4) + ".com",
        ],
    )
    def test_rejects_malformed_email(self, email):
        with pytest.raises(ValidationError):
            ContactRequestCreate.model_validate(_payload(email=email))

    def test_accepts_plus_addressing(self):
        req = ContactRequestCreate.model_validate(_payload(email="asha+advice@example.co.in"))
        assert req.email == "asha+advice@example.co.in"
