"""Unit tests for derived document keys."""

from datetime import datetime, timezone

import pytest

from venue.domain.value import (
    event_key,
    invitation_key,
    performer_key,
    sanitize_contact,
)


def test_event_key_joins_date_and_compact_time():
    assert event_key("2024-05-01", "19:00") == "2024-05-01_1900"
    assert event_key("2024-12-31", "00:15") == "2024-12-31_0015"


@pytest.mark.parametrize(
    "date,start_time",
    [("2024/05/01", "19:00"), ("2024-05-01", "7pm"), ("", "19:00"), ("2024-05-01", "")],
)
def test_event_key_rejects_malformed_input(date, start_time):
    with pytest.raises(ValueError):
        event_key(date, start_time)


def test_sanitize_contact_replaces_at_and_dots():
    assert sanitize_contact("Band@X.com") == "band_x_com"
    assert sanitize_contact("  first.last@mail.example.org ") == "first_last_mail_example_org"


def test_invitation_key_uses_epoch_millis():
    issued_at = datetime(2024, 4, 20, 18, 0, 0, 123000, tzinfo=timezone.utc)

    key = invitation_key("band@x.com", issued_at)

    assert key == "band_x_com_1713636000123"
    assert key.endswith("123")


def test_invitation_keys_differ_by_millisecond():
    first = datetime(2024, 4, 20, 18, 0, 0, 1000, tzinfo=timezone.utc)
    second = datetime(2024, 4, 20, 18, 0, 0, 2000, tzinfo=timezone.utc)

    assert invitation_key("band@x.com", first) != invitation_key("band@x.com", second)


def test_performer_key_is_sanitized_email():
    assert performer_key("Band@X.com") == "band_x_com"
