"""Unit tests for request DTO validation messages."""

import pytest
from pydantic import ValidationError

from app.application.schemas import (
    ClientPayload,
    LinkPayload,
    PasswordChangeRequest,
    format_validation_errors,
)


def _errors(exc_info) -> dict[str, list[str]]:
    return format_validation_errors(exc_info.value.errors())


def test_client_payload_trims_and_blanks_optional_text():
    payload = ClientPayload.model_validate(
        {"name": "  Acme  ", "engagementType": "PROJECT_BASED", "email": "   "}
    )
    assert payload.name == "Acme"
    assert payload.email is None


def test_client_payload_messages_are_keyed_in_camel_case():
    with pytest.raises(ValidationError) as exc_info:
        ClientPayload.model_validate(
            {"name": " ", "engagementType": "TIME_BASED", "workingDaysPerWeek": 9}
        )

    errors = _errors(exc_info)
    assert errors["name"] == ["Client name is required."]
    assert errors["workingDaysPerWeek"] == ["Working days cannot be more than 7."]


def test_client_payload_coerces_whole_number_strings():
    payload = ClientPayload.model_validate(
        {"name": "Acme", "engagementType": "TIME_BASED", "workingHoursPerDay": "8"}
    )
    assert payload.working_hours_per_day == 8

    with pytest.raises(ValidationError) as exc_info:
        ClientPayload.model_validate(
            {"name": "Acme", "engagementType": "TIME_BASED", "workingHoursPerDay": "7.5"}
        )
    assert _errors(exc_info)["workingHoursPerDay"] == ["Must be a whole number."]


@pytest.mark.parametrize(
    ("url", "message"),
    [
        ("example.com", "Enter a valid URL including http:// or https://."),
        ("ftp://example.com/file", "Only http:// or https:// URLs are allowed."),
        ("  ", "Link URL is required."),
    ],
)
def test_link_payload_url_rules(url, message):
    with pytest.raises(ValidationError) as exc_info:
        LinkPayload.model_validate({"projectId": "p-1", "title": "Docs", "url": url})
    assert _errors(exc_info)["url"] == [message]


def test_link_payload_blank_codebase_means_unset():
    payload = LinkPayload.model_validate(
        {"projectId": " p-1 ", "codebaseId": "", "title": "Docs", "url": "https://example.com"}
    )
    assert payload.project_id == "p-1"
    assert payload.codebase_id is None


def test_password_change_reports_mismatch_on_confirmation():
    with pytest.raises(ValidationError) as exc_info:
        PasswordChangeRequest.model_validate(
            {
                "currentPassword": "old-password",
                "newPassword": "new-password",
                "confirmPassword": "other-password",
            }
        )
    assert _errors(exc_info) == {"confirmPassword": ["Passwords do not match."]}


def test_password_change_short_password_does_not_also_report_mismatch():
    with pytest.raises(ValidationError) as exc_info:
        PasswordChangeRequest.model_validate(
            {"currentPassword": "old-password", "newPassword": "short", "confirmPassword": "x"}
        )
    assert _errors(exc_info) == {
        "newPassword": ["New password must be at least 8 characters."]
    }


def test_format_validation_errors_skips_location_prefixes():
    errors = [
        {"loc": ("body", "engagement_type"), "msg": "bad"},
        {"loc": ("body",), "msg": "whole body"},
    ]
    assert format_validation_errors(errors, skip_prefix=("body",)) == {
        "engagementType": ["bad"],
        "form": ["whole body"],
    }
