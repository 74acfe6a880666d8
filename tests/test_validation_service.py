"""
Unit tests for registration form validation
"""

import datetime

import pytest

from core.errors import ValidationFailure
from services.validation_service import ValidationResult, validate_registration


def _validate(today, **overrides):
    form = {
        "first_name": "Alice",
        "last_name": "Smith",
        "dob": "2000-01-01",
        "email": "a@b.com",
        "mobile": "1234567890",
    }
    form.update(overrides)
    return validate_registration(today=today, **form)


class TestRuleOrder:
    """First failing rule wins"""

    def test_valid_form(self, today):
        result = _validate(today)
        assert result.is_valid
        assert result == ValidationResult.ok()
        assert result.reason == ""

    def test_short_first_name(self, today):
        result = _validate(today, first_name="Al")
        assert not result.is_valid
        assert result.rule == "first_name"
        assert "first name" in result.reason

    def test_first_name_reported_before_everything_else(self, today):
        result = _validate(today, first_name="Al", last_name="X", dob="bad", email="bad", mobile="1")
        assert result.rule == "first_name"

    def test_last_name_before_date(self, today):
        result = _validate(today, last_name="Li", dob="not-a-date")
        assert result.rule == "last_name"
        assert "last name" in result.reason

    def test_date_before_email(self, today):
        assert _validate(today, dob="2000-13-01", email="nope").rule == "dob_format"


class TestNameRules:
    """Names must be longer than 3 characters"""

    @pytest.mark.parametrize("name", ["", "A", "Bob", "Eve"])
    def test_three_or_fewer_characters_rejected(self, today, name):
        assert _validate(today, first_name=name).rule == "first_name"

    def test_four_characters_accepted(self, today):
        assert _validate(today, first_name="Anna", last_name="Khan").is_valid


class TestDateOfBirth:
    """Strict YYYY-MM-DD parsing and the 18+ rule"""

    @pytest.mark.parametrize("dob", ["2000-13-01", "2000-01-32", "2001-02-29", "01/01/2000", "", "yesterday"])
    def test_bad_dates(self, today, dob):
        result = _validate(today, dob=dob)
        assert result.rule == "dob_format"
        assert "YYYY-MM-DD" in result.reason

    def test_leap_day_accepted(self, today):
        assert _validate(today, dob="2000-02-29").is_valid

    def test_ten_year_old_rejected(self, today):
        dob = today.replace(year=today.year - 10).isoformat()
        result = _validate(today, dob=dob)
        assert result.rule == "age"
        assert "18" in result.reason

    def test_uses_365_day_years(self, today):
        # 18 * 365 days exactly is old enough, one day fewer is not
        cutoff = today - datetime.timedelta(days=18 * 365)
        assert _validate(today, dob=cutoff.isoformat()).is_valid
        younger = cutoff + datetime.timedelta(days=1)
        assert _validate(today, dob=younger.isoformat()).rule == "age"

    def test_future_date_rejected_as_underage(self, today):
        assert _validate(today, dob="2030-01-01").rule == "age"

    def test_defaults_to_current_date(self):
        result = validate_registration("Alice", "Smith", "1950-01-01", "a@b.com", "1234567890")
        assert result.is_valid


class TestContactRules:
    """Email and mobile shapes"""

    @pytest.mark.parametrize("email", ["alice", "alice@", "alice@example", "alice@example.c", "@example.com", "a b@example.com"])
    def test_bad_emails(self, today, email):
        assert _validate(today, email=email).rule == "email"

    @pytest.mark.parametrize("email", ["a@b.com", "first.last+club@mail.example.org", "X_Y%z@host-1.io"])
    def test_good_emails(self, today, email):
        assert _validate(today, email=email).is_valid

    @pytest.mark.parametrize("mobile", ["123456789", "12345678901", "12345abcde", "123-456-7890", ""])
    def test_bad_mobiles(self, today, mobile):
        result = _validate(today, mobile=mobile)
        assert result.rule == "mobile"
        assert "10-digit" in result.reason


class TestRaiseForStatus:
    def test_invalid_raises(self, today):
        with pytest.raises(ValidationFailure) as exc:
            _validate(today, mobile="123").raise_for_status()
        assert exc.value.rule == "mobile"
        assert isinstance(exc.value, ValueError)

    def test_valid_does_not_raise(self, today):
        _validate(today).raise_for_status()
