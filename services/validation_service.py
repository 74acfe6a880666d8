import datetime
import re
from dataclasses import dataclass
from typing import Optional

import config
from core.errors import ValidationFailure
from core.utils import DAYS_PER_YEAR, parse_dob

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
MOBILE_PATTERN = re.compile(r"[0-9]{10}")
MIN_NAME_LENGTH = 3


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of checking a registration form.
    `rule` names the first rule that failed; None means the form is valid.
    """
    rule: Optional[str] = None
    reason: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @property
    def is_valid(self) -> bool:
        return self.rule is None

    def raise_for_status(self) -> None:
        if not self.is_valid:
            raise ValidationFailure(self.reason, self.rule)


def validate_registration(
    first_name: str,
    last_name: str,
    dob: str,
    email: str,
    mobile: str,
    today: Optional[datetime.date] = None,
) -> ValidationResult:
    """
    Checks registration input. Rules run in a fixed order and the first
    failure is returned; later rules are not evaluated.

    Args:
        first_name (str): Must be longer than 3 characters.
        last_name (str): Must be longer than 3 characters.
        dob (str): Date of birth, strict YYYY-MM-DD.
        email (str): local@domain.tld with a tld of 2+ letters.
        mobile (str): Exactly 10 digits.
        today (date, optional): Reference date for the age check. Defaults to today.

    Returns:
        ValidationResult: `ValidationResult.ok()` if every rule passes.
    """
    if len(first_name) <= MIN_NAME_LENGTH:
        return ValidationResult("first_name", "Please enter a full first name with more than 3 characters.")

    if len(last_name) <= MIN_NAME_LENGTH:
        return ValidationResult("last_name", "Please enter a full last name with more than 3 characters.")

    try:
        dob_date = parse_dob(dob)
    except ValueError:
        return ValidationResult("dob_format", "Please enter a correct date of birth in YYYY-MM-DD format.")

    if today is None:
        today = datetime.date.today()
    # 365-day years, same approximation as the stored age
    cutoff = today - datetime.timedelta(days=config.MINIMUM_AGE * DAYS_PER_YEAR)
    if dob_date > cutoff:
        return ValidationResult("age", f"You must be at least {config.MINIMUM_AGE} years old to register.")

    if not EMAIL_PATTERN.fullmatch(email):
        return ValidationResult("email", "Please enter a valid email address.")

    if not MOBILE_PATTERN.fullmatch(mobile):
        return ValidationResult("mobile", "Please enter a 10-digit mobile number.")

    return ValidationResult.ok()
