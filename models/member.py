import datetime
from dataclasses import dataclass
from typing import List, Sequence

import config
from core.utils import format_dob


@dataclass
class Member:
    """
    Represents one row of the club roster.
    Field order matches the column order of the roster file.
    """
    member_id: str
    first_name: str
    last_name: str
    dob: datetime.date
    age: int
    email: str
    mobile_number: str
    membership_level: str
    membership_status: str = config.MEMBERSHIP_ACTIVATED
    visit_count: int = config.DEFAULT_NUMBER_OF_VISITS

    @property
    def is_cancelled(self) -> bool:
        return self.membership_status == config.MEMBERSHIP_CANCELLED

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_row(self) -> List[str]:
        """Serializes the member into the ten roster columns."""
        return [
            self.member_id,
            self.first_name,
            self.last_name,
            format_dob(self.dob),
            str(self.age),
            self.email,
            self.mobile_number,
            self.membership_level,
            self.membership_status,
            str(self.visit_count),
        ]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Member":
        """
        Rebuilds a member from a stored row.

        Raises:
            ValueError: If the row is short or a date/number column does not parse.
        """
        if len(row) < 10:
            raise ValueError(f"Expected 10 columns, got {len(row)}")

        visits = row[config.COL_VISITS].strip()
        return cls(
            member_id=row[0],
            first_name=row[1],
            last_name=row[2],
            dob=datetime.datetime.strptime(row[3], config.DATE_FORMAT).date(),
            age=int(row[4]),
            email=row[5],
            mobile_number=row[config.COL_MOBILE],
            membership_level=row[7],
            membership_status=row[config.COL_STATUS],
            visit_count=int(visits) if visits else 0,
        )
