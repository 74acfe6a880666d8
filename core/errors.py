from typing import Optional


class MemberStoreError(Exception):
    """Base class for every failure raised by the roster core."""


class IoFailure(MemberStoreError):
    """The roster file could not be read or written."""


class EmptyStore(IoFailure):
    """The roster file is missing or has zero length."""


class NotFound(MemberStoreError, LookupError):
    """No roster row carries the requested membership ID."""

    def __init__(self, member_id: str):
        super().__init__(f"Membership ID not found: {member_id}")
        self.member_id = member_id


class ValidationFailure(MemberStoreError, ValueError):
    """Registration input broke one of the form rules."""

    def __init__(self, reason: str, rule: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.rule = rule


class InvalidField(MemberStoreError, ValueError):
    """A stored column holds a value the update cannot work with."""

    def __init__(self, member_id: str, column_index: int, value: str):
        super().__init__(f"Member {member_id} has an unreadable value {value!r} in column {column_index}")
        self.member_id = member_id
        self.column_index = column_index
        self.value = value
