import enum
from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

import config
from core.errors import EmptyStore, InvalidField, MemberStoreError, NotFound
from core.id_allocator import IdAllocator
from core.record_store import RecordStore
from core.utils import calculate_age, parse_dob
from models.member import Member

REGISTERED_MESSAGE = f"Your registration is completed. Welcome to {config.CLUB_NAME}"
EXISTING_CUSTOMER_MESSAGE = "Existing customer"
ALREADY_CANCELLED_MESSAGE = "Membership already cancelled"


class RegistrationStatus(enum.Enum):
    REGISTERED = "registered"
    DUPLICATE_MOBILE = "duplicate_mobile"
    FAILED = "failed"


class UpdateStatus(enum.Enum):
    UPDATED = "updated"
    ALREADY_CANCELLED = "already_cancelled"


@dataclass(frozen=True)
class RegistrationResult:
    status: RegistrationStatus
    member_id: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is RegistrationStatus.REGISTERED


@dataclass(frozen=True)
class UpdateResult:
    status: UpdateStatus
    member_id: str
    message: str = ""


# --- FIELD UPDATES ---

def update_member_data(
    store: RecordStore,
    member_id: str,
    column_index: int,
    update_function: Callable[[str], str],
) -> str:
    """
    Rewrites one column of one member's row.

    The first row (in file order) whose ID matches and that is wide enough to
    have `column_index` is updated with `update_function(old_value)`; the whole
    roster is then written back.

    Args:
        store (RecordStore): The roster to update.
        member_id (str): The membership ID to look for.
        column_index (int): Column to rewrite (see config.COL_*).
        update_function (Callable): Pure function old value -> new value.

    Returns:
        str: The updated membership ID.

    Raises:
        EmptyStore: If the roster is missing or empty.
        NotFound: If no row carries `member_id`. Nothing is written.
        InvalidField: If `update_function` rejects the stored value. Nothing is written.
        IoFailure: If the roster cannot be read or written.
    """
    if store.is_empty():
        raise EmptyStore(f"Roster {store.path} not found or is empty")

    rows = store.read_all()
    for i, row in enumerate(rows):
        if len(row) > column_index and row[config.COL_MEMBER_ID] == member_id:
            updated = list(row)
            try:
                updated[column_index] = update_function(row[column_index])
            except ValueError as e:
                raise InvalidField(member_id, column_index, row[column_index]) from e
            rows[i] = updated
            store.write_all(rows)
            return member_id

    raise NotFound(member_id)


def _increment_visits(old_value: str) -> str:
    count = int(old_value) if old_value.strip() else 0
    return str(count + 1)


class MemberService:
    """
    Registration, cancellation and check-in on top of one roster file.
    The allocator is shared for the lifetime of the service; build one
    service per roster.
    """

    def __init__(
        self,
        store: RecordStore,
        allocator: IdAllocator,
        default_visits: int = config.DEFAULT_NUMBER_OF_VISITS,
        on_duplicate: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.allocator = allocator
        self.default_visits = default_visits
        # Called with the mobile number when a duplicate registration is refused.
        self.on_duplicate = on_duplicate

    # --- REGISTRATION ---

    def is_mobile_number_exists(self, mobile_number: str) -> bool:
        for row in self.store.read_all():
            if len(row) > config.COL_MOBILE and row[config.COL_MOBILE] == mobile_number:
                return True
        return False

    def register(
        self,
        first_name: str,
        last_name: str,
        dob: str,
        email: str,
        mobile_number: str,
        membership_level: str,
    ) -> RegistrationResult:
        """
        Registers a new member and appends them to the roster.
        Input is expected to have passed validate_registration already.

        The ID is allocated before anything else and is not given back if the
        registration is refused or fails.

        Returns:
            RegistrationResult: REGISTERED with the new ID, DUPLICATE_MOBILE if
            the mobile number is already on the roster, FAILED on a bad date or
            a roster I/O error.
        """
        member_id = self.allocator.next_id()

        try:
            dob_date = parse_dob(dob)

            if self.is_mobile_number_exists(mobile_number):
                logger.warning(f"Registration refused, mobile {mobile_number} already registered (ID {member_id} unused)")
                if self.on_duplicate is not None:
                    self.on_duplicate(mobile_number)
                return RegistrationResult(RegistrationStatus.DUPLICATE_MOBILE, None, EXISTING_CUSTOMER_MESSAGE)

            member = Member(
                member_id=member_id,
                first_name=first_name,
                last_name=last_name,
                dob=dob_date,
                age=calculate_age(dob_date),
                email=email,
                mobile_number=mobile_number,
                membership_level=membership_level,
                membership_status=config.MEMBERSHIP_ACTIVATED,
                visit_count=self.default_visits,
            )
            self.store.append_record(member.to_row())
        except (ValueError, MemberStoreError) as e:
            logger.error(f"Registration failed for ID {member_id}: {e}")
            return RegistrationResult(RegistrationStatus.FAILED, None, f"Error: {e}")

        logger.info(f"Registered member {member_id} ({first_name} {last_name})")
        return RegistrationResult(RegistrationStatus.REGISTERED, member_id, REGISTERED_MESSAGE)

    # --- STATUS & VISITS ---

    def _find_row(self, member_id: str) -> Optional[List[str]]:
        for row in self.store.read_all():
            if row and row[config.COL_MEMBER_ID] == member_id:
                return row
        return None

    def _is_cancelled(self, row: Optional[List[str]]) -> bool:
        return (
            row is not None
            and len(row) > config.COL_STATUS
            and row[config.COL_STATUS] == config.MEMBERSHIP_CANCELLED
        )

    def cancel_membership(self, member_id: str) -> UpdateResult:
        """
        Sets a member's status to Cancelled.
        Cancelling twice is harmless: the second call reports ALREADY_CANCELLED
        and leaves the file untouched.
        """
        if self._is_cancelled(self._find_row(member_id)):
            return UpdateResult(UpdateStatus.ALREADY_CANCELLED, member_id, ALREADY_CANCELLED_MESSAGE)

        update_member_data(self.store, member_id, config.COL_STATUS, lambda old: config.MEMBERSHIP_CANCELLED)
        logger.info(f"Cancelled membership {member_id}")
        return UpdateResult(UpdateStatus.UPDATED, member_id, "Membership cancelled")

    def check_in(self, member_id: str) -> UpdateResult:
        """
        Records a visit by adding one to the member's visit count.
        Cancelled members are turned away without touching the count.
        """
        if self._is_cancelled(self._find_row(member_id)):
            return UpdateResult(UpdateStatus.ALREADY_CANCELLED, member_id, ALREADY_CANCELLED_MESSAGE)

        update_member_data(self.store, member_id, config.COL_VISITS, _increment_visits)
        logger.info(f"Checked in member {member_id}")
        return UpdateResult(UpdateStatus.UPDATED, member_id, "Check-in recorded")

    # --- LOOKUPS ---

    def list_members(self) -> List[Member]:
        """All readable members in roster order. Rows that do not parse are skipped."""
        members = []
        for row in self.store.read_all():
            try:
                members.append(Member.from_row(row))
            except ValueError as e:
                logger.debug(f"Skipping unreadable roster row {row!r}: {e}")
        return members

    def get_member_by_id(self, member_id: str) -> Optional[Member]:
        row = self._find_row(member_id.strip())
        if row is None:
            return None
        try:
            return Member.from_row(row)
        except ValueError as e:
            logger.warning(f"Roster row for {member_id} is unreadable: {e}")
            return None

    def get_members_by_status(self, status: str) -> List[Member]:
        wanted = status.strip().lower()
        return [m for m in self.list_members() if m.membership_status.lower() == wanted]
