"""
Unit tests for membership ID allocation
"""

from core.id_allocator import IdAllocator
from core.record_store import RecordStore


def _row(member_id, mobile="5550000000"):
    return f"{member_id},Alice,Smith,1990-04-12,34,a@b.com,{mobile},Gold,Activated,0"


class TestInitialize:
    """Priming the counter from the roster"""

    def test_empty_store_uses_default(self, store):
        assert IdAllocator(store).initialize() == 0

    def test_custom_default(self, store):
        assert IdAllocator(store, default_start=1000).initialize() == 1000

    def test_takes_highest_id(self, store, write_roster):
        write_roster(_row("00000007"), _row("00000042"), _row("00000013"))
        assert IdAllocator(store).initialize() == 42

    def test_skips_empty_and_unparsable_ids(self, store, write_roster):
        write_roster(_row("00000005"), _row(""), _row("legacy-9"), _row("abc"))
        assert IdAllocator(store).initialize() == 5


class TestNextId:
    """Issuing IDs"""

    def test_restart_continues_after_highest(self, store, write_roster):
        write_roster(_row("00000041"), _row("00000042"))
        alloc = IdAllocator(store)
        alloc.initialize()
        assert alloc.next_id() == "00000043"

    def test_ids_are_zero_padded_to_eight_digits(self, allocator):
        first = allocator.next_id()
        assert first == "00000001"
        assert len(first) == 8

    def test_ids_never_repeat(self, allocator):
        issued = [allocator.next_id() for _ in range(25)]
        assert len(set(issued)) == 25
        assert issued == sorted(issued)

    def test_lazy_initialize(self, store, write_roster):
        write_roster(_row("00000010"))
        assert IdAllocator(store).next_id() == "00000011"

    def test_counter_is_not_reread_from_disk(self, store, write_roster, roster_path):
        write_roster(_row("00000003"))
        alloc = IdAllocator(store)
        alloc.initialize()
        write_roster(_row("00000003"), _row("00000099"))
        assert alloc.next_id() == "00000004"

    def test_independent_allocators(self, tmp_path):
        a = IdAllocator(RecordStore(tmp_path / "a.csv"))
        b = IdAllocator(RecordStore(tmp_path / "b.csv"))
        a.next_id()
        a.next_id()
        assert b.next_id() == "00000001"
        assert a.last_id == 2


class TestLegacyIds:
    """IDs that int() would accept but are not plain digits"""

    def test_signed_underscored_and_unicode_ids_skipped(self, store, write_roster):
        write_roster(_row("00000004"), _row("+900"), _row("1_000"), _row("٩٩٩"))
        assert IdAllocator(store).initialize() == 4
