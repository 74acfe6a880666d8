"""
Pytest configuration and fixtures for the club roster tests
"""

import datetime
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from core.id_allocator import IdAllocator
from core.record_store import RecordStore
from services.member_service import MemberService


@pytest.fixture
def roster_path(tmp_path):
    """Path to a roster file that does not exist yet"""
    return tmp_path / "members.csv"


@pytest.fixture
def store(roster_path):
    return RecordStore(roster_path)


@pytest.fixture
def allocator(store):
    alloc = IdAllocator(store)
    alloc.initialize()
    return alloc


@pytest.fixture
def service(store, allocator):
    return MemberService(store, allocator)


@pytest.fixture
def today():
    """Fixed reference date for age checks"""
    return datetime.date(2024, 6, 15)


@pytest.fixture
def write_roster(roster_path):
    """Writes raw CRLF lines (header first) to the roster file"""
    def _write(*rows, header=True):
        lines = [config.CSV_HEADER] if header else []
        lines.extend(rows)
        roster_path.write_bytes("".join(line + "\r\n" for line in lines).encode("utf-8"))
        return roster_path
    return _write


@pytest.fixture
def alice():
    """Registration form for an adult member"""
    return {
        "first_name": "Alice",
        "last_name": "Smith",
        "dob": "1990-04-12",
        "email": "alice@example.com",
        "mobile_number": "5551234567",
        "membership_level": "Gold",
    }
