"""
Tests for the front desk worker: runs check-in / cancellation and reports back through signals
"""

import pytest

from services.member_service import UpdateStatus
from workers.desk_worker import DeskWorker

ROW = "00000001,Alice,Smith,1990-04-12,34,a@b.com,5551234567,Gold,Activated,{visits}"


def _run(service, action, member_id):
    """Runs the worker inline and collects what it emitted"""
    emitted = {"finished": [], "rejected": [], "error": []}
    w = DeskWorker(service, action, member_id)
    w.signals.finished.connect(emitted["finished"].append)
    w.signals.rejected.connect(emitted["rejected"].append)
    w.signals.error.connect(emitted["error"].append)
    w.run()
    return emitted


class TestDeskWorker:
    """Desk actions go through a QRunnable on the dashboard's one-thread pool"""

    def test_check_in(self, service, store, write_roster):
        write_roster(ROW.format(visits="2"))
        emitted = _run(service, "check_in", "00000001")

        assert emitted["finished"][0].status is UpdateStatus.UPDATED
        assert not emitted["rejected"] and not emitted["error"]
        assert store.read_all()[0][9] == "3"

    def test_cancel(self, service, store, write_roster):
        write_roster(ROW.format(visits="0"))
        emitted = _run(service, "cancel_membership", "00000001")

        assert emitted["finished"][0].member_id == "00000001"
        assert store.read_all()[0][8] == "Cancelled"

    def test_unknown_id_is_rejected(self, service, write_roster):
        write_roster(ROW.format(visits="0"))
        emitted = _run(service, "check_in", "00000099")

        assert not emitted["finished"]
        assert "00000099" in emitted["rejected"][0]

    def test_bad_visit_count_is_rejected(self, service, write_roster):
        write_roster(ROW.format(visits="abc"))
        emitted = _run(service, "check_in", "00000001")

        assert "abc" in emitted["rejected"][0]
        assert not emitted["error"]

    def test_unknown_action(self, service):
        with pytest.raises(ValueError):
            DeskWorker(service, "delete", "00000001")
