from PySide6 import QtCore
from services.member_service import MemberService


class WorkerSignals(QtCore.QObject):
    """
    Attributes:
        finished (str): Emitted with the formatted roster text.
        error (str): Emitted with an error message if reading fails.
    """
    finished = QtCore.Signal(str)
    error = QtCore.Signal(str)


class RosterWorker(QtCore.QRunnable):
    """
    Background worker to build the roster listing, optionally filtered by
    status (Activated / Cancelled).
    """
    def __init__(self, service: MemberService, status: str = ""):
        super().__init__()
        self.service = service
        self.status = status
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            if self.status:
                members = self.service.get_members_by_status(self.status)
            else:
                members = self.service.list_members()

            lines = [
                f"{m.member_id} — {m.full_name} — {m.membership_level} — "
                f"{m.membership_status} — Visits: {m.visit_count}"
                for m in members
            ]
            self.signals.finished.emit("\n".join(lines) or "No members found.")
        except Exception as e:
            self.signals.error.emit(str(e))
