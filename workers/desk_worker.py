from PySide6 import QtCore
from core.errors import MemberStoreError
from services.member_service import MemberService


class WorkerSignals(QtCore.QObject):
    """
    Attributes:
        finished (object): Emitted with the UpdateResult.
        rejected (str): Emitted when the roster refuses the action (unknown ID, empty roster, bad value).
        error (str): Emitted on any other failure.
    """
    finished = QtCore.Signal(object)
    rejected = QtCore.Signal(str)
    error = QtCore.Signal(str)


class DeskWorker(QtCore.QRunnable):
    """
    Background worker for front desk actions (check-in, cancellation).
    Runs on the same pool as registrations so roster rewrites never overlap.
    """
    ACTIONS = ("check_in", "cancel_membership")

    def __init__(self, service: MemberService, action: str, member_id: str):
        super().__init__()
        if action not in self.ACTIONS:
            raise ValueError(f"Unknown desk action: {action}")
        self.service = service
        self.action = action
        self.member_id = member_id
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            result = getattr(self.service, self.action)(self.member_id)
            self.signals.finished.emit(result)
        except MemberStoreError as e:
            self.signals.rejected.emit(str(e))
        except Exception as e:
            self.signals.error.emit(str(e))
