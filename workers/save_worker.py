from PySide6 import QtCore
from services.member_service import MemberService


class WorkerSignals(QtCore.QObject):
    """
    Defines the signals available from a running worker thread.

    Attributes:
        finished (object): Emitted with the RegistrationResult.
        error (str): Emitted with an error message if registration raised.
    """
    finished = QtCore.Signal(object)
    error = QtCore.Signal(str)


class RegisterWorker(QtCore.QRunnable):
    """
    Background worker that registers a member and appends them to the roster.
    Keeps the form responsive while the roster file is scanned.
    """
    def __init__(self, service: MemberService, form: dict):
        super().__init__()
        self.service = service
        self.form = form
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            result = self.service.register(
                self.form["first_name"],
                self.form["last_name"],
                self.form["dob"],
                self.form["email"],
                self.form["mobile"],
                self.form["level"],
            )
            self.signals.finished.emit(result)
        except Exception as e:
            self.signals.error.emit(str(e))
