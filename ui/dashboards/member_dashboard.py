from PySide6 import QtWidgets, QtCore
from loguru import logger

import config
from services.member_service import MemberService, RegistrationResult, RegistrationStatus, UpdateResult, UpdateStatus
from services.validation_service import validate_registration

# Workers
from workers.save_worker import RegisterWorker
from workers.report_worker import RosterWorker
from workers.desk_worker import DeskWorker


class MemberDashboard(QtWidgets.QMainWindow):
    """
    The front desk window.
    - Register new members
    - Check members in / cancel memberships
    - View the roster
    """

    def __init__(self, service: MemberService):
        super().__init__()
        self.service = service

        self.setWindowTitle(f"{config.CLUB_NAME} - Front Desk")
        self.resize(1000, 700)

        # One thread: roster writes must not overlap
        self.pool = QtCore.QThreadPool()
        self.pool.setMaxThreadCount(1)

        self.init_ui()
        self.apply_style()

    def init_ui(self) -> None:
        cw = QtWidgets.QWidget()
        self.setCentralWidget(cw)
        layout = QtWidgets.QHBoxLayout(cw)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- SIDEBAR ---
        sidebar = QtWidgets.QVBoxLayout()
        sidebar.setContentsMargins(10, 20, 10, 10)
        sidebar.setSpacing(10)

        lbl = QtWidgets.QLabel("🏷️ FRONT DESK")
        lbl.setStyleSheet("color: #ffcc00; font-weight: bold; font-size: 16px; margin-bottom: 10px;")
        sidebar.addWidget(lbl)

        self.btn_add = QtWidgets.QPushButton("➕ Register Member")
        self.btn_desk = QtWidgets.QPushButton("⏱️ Check-In / Cancel")
        self.btn_roster = QtWidgets.QPushButton("📋 Roster")

        self.nav_buttons = [self.btn_add, self.btn_desk, self.btn_roster]
        for btn in self.nav_buttons:
            btn.setMinimumHeight(40)
            btn.setCheckable(True)
            sidebar.addWidget(btn)
        sidebar.addStretch()

        sw = QtWidgets.QWidget()
        sw.setLayout(sidebar)
        sw.setFixedWidth(200)
        sw.setStyleSheet("background: #111; border-right: 1px solid #333;")
        layout.addWidget(sw)

        # --- CONTENT AREA ---
        self.stacked = QtWidgets.QStackedWidget()
        layout.addWidget(self.stacked)

        self.page_add = QtWidgets.QWidget()
        self.init_add_page()
        self.stacked.addWidget(self.page_add)

        self.page_desk = QtWidgets.QWidget()
        self.init_desk_page()
        self.stacked.addWidget(self.page_desk)

        self.page_roster = QtWidgets.QWidget()
        self.init_roster_page()
        self.stacked.addWidget(self.page_roster)

        for i, btn in enumerate(self.nav_buttons):
            btn.clicked.connect(lambda _=False, i=i: self.switch_page(i))

        self.switch_page(0)

    def switch_page(self, index: int) -> None:
        self.stacked.setCurrentIndex(index)
        for i, btn in enumerate(self.nav_buttons):
            btn.setChecked(i == index)
        if index == 2:
            self.load_roster()

    # --- 1. REGISTER PAGE ---
    def init_add_page(self) -> None:
        layout = QtWidgets.QVBoxLayout(self.page_add)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(QtWidgets.QLabel("📝 Register New Member"))

        self.a_first = QtWidgets.QLineEdit()
        self.a_last = QtWidgets.QLineEdit()
        self.a_dob = QtWidgets.QLineEdit()
        self.a_dob.setPlaceholderText("YYYY-MM-DD")
        self.a_email = QtWidgets.QLineEdit()
        self.a_mobile = QtWidgets.QLineEdit()
        self.a_mobile.setPlaceholderText("10 digits")

        self.a_level = QtWidgets.QComboBox()
        self.a_level.addItems(config.MEMBERSHIP_LEVELS)

        form = QtWidgets.QFormLayout()
        form.addRow("First Name*", self.a_first)
        form.addRow("Last Name*", self.a_last)
        form.addRow("Date of Birth*", self.a_dob)
        form.addRow("Email*", self.a_email)
        form.addRow("Mobile*", self.a_mobile)
        form.addRow("Level*", self.a_level)
        layout.addLayout(form)

        self.btn_save = QtWidgets.QPushButton("💾 Register")
        self.btn_save.clicked.connect(self.do_register)
        layout.addWidget(self.btn_save)
        layout.addStretch()

    def do_register(self) -> None:
        form = {
            "first_name": self.a_first.text().strip(),
            "last_name": self.a_last.text().strip(),
            "dob": self.a_dob.text().strip(),
            "email": self.a_email.text().strip(),
            "mobile": self.a_mobile.text().strip(),
            "level": self.a_level.currentText(),
        }

        check = validate_registration(
            form["first_name"], form["last_name"], form["dob"], form["email"], form["mobile"]
        )
        if not check.is_valid:
            QtWidgets.QMessageBox.warning(self, "Check the form", check.reason)
            return

        self.btn_save.setEnabled(False)
        w = RegisterWorker(self.service, form)
        w.signals.finished.connect(self._registered)
        w.signals.error.connect(self._worker_failed)
        self.pool.start(w)

    def _registered(self, result: RegistrationResult) -> None:
        self.btn_save.setEnabled(True)

        if result.status is RegistrationStatus.REGISTERED:
            self.clear_add()
            QtWidgets.QMessageBox.information(
                self, "Success", f"{result.message}\nMembership ID: {result.member_id}"
            )
        elif result.status is RegistrationStatus.DUPLICATE_MOBILE:
            QtWidgets.QMessageBox.warning(
                self, "Existing Customer", "This mobile number is already registered."
            )
        else:
            QtWidgets.QMessageBox.critical(self, "Error", result.message)

    def clear_add(self) -> None:
        for field in [self.a_first, self.a_last, self.a_dob, self.a_email, self.a_mobile]:
            field.clear()

    # --- 2. CHECK-IN / CANCEL PAGE ---
    def init_desk_page(self) -> None:
        layout = QtWidgets.QVBoxLayout(self.page_desk)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(QtWidgets.QLabel("⏱️ Check-In & Cancellation"))

        box = QtWidgets.QGroupBox("Member")
        h = QtWidgets.QHBoxLayout(box)

        self.d_id = QtWidgets.QLineEdit()
        self.d_id.setPlaceholderText("Scan/Enter Membership ID")
        self.d_id.returnPressed.connect(self.do_checkin)

        b_in = QtWidgets.QPushButton("✅ Check In")
        b_in.setStyleSheet("background:#006600")
        b_in.clicked.connect(self.do_checkin)

        b_cancel = QtWidgets.QPushButton("🛑 Cancel Membership")
        b_cancel.setStyleSheet("background:#b71c1c")
        b_cancel.clicked.connect(self.do_cancel)

        h.addWidget(self.d_id)
        h.addWidget(b_in)
        h.addWidget(b_cancel)
        layout.addWidget(box)

        self.d_name = QtWidgets.QLabel("Name: -")
        self.d_name.setStyleSheet("font-size:20px;font-weight:bold;color:#fc0")
        self.d_status = QtWidgets.QLabel("Status: -")
        self.d_status.setStyleSheet("font-size:16px;font-weight:bold")
        self.d_visits = QtWidgets.QLabel("Visits: -")
        self.d_visits.setStyleSheet("font-size:14px;color:#ddd")

        layout.addWidget(self.d_name, alignment=QtCore.Qt.AlignCenter)
        layout.addWidget(self.d_status, alignment=QtCore.Qt.AlignCenter)
        layout.addWidget(self.d_visits, alignment=QtCore.Qt.AlignCenter)
        layout.addStretch()

    def _show_member(self, member_id: str) -> None:
        m = self.service.get_member_by_id(member_id)
        if not m:
            self.d_name.setText("Name: -")
            self.d_status.setText("NOT FOUND")
            self.d_visits.setText("Visits: -")
            return

        self.d_name.setText(m.full_name)
        self.d_status.setText(f"Status: {m.membership_status}")
        self.d_status.setStyleSheet(
            f"font-size:16px;font-weight:bold;color:{'#f00' if m.is_cancelled else '#0f0'}"
        )
        self.d_visits.setText(f"Visits: {m.visit_count}")

    def _run_desk_action(self, action: str) -> None:
        mid = self.d_id.text().strip()
        if not mid:
            return

        # Same single-thread pool as registrations: roster writes stay in order
        w = DeskWorker(self.service, action, mid)
        w.signals.finished.connect(self._desk_done)
        w.signals.rejected.connect(lambda message: self._desk_rejected(mid, message))
        w.signals.error.connect(self._worker_failed)
        self.pool.start(w)

    def _desk_done(self, result: UpdateResult) -> None:
        if result.status is UpdateStatus.ALREADY_CANCELLED:
            QtWidgets.QMessageBox.warning(self, "Cancelled", result.message)

        self._show_member(result.member_id)
        self.d_id.clear()

    def _desk_rejected(self, member_id: str, message: str) -> None:
        logger.warning(f"Front desk action failed for {member_id}: {message}")
        QtWidgets.QMessageBox.warning(self, "Not Possible", message)
        self._show_member(member_id)

    def do_checkin(self) -> None:
        self._run_desk_action("check_in")

    def do_cancel(self) -> None:
        mid = self.d_id.text().strip()
        if not mid:
            return
        confirm = QtWidgets.QMessageBox.question(
            self, "Confirm", f"Cancel membership {mid}? This cannot be undone."
        )
        if confirm == QtWidgets.QMessageBox.Yes:
            self._run_desk_action("cancel_membership")

    # --- 3. ROSTER PAGE ---
    def init_roster_page(self) -> None:
        layout = QtWidgets.QVBoxLayout(self.page_roster)
        layout.setContentsMargins(20, 20, 20, 20)

        h = QtWidgets.QHBoxLayout()
        h.addWidget(QtWidgets.QLabel("📋 Roster"))
        self.r_filter = QtWidgets.QComboBox()
        self.r_filter.addItems(["All", config.MEMBERSHIP_ACTIVATED, config.MEMBERSHIP_CANCELLED])
        self.r_filter.currentTextChanged.connect(lambda _: self.load_roster())
        h.addStretch()
        h.addWidget(self.r_filter)
        layout.addLayout(h)

        self.r_text = QtWidgets.QTextEdit()
        self.r_text.setReadOnly(True)
        layout.addWidget(self.r_text)

    def load_roster(self) -> None:
        status = self.r_filter.currentText()
        w = RosterWorker(self.service, "" if status == "All" else status)
        w.signals.finished.connect(self.r_text.setPlainText)
        w.signals.error.connect(self._worker_failed)
        self.pool.start(w)

    def _worker_failed(self, message: str) -> None:
        self.btn_save.setEnabled(True)
        QtWidgets.QMessageBox.critical(self, "Error", message)

    def apply_style(self) -> None:
        self.setStyleSheet("""
            QMainWindow{background:#0c0c0c;color:white}
            QLabel{color:white}
            QLineEdit,QComboBox,QTextEdit{padding:8px;background:#222;color:white;border:1px solid #444}
            QPushButton{padding:8px;background:#333;color:white;border:1px solid #555}
            QPushButton:hover{background:#ffcc00;color:black}
            QPushButton:checked{background:#b71c1c}
            QGroupBox{color:#ffcc00;border:1px solid #333;margin-top:10px;padding:10px}
        """)
