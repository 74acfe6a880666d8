from typing import List, Optional
from PySide6 import QtWidgets
from loguru import logger

from ui.dashboards.member_dashboard import MemberDashboard
from core.id_allocator import IdAllocator
from core.logging_setup import configure_logging
from core.record_store import RecordStore
from services.file_manager import load_or_setup_paths
from services.member_service import MemberService
import config


class ClubApp(QtWidgets.QApplication):
    """
    The main Application class that manages the application lifecycle.
    1. Sets up data paths and logging.
    2. Opens the roster and primes the ID allocator from it.
    3. Launches the front desk dashboard.
    """
    def __init__(self, args: List[str]):
        super().__init__(args)
        self.main_window: Optional[QtWidgets.QMainWindow] = None
        self.service: Optional[MemberService] = None

    def start(self) -> None:
        """Initializes the environment and shows the first screen."""
        # 1. Setup File System
        load_or_setup_paths()
        configure_logging(config.LOG_FOLDER)

        # 2. Roster + allocator (scanned once per session)
        store = RecordStore(config.MEMBER_DATA_FILE)
        allocator = IdAllocator(store)
        allocator.initialize()

        self.service = MemberService(store, allocator, on_duplicate=self.on_duplicate_mobile)

        # 3. Show Dashboard
        self.main_window = MemberDashboard(self.service)
        self.main_window.show()

    def on_duplicate_mobile(self, mobile_number: str) -> None:
        """The refused registration is reported by the dashboard; the app keeps running."""
        logger.info(f"Duplicate registration attempt for mobile {mobile_number}")
