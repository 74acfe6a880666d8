import sys
from pathlib import Path
from PySide6 import QtWidgets
from loguru import logger
import config


def ensure_folder(p: Path) -> None:
    """Creates the folder if it does not exist."""
    p.mkdir(parents=True, exist_ok=True)


def init_paths(base_path: Path) -> None:
    """
    Initialize all global paths based on the selected base path.
    Sets up the Club Data folder, the roster file and the log folder.
    """
    config.BASE_FOLDER = base_path / "Club Data"
    ensure_folder(config.BASE_FOLDER)

    config.MEMBER_DATA_FILE = config.BASE_FOLDER / "members.csv"

    config.LOG_FOLDER = config.BASE_FOLDER / "Logs"
    ensure_folder(config.LOG_FOLDER)


def load_or_setup_paths() -> None:
    """
    Loads the data path from the local config file.
    If not found, prompts the user to select a folder via a dialog.
    """
    config_file = config.CONFIG_FILE

    # 1. Try to load existing config
    if config_file.exists():
        try:
            content = config_file.read_text().strip()
        except OSError as e:
            logger.warning(f"Could not read {config_file}, asking for the data folder again: {e}")
            content = ""
        if content:
            data_path = Path(content)
            if data_path.exists():
                init_paths(data_path)
                return

    # 2. No usable config: ask once through a folder dialog
    app = QtWidgets.QApplication.instance()
    if not app:
        app = QtWidgets.QApplication(sys.argv)

    msg = QtWidgets.QMessageBox()
    msg.setWindowTitle(f"{config.CLUB_NAME} - First Time Setup")
    msg.setText(f"Welcome to {config.CLUB_NAME}.\nPlease select a folder where the member roster will be stored.")
    msg.setIcon(QtWidgets.QMessageBox.Information)
    msg.exec()

    selected_dir = QtWidgets.QFileDialog.getExistingDirectory(
        None, "Select Data Storage Folder", str(Path.home())
    )

    if not selected_dir:
        QtWidgets.QMessageBox.critical(None, "Error", "Data storage path is required to continue.")
        sys.exit(0)

    data_path = Path(selected_dir)

    # 3. Save the selection for next time
    try:
        config_file.write_text(str(data_path))
        init_paths(data_path)
    except OSError as e:
        QtWidgets.QMessageBox.critical(None, "Error", f"Failed to save configuration: {e}")
        sys.exit(0)
