from pathlib import Path

# Global Config (set by services.file_manager.init_paths)
BASE_FOLDER = None
MEMBER_DATA_FILE = None
LOG_FOLDER = None
CONFIG_FILE = Path.home() / ".sysengclub_config"

CLUB_NAME = "sysEng club"

# --- ROSTER FILE LAYOUT ---
CSV_HEADER = (
    "MemberID,FirstName,LastName,DOB,Age,Email,"
    "MobileNumber,MembershipLevel,MembershipStatus,NumberOfVisits"
)
DATE_FORMAT = "%Y-%m-%d"

COL_MEMBER_ID = 0
COL_MOBILE = 6
COL_STATUS = 8
COL_VISITS = 9

MEMBERSHIP_ACTIVATED = "Activated"
MEMBERSHIP_CANCELLED = "Cancelled"

MEMBERSHIP_LEVELS = ["Bronze", "Silver", "Gold", "Platinum"]

# --- DEFAULTS ---
DEFAULT_STARTING_MEMBER_ID = 0
DEFAULT_NUMBER_OF_VISITS = 0
MEMBER_ID_WIDTH = 8
MINIMUM_AGE = 18
