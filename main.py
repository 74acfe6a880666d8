import sys
from ui.main_window import ClubApp

"""
Entry point for the club membership front desk.
Run this file to start the application.
"""

if __name__ == "__main__":
    # Create the Application instance
    app = ClubApp(sys.argv)

    # Custom start method (handles setup, roster and ID allocator)
    app.start()

    # Start the event loop
    sys.exit(app.exec())
