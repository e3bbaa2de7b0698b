import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from tracker.services.transaction_client import DEFAULT_API_URL

# Load environment variables
load_dotenv()

DEFAULT_LOG_FILE = "logs/tracker_app.log"


def log_file_path() -> Path:
    """Log file from TRACKER_LOG_FILE, its folder created if missing."""
    path = Path(os.environ.get("TRACKER_LOG_FILE") or DEFAULT_LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging():
    level = os.environ.get("TRACKER_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        filename=log_file_path(),
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Add console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    logging.getLogger().addHandler(console_handler)


def main():
    setup_logging()

    # Tk is only needed once the window opens
    from tracker.ui.gui import create_main_window

    root = create_main_window()
    logging.getLogger(__name__).info(f"Transaction Tracker iniciado contra {os.environ.get('TRACKER_API_URL') or DEFAULT_API_URL}")
    root.mainloop()

if __name__ == "__main__":
    main()
