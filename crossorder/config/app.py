"""Module: crossorder.config.app

Date: 2026-10-19

Application-level configuration: package info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "crossorder"
APP_VERSION = "0.3.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging (off by default, the engine is usually embedded in a host app)
LOG_TO_FILE = False
LOG_FILE_LEVEL = "DEBUG"
LOG_FILE_DIR = "logs"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3

# Move notifications arrive at display refresh rate; their debug records
# are tagged dev_only and hidden from the console unless this is set.
SHOW_DEV_ONLY_IN_CONSOLE = False
