"""Application configuration and constants.

Project root, application identity used by QSettings, and the names of the
feature/observation targets the controllers keep data for.
"""

from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Identity (QSettings, QApplication)
APP_NAME = "ML Toolkit GUI"
ORGANIZATION_NAME = "MLToolkit"
STATE_DIR_NAME = "mlgui"

# Data targets
TARGET_TRAIN = "TRAIN"
TARGET_TEST = "TEST"
TARGETS = (TARGET_TRAIN, TARGET_TEST)

# Log file rotation
LOG_FILE_MAX_BYTES = 2 * 1024 * 1024
LOG_FILE_BACKUPS = 3
