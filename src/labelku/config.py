#!/usr/bin/env python3
"""
LabelKu - Configuration Module

This module contains all configuration constants and paths used by the application.
"""

import logging
import os
from typing import Final

# ============================================================================
# Application Constants
# ============================================================================

APP_NAME: Final[str] = "LabelKu"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Generate shipping receipts for small label printers"
APP_AUTHOR: Final[str] = "LabelKu"


# ============================================================================
# Configuration Directory
# ============================================================================

CONFIG_DIR: Final[str] = os.path.expanduser("~/.config/labelku")
CONFIG_FILE_PATH: Final[str] = os.path.join(CONFIG_DIR, "settings.json")


# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL: int = logging.INFO
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOGGER_NAME: Final[str] = "LabelKu"


# ============================================================================
# Receipt Output
# ============================================================================

RECEIPT_FILENAME_TEMPLATE: Final[str] = "resi-{tracking_number}.pdf"
DOCUMENT_TITLE: Final[str] = "RESI PENGIRIMAN"
EMAIL_SUBJECT: Final[str] = "Resi Pengiriman"
