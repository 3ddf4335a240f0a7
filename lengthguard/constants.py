"""Infrastructure and technical constants."""

from typing import Final

# Technical configuration constants
DEFAULT_LOG_FILE: Final = "logs/lengthguard.log"
METER_NAME: Final = "lengthguard"
