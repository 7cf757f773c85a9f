"""Entry point for python3 -m tui."""
# Configure logging BEFORE any other imports to prevent stdout pollution
import logging
from pathlib import Path

import config

# Redirect all logs to a file instead of stdout
log_file = Path(__file__).parent.parent / config.LOG_FILE
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=config.LOG_FORMAT,
    handlers=[logging.FileHandler(log_file, mode="w")],
    force=True,  # Override any existing configuration
)

from tui.app import SurebetCalculator

app = SurebetCalculator()
app.run()
