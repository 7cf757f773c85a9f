import os
from dotenv import load_dotenv

load_dotenv()

# Session defaults
DEFAULT_BANKROLL = float(os.getenv("DEFAULT_BANKROLL", "1000"))
DEFAULT_ROW_COUNT = int(os.getenv("DEFAULT_ROW_COUNT", "2"))

# Outcome counts offered by the row-count selector
ROW_COUNT_CHOICES = tuple(
    int(n) for n in os.getenv("ROW_COUNT_CHOICES", "2,3,4").split(",") if n.strip()
)

# Display-only currency label
CURRENCY = os.getenv("CURRENCY", "RUB")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "calculator.log")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
