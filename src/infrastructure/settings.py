# src/infrastructure/settings.py

import os

from dotenv import load_dotenv

load_dotenv()


APP_TITLE = os.getenv("APP_TITLE", "Seat Selection Engine")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ISO 4217 code sent alongside integer prices; formatting is the client's job.
CURRENCY = os.getenv("CURRENCY", "VND")
