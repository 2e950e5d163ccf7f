import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = (os.getenv("ARXIVSTAMP_LOG_LEVEL") or "WARNING").upper()
DEFAULT_SOURCE_FORMAT = (os.getenv("ARXIVSTAMP_SOURCE_FORMAT") or "text").lower()
JSON_STAMP_FIELD = os.getenv("ARXIVSTAMP_JSON_FIELD") or "stamp"
