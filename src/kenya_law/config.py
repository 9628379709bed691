import os
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
DATA_DIR = os.getenv("KENYA_LAW_DATA_DIR", os.path.join(PROJECT_ROOT, "data"))

# Ingestion artifacts
SOURCE_DIR = os.getenv("KENYA_LAW_SOURCE_DIR", os.path.join(DATA_DIR, "source"))
SEED_DIR = os.getenv("KENYA_LAW_SEED_DIR", os.path.join(DATA_DIR, "seed"))
DB_PATH = os.getenv("KENYA_LAW_DB_PATH", os.path.join(DATA_DIR, "database.db"))

# Fetching (be respectful to government servers)
USER_AGENT = os.getenv(
    "FETCH_USER_AGENT",
    "Kenya-Law-Citations/0.1 (statute ingestion; contact: maintainers)",
)
FETCH_MIN_DELAY_MS = int(os.getenv("FETCH_MIN_DELAY_MS", "500"))
FETCH_MAX_RETRIES = int(os.getenv("FETCH_MAX_RETRIES", "3"))
FETCH_BACKOFF_BASE_S = float(os.getenv("FETCH_BACKOFF_BASE_S", "1.0"))
FETCH_TIMEOUT_S = float(os.getenv("FETCH_TIMEOUT_S", "45"))

# Parsing limits
MAX_PROVISION_CHARS = int(os.getenv("MAX_PROVISION_CHARS", "12000"))

# API
MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', '65536'))
API_KEY = os.getenv("API_KEY", "")
RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))
APP_ENV = os.getenv("APP_ENV", "production")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
MAX_CITATION_LENGTH = int(os.getenv("MAX_CITATION_LENGTH", "1000"))
