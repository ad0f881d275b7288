from enum import Enum

MILLISECONDS_PER_SECOND = 1000
DEFAULT_RETENTION_WINDOW_SECONDS = 3600
DEFAULT_POLL_INTERVAL_SECONDS = 5.0

CHART_DATA_KEY = "chartData"
LAST_TIMESTAMP_KEY = "lastTimestamp"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumStorageBackend(str, Enum):
    FILE = "file"
    REDIS = "redis"
