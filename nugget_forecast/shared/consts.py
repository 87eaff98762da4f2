from enum import Enum


class EnumEnvironment(str, Enum):
    """Deployment environment; selects the console log renderer."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
