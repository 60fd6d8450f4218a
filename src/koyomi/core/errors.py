class KoyomiError(Exception):
    """Base error."""

class HolidayTableError(KoyomiError):
    """Raised when a holiday data file cannot be read or parsed."""

class ConfigError(KoyomiError):
    """Raised for invalid environment configuration."""
