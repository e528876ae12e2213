class ConfigurationError(ValueError):
    """Raised when a construct is declared with a missing or invalid parameter."""
