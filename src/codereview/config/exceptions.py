class SettingsError(ValueError):
    """Raised when an environment setting holds a value that cannot be used."""
    pass
