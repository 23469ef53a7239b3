from .exceptions import SettingsError
from .settings import AppSettings, load_settings, configure_logging

__all__ = ["AppSettings", "SettingsError", "load_settings", "configure_logging"]
