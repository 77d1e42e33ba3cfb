from aquamonitor.core.config import Settings, get_settings, settings
from aquamonitor.core.database import Base, get_db

__all__ = ["Base", "Settings", "get_db", "get_settings", "settings"]
