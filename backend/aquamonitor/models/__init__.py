from aquamonitor.models.alert import Alert
from aquamonitor.models.configuration import Configuration
from aquamonitor.models.reading import Reading
from aquamonitor.models.user import User

__all__ = ["Alert", "Configuration", "Reading", "User"]
