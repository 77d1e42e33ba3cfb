from aquamonitor.schemas.alert import AlertOut
from aquamonitor.schemas.auth import LoginRequest, TokenResponse
from aquamonitor.schemas.configuration import ConfigurationOut, ConfigurationUpdate, ConfigurationUpdateResponse
from aquamonitor.schemas.reading import LatestReading, MaxLastDay, MinLastDay, ReadingPoint, ReadingsSummary
from aquamonitor.schemas.user import UserOut

__all__ = [
    "AlertOut",
    "ConfigurationOut",
    "ConfigurationUpdate",
    "ConfigurationUpdateResponse",
    "LatestReading",
    "LoginRequest",
    "MaxLastDay",
    "MinLastDay",
    "ReadingPoint",
    "ReadingsSummary",
    "TokenResponse",
    "UserOut",
]
