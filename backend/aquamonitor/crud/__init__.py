from aquamonitor.crud.crud_alert import alert_crud
from aquamonitor.crud.crud_configuration import configuration_crud
from aquamonitor.crud.crud_reading import reading_crud
from aquamonitor.crud.crud_user import user_crud

__all__ = ["alert_crud", "configuration_crud", "reading_crud", "user_crud"]
