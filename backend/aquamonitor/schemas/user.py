from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    nombre: str
    correo: str
    fecha_creacion: datetime | None
    rol: str | None
