from datetime import date, time

from pydantic import BaseModel, ConfigDict


class AlertOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    fecha_alerta: date
    hora_alerta: time
    comentarios: str | None
    ph_valor: float | None
    luz_detectada: bool | None
    temperatura: float | None
