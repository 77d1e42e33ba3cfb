from pydantic import BaseModel, ConfigDict


class ConfigurationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    ph_min: float | None
    ph_max: float | None
    temperatura_min: float | None
    temperatura_max: float | None
    agitacion: float | None
    intervalo: int | None


class ConfigurationUpdate(BaseModel):
    """Partial update body. Unknown keys are dropped, null means "leave unchanged"."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    ph_min: float | None = None
    ph_max: float | None = None
    temperatura_min: float | None = None
    temperatura_max: float | None = None
    agitacion_recomendada: float | None = None
    intervalo: int | None = None


class ConfigurationUpdateResponse(BaseModel):
    ok: bool
    data: ConfigurationOut | None
