from datetime import datetime, timedelta
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aquamonitor.core.config import Settings, get_settings
from aquamonitor.core.database import get_db
from aquamonitor.core.errors import NotFound, ValidationError
from aquamonitor.crud import alert_crud, configuration_crud, reading_crud, user_crud
from aquamonitor.crud.crud_configuration import DEFAULT_CONFIGURATION_ID, build_update_values
from aquamonitor.schemas import (
    AlertOut,
    ConfigurationOut,
    ConfigurationUpdate,
    ConfigurationUpdateResponse,
    LatestReading,
    LoginRequest,
    MaxLastDay,
    MinLastDay,
    ReadingPoint,
    ReadingsSummary,
    TokenResponse,
    UserOut,
)
from aquamonitor.services import authenticate

router = APIRouter()

LAST_DAY, LAST_WEEK, LAST_MONTH = 1, 7, 30


def _serialize_points(rows: list[Any]) -> list[ReadingPoint]:
    return [ReadingPoint.model_validate(row) for row in rows]


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/api/login", response_model=TokenResponse)
async def login(
    request: Request,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    dummy_hash = request.app.state.dummy_password_hash
    token = await authenticate(db, settings, dummy_hash, payload.email, payload.password)
    return TokenResponse(token=token)


@router.get("/data/usuario", response_model=list[UserOut])
async def get_users(
    email: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
) -> list[UserOut]:
    rows = await user_crud.get_profiles(db, email=email)
    return [UserOut.model_validate(row) for row in rows]


@router.get("/data/mediciones", response_model=ReadingsSummary)
async def get_readings(db: AsyncSession = Depends(get_db)) -> ReadingsSummary:
    # Every window below is measured from this single instant.
    now = datetime.now()
    day_start = now - timedelta(days=LAST_DAY)

    latest = await reading_crud.get_latest(db)
    maximums = await reading_crud.get_maximums(db, since=day_start)
    minimums = await reading_crud.get_minimums(db, since=day_start)

    return ReadingsSummary(
        latest=LatestReading.model_validate(latest) if latest else None,
        maxLastDay=MaxLastDay(**maximums),
        minLastDay=MinLastDay(**minimums),
        lastDayData=_serialize_points(await reading_crud.get_window(db, now, days=LAST_DAY)),
        lastWeekData=_serialize_points(await reading_crud.get_window(db, now, days=LAST_WEEK)),
        lastMonthData=_serialize_points(await reading_crud.get_window(db, now, days=LAST_MONTH)),
    )


@router.get("/data/configuraciones", response_model=ConfigurationOut | None)
async def get_configuration(db: AsyncSession = Depends(get_db)) -> ConfigurationOut | None:
    row = await configuration_crud.get_active(db)
    return ConfigurationOut.model_validate(row) if row else None


@router.post("/data/configuraciones", response_model=ConfigurationUpdateResponse)
async def update_configuration(
    payload: ConfigurationUpdate | None = None,
    db: AsyncSession = Depends(get_db),
) -> ConfigurationUpdateResponse:
    changes = payload.model_dump(exclude_unset=True) if payload else {}
    values = build_update_values(changes)
    if not values:
        raise ValidationError("No se enviaron campos a actualizar")

    config_id = DEFAULT_CONFIGURATION_ID if changes.get("id") is None else changes["id"]
    matched = await configuration_crud.update_partial(db, config_id, values)
    if matched == 0:
        raise NotFound("Configuración no encontrada")

    row = await configuration_crud.get(db, config_id)
    return ConfigurationUpdateResponse(ok=True, data=ConfigurationOut.model_validate(row) if row else None)


@router.get("/data/alertas", response_model=list[AlertOut])
async def get_alerts(db: AsyncSession = Depends(get_db)) -> list[AlertOut]:
    rows = await alert_crud.get_all(db)
    return [AlertOut.model_validate(row) for row in rows]
