from datetime import date, time

from pydantic import BaseModel, ConfigDict


class LatestReading(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    ph: float | None
    temperatura: float | None
    luz: bool | None
    hora: time


class ReadingPoint(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    ph: float | None
    temperatura: float | None
    dia_registro: date
    hora: time


class MaxLastDay(BaseModel):
    maxPh: float | None = None
    maxTemp: float | None = None


class MinLastDay(BaseModel):
    minPh: float | None = None
    minTemp: float | None = None


class ReadingsSummary(BaseModel):
    latest: LatestReading | None
    maxLastDay: MaxLastDay
    minLastDay: MinLastDay
    lastDayData: list[ReadingPoint]
    lastWeekData: list[ReadingPoint]
    lastMonthData: list[ReadingPoint]
