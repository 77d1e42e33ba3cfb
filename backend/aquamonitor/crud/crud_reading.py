from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from aquamonitor.models.reading import Reading

POINT_COLUMNS = (
    Reading.ph_valor.label("ph"),
    Reading.temperatura_valor.label("temperatura"),
    Reading.dia_registro,
    Reading.hora_registro.label("hora"),
)


class CRUDReading:
    async def get_latest(self, db: AsyncSession) -> Optional[Row]:
        result = await db.execute(
            select(
                Reading.ph_valor.label("ph"),
                Reading.temperatura_valor.label("temperatura"),
                Reading.luz_presente.label("luz"),
                Reading.hora_registro.label("hora"),
            )
            .order_by(Reading.fecha_registro.desc(), Reading.hora_registro.desc())
            .limit(1)
        )
        return result.first()

    async def get_maximums(self, db: AsyncSession, since: datetime) -> Dict[str, Any]:
        result = await db.execute(
            select(
                func.max(Reading.ph_valor).label("maxPh"),
                func.max(Reading.temperatura_valor).label("maxTemp"),
            ).where(Reading.fecha_registro >= since)
        )
        return dict(result.mappings().one())

    async def get_minimums(self, db: AsyncSession, since: datetime) -> Dict[str, Any]:
        result = await db.execute(
            select(
                func.min(Reading.ph_valor).label("minPh"),
                func.min(Reading.temperatura_valor).label("minTemp"),
            ).where(Reading.fecha_registro >= since)
        )
        return dict(result.mappings().one())

    async def get_since(self, db: AsyncSession, since: datetime) -> List[Row]:
        result = await db.execute(
            select(*POINT_COLUMNS)
            .where(Reading.fecha_registro >= since)
            .order_by(Reading.fecha_registro, Reading.hora_registro)
        )
        return list(result.all())

    async def get_window(self, db: AsyncSession, now: datetime, days: int) -> List[Row]:
        return await self.get_since(db, now - timedelta(days=days))


reading_crud = CRUDReading()
