import logging
from typing import Any, Dict, Optional

from sqlalchemy import Row, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from aquamonitor.models.configuration import Configuration

logger = logging.getLogger(__name__)

DEFAULT_CONFIGURATION_ID = 1

# Request field -> column. Only these columns can ever appear in an UPDATE.
MUTABLE_FIELDS = {
    "ph_min": Configuration.ph_min,
    "ph_max": Configuration.ph_max,
    "temperatura_min": Configuration.temperatura_min,
    "temperatura_max": Configuration.temperatura_max,
    "agitacion_recomendada": Configuration.agitacion_recomendada,
    "intervalo": Configuration.intervalo,
}

OUTPUT_COLUMNS = (
    Configuration.ph_min,
    Configuration.ph_max,
    Configuration.temperatura_min,
    Configuration.temperatura_max,
    Configuration.agitacion_recomendada.label("agitacion"),
    Configuration.intervalo,
)


def build_update_values(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Keep allow-listed, non-null fields and key them by column name."""
    return {
        column.key: changes[field]
        for field, column in MUTABLE_FIELDS.items()
        if changes.get(field) is not None
    }


class CRUDConfiguration:
    async def get_active(self, db: AsyncSession) -> Optional[Row]:
        result = await db.execute(select(*OUTPUT_COLUMNS).order_by(Configuration.id).limit(1))
        return result.first()

    async def get(self, db: AsyncSession, id: int) -> Optional[Row]:
        result = await db.execute(select(*OUTPUT_COLUMNS).where(Configuration.id == id))
        return result.first()

    async def update_partial(self, db: AsyncSession, id: int, values: Dict[str, Any]) -> int:
        """Apply a single UPDATE and return the number of matched rows."""
        result = await db.execute(
            update(Configuration).where(Configuration.id == id).values(**values)
        )
        await db.commit()
        logger.info("Configuration %s updated: %s", id, sorted(values))
        return result.rowcount


configuration_crud = CRUDConfiguration()
