from typing import List

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from aquamonitor.models.alert import Alert


class CRUDAlert:
    async def get_all(self, db: AsyncSession) -> List[Row]:
        result = await db.execute(
            select(
                Alert.fecha_alerta,
                Alert.hora_alerta,
                Alert.comentarios,
                Alert.ph_valor,
                Alert.luz_detectada,
                Alert.temperatura,
            )
        )
        return list(result.all())


alert_crud = CRUDAlert()
