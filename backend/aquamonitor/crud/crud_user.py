from typing import List, Optional

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from aquamonitor.models.user import User


class CRUDUser:
    async def get_credentials(self, db: AsyncSession, email: str) -> Optional[Row]:
        """Return (id, contrasena) for the account with this email, if any."""
        result = await db.execute(
            select(User.id, User.contrasena).where(User.correo == email).limit(1)
        )
        return result.first()

    async def get_profiles(self, db: AsyncSession, email: Optional[str] = None) -> List[Row]:
        query = select(User.nombre, User.correo, User.fecha_creacion, User.rol)

        if email:
            query = query.where(User.correo == email)

        result = await db.execute(query)
        return list(result.all())


user_crud = CRUDUser()
