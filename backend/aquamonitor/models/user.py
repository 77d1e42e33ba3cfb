from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from aquamonitor.core.database import Base


class User(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    correo = Column(String(150), nullable=False, unique=True, index=True)
    contrasena = Column(String(255), nullable=False)  # bcrypt hash, never plaintext
    fecha_creacion = Column(DateTime, server_default=func.now())
    rol = Column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, correo={self.correo}, rol={self.rol})>"
