from sqlalchemy import Boolean, Column, Date, DateTime, Float, Integer, Time

from aquamonitor.core.database import Base


class Reading(Base):
    __tablename__ = "mediciones"

    id = Column(Integer, primary_key=True, index=True)
    ph_valor = Column(Float, nullable=True)
    temperatura_valor = Column(Float, nullable=True)
    luz_presente = Column(Boolean, nullable=True)
    dia_registro = Column(Date, nullable=False)
    hora_registro = Column(Time, nullable=False)
    fecha_registro = Column(DateTime, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Reading(fecha={self.fecha_registro}, ph={self.ph_valor}, temp={self.temperatura_valor})>"
